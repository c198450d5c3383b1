"""
amass - accumulating validation.

Usage:
    from amass import Below, Empty, ValidationPlan, run_plan, run_single

    name_checks = [Empty("Name must not be empty")]
    age_checks = [Below(18, "You must be at least 18 to buy beer")]

    plan = ValidationPlan.of(name_checks, age_checks, combiner=Person)
    run_plan(plan, ("", 17))
    # Invalid(errors=("Name must not be empty", "You must be at least 18 to buy beer"))
"""

from .checks import Check, lift_predicate, to_check, transform
from .context import ValidationConfig, current_config, validation_context
from .decorator import check, validates
from .engine import ValidationPlan, combine, run_plan, run_single
from .rules import (
    Above,
    Below,
    Empty,
    IsNone,
    LongerThan,
    NotAlpha,
    NotIn,
    NotInstance,
    NotMatching,
    Parse,
    ShorterThan,
    Strip,
)
from .types import Invalid, Outcome, Valid

__all__ = [
    # Outcome types
    "Valid",
    "Invalid",
    "Outcome",
    # Checks
    "Check",
    "lift_predicate",
    "transform",
    "to_check",
    "check",
    # Engine
    "ValidationPlan",
    "run_single",
    "run_plan",
    "combine",
    "validates",
    # Configuration
    "ValidationConfig",
    "current_config",
    "validation_context",
    # Rules
    "Empty",
    "IsNone",
    "LongerThan",
    "ShorterThan",
    "NotMatching",
    "NotAlpha",
    "Below",
    "Above",
    "NotIn",
    "NotInstance",
    "Strip",
    "Parse",
]
