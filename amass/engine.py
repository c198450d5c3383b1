"""
Validation engine: runs checks, accumulates every failure, combines fields.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

import structlog
from pydantic import ValidationError

from .checks import Check, _name_of, to_check
from .context import current_config, describe_error
from .types import Invalid, Outcome, Valid

logger = structlog.get_logger()

Field = tuple[Check, ...]


@dataclass(frozen=True, slots=True)
class ValidationPlan:
    """
    Immutable description of which checks apply to which field and how the
    validated fields are combined.

    Usage:
        plan = ValidationPlan(
            fields=([Empty("Name must not be empty")], [Below(18, "Too young")]),
            combiner=Person,
        )
        run_plan(plan, ("Dennis", 42))  # Valid(Person(...))

    A plan is safe to share between threads; it holds no mutable state.
    """

    fields: tuple[Field, ...]
    combiner: Callable[..., Any]
    names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not callable(self.combiner):
            raise TypeError("combiner must be callable")

        fields = tuple(_to_field(f) for f in self.fields)
        object.__setattr__(self, "fields", fields)

        if self.names is not None:
            names = tuple(self.names)
            if len(names) != len(fields):
                raise ValueError(
                    f"Got {len(names)} field names for {len(fields)} fields"
                )
            if len(set(names)) != len(names):
                raise ValueError(f"Duplicate field names: {names}")
            object.__setattr__(self, "names", names)

    @classmethod
    def of(
        cls, /, *fields: Any, combiner: Callable[..., Any], **named_fields: Any
    ) -> ValidationPlan:
        """
        Build a plan from positional or keyword field checks.

        Usage:
            ValidationPlan.of(name_checks, age_checks, combiner=Person)
            ValidationPlan.of(name=name_checks, age=age_checks, combiner=Person)

        Named fields pass their values to the combiner as keyword arguments.
        ``combiner`` is reserved here; use ``ValidationPlan(..., names=...)``
        for a field of that name.
        """
        if not callable(combiner):
            raise ValueError(
                "combiner must be callable ('combiner' cannot be used as a field name "
                "with ValidationPlan.of)"
            )
        if fields and named_fields:
            raise ValueError("Use either positional or named fields, not both")
        if named_fields:
            return cls(
                fields=tuple(named_fields.values()),
                combiner=combiner,
                names=tuple(named_fields),
            )
        return cls(fields=fields, combiner=combiner)

    @property
    def arity(self) -> int:
        return len(self.fields)

    def validate(self, *inputs: Any, **named_inputs: Any) -> Outcome[Any]:
        """Shorthand for ``run_plan(plan, inputs)``."""
        if named_inputs:
            if inputs:
                raise ValueError("Use either positional or named inputs, not both")
            return run_plan(self, named_inputs)
        return run_plan(self, inputs)


def run_single(checks: Sequence[Any] | Check, value: Any) -> Outcome[Any]:
    """
    Run every check against a value and accumulate all failures.

    No check short-circuits the others. Checks observe the input as left by
    the most recent successful transform check (the original value when the
    field has no transform).

    Returns:
        Valid(value) if every check passes
        Invalid(errors) with all failing messages in check order
    """
    errors: list[str] = []
    current = value

    for c in _to_field(checks):
        result = c(current)
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        elif c.transform:
            current = result.value

    return Invalid(tuple(errors)) if errors else Valid(current)


def combine(
    outcomes: Sequence[Outcome[Any]],
    fn: Callable[..., Any],
    names: Sequence[str] | None = None,
) -> Outcome[Any]:
    """
    Combine independent outcomes, accumulating errors in order.

    If every outcome is Valid, ``fn`` is called with their values (as keyword
    arguments when ``names`` is given) and its result wrapped in Valid.
    Otherwise ``fn`` is never called.

    A pydantic ValidationError raised by ``fn`` is reported as one error per
    pydantic error; any other exception becomes a single fault message.
    """
    errors: list[str] = []
    values: list[Any] = []

    for outcome in outcomes:
        match outcome:
            case Valid(value=v):
                values.append(v)
            case Invalid(errors=errs):
                errors.extend(errs)
            case _:
                raise TypeError(
                    f"Expected Valid or Invalid, got {type(outcome).__name__}"
                )

    if errors:
        return Invalid(tuple(errors))

    try:
        if names is not None:
            return Valid(fn(**dict(zip(names, values))))
        return Valid(fn(*values))
    except ValidationError as e:
        return Invalid(tuple(_format_pydantic_error(err) for err in e.errors()))
    except Exception as e:
        config = current_config()
        name = _name_of(fn)
        if config.log_faults:
            logger.warning(
                "combine_faulted", combiner=name, error=describe_error(e)
            )
        return Invalid((config.format_fault(name, e),))


def run_plan(plan: ValidationPlan, inputs: Sequence[Any] | Mapping[str, Any]) -> Outcome[Any]:
    """
    Validate every field of a plan and combine the results.

    Args:
        plan: The validation plan
        inputs: One input per field, in field order; or for a plan with named
                fields, a mapping by field name (missing names are None)

    Returns:
        Valid(combiner(...)) if every field is valid
        Invalid(errors) with every failing field's errors in field order

    Raises:
        ValueError: If the number of inputs does not match the plan
        TypeError: If a mapping is given for a plan without field names
    """
    if isinstance(inputs, Mapping):
        if plan.names is None:
            raise TypeError("Mapping inputs require a plan with named fields")
        unknown = set(inputs) - set(plan.names)
        if unknown:
            raise ValueError(f"Unknown fields: {sorted(unknown)}")
        values = tuple(inputs.get(name) for name in plan.names)
    else:
        values = tuple(inputs)
        if len(values) != plan.arity:
            raise ValueError(
                f"Plan expects {plan.arity} inputs, got {len(values)}"
            )

    outcomes = [run_single(field, value) for field, value in zip(plan.fields, values)]
    result = combine(outcomes, plan.combiner, plan.names)

    logger.debug(
        "plan_validated",
        fields=plan.arity,
        valid=result.is_valid(),
        error_count=0 if isinstance(result, Valid) else len(result.errors),
    )
    return result


def _to_field(checks: Any) -> Field:
    """Normalize one field's checks to a tuple of Check."""
    if isinstance(checks, Check):
        return (checks,)
    if isinstance(checks, (str, bytes)) or not isinstance(checks, Sequence):
        if callable(checks):
            return (to_check(checks),)
        raise TypeError(
            f"Field checks must be a sequence of checks, got {type(checks).__name__}"
        )
    return tuple(to_check(c) for c in checks)


def _format_pydantic_error(err: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]
