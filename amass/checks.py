"""
Check value objects for amass validation.

A Check wraps a function returning an Outcome with a name (used in fault
messages) and a flag marking it as a transform step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import structlog

from .context import current_config, describe_error
from .types import CheckFn, Invalid, Outcome, RejectFn, Valid

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Check:
    """
    Immutable validation rule.

    Calling a check never raises: a fault inside ``fn`` is reported as a
    single error naming the check.
    """

    fn: CheckFn
    name: str = "check"
    transform: bool = False

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"Check fn must be callable, got {type(self.fn).__name__}")

    def __call__(self, value: Any) -> Outcome[Any]:
        """
        Run the check against a value.

        Returns:
            Valid(value) if the check passes (a transform may change the value)
            Invalid(errors) if it fails or faults
        """
        try:
            outcome = self.fn(value)
        except Exception as e:
            return self._fault(e)

        if not isinstance(outcome, (Valid, Invalid)):
            return self._fault(
                TypeError(f"expected Valid or Invalid, got {type(outcome).__name__}")
            )
        return outcome

    def _fault(self, error: Exception) -> Invalid:
        config = current_config()
        if config.log_faults:
            logger.warning(
                "check_faulted", check=self.name, error=describe_error(error)
            )
        return Invalid((config.format_fault(self.name, error),))

    def named(self, name: str) -> Check:
        """Return a new check with a different name."""
        return Check(fn=self.fn, name=name, transform=self.transform)


def lift_predicate(predicate: RejectFn, message: str, name: str | None = None) -> Check:
    """
    Build a check from a reject predicate.

    The predicate states the FAILURE condition: when it returns True the
    check fails with ``message``, otherwise the value passes unchanged.

    Usage:
        too_young = lift_predicate(lambda age: age < 18, "You must be at least 18 to buy beer")
        too_young(17)   # Invalid(("You must be at least 18 to buy beer",))
        too_young(42)   # Valid(42)
    """
    if not callable(predicate):
        raise TypeError("predicate must be callable")

    def check(value: Any) -> Outcome[Any]:
        if predicate(value):
            return Invalid((message,))
        return Valid(value)

    return Check(fn=check, name=name or _name_of(predicate))


def transform(
    fn: Callable[[Any], Any], message: str | None = None, name: str | None = None
) -> Check:
    """
    Build a transform check whose result is seen by the checks after it.

    If ``fn`` raises ValueError or TypeError the check fails with ``message``;
    without a message the failure is reported as a fault.

    Usage:
        transform(str.strip)
        transform(int, "age must be a number")
    """
    if not callable(fn):
        raise TypeError("transform fn must be callable")

    def check(value: Any) -> Outcome[Any]:
        try:
            return Valid(fn(value))
        except (ValueError, TypeError):
            if message is None:
                raise
            return Invalid((message,))

    return Check(fn=check, name=name or _name_of(fn), transform=True)


def to_check(c: Any) -> Check:
    """
    Coerce a value to a Check.

    Conversion rules:
        Check -> pass through
        Callable -> Check(fn=callable)
    """
    if isinstance(c, Check):
        return c
    if callable(c):
        return Check(fn=c, name=_name_of(c))
    raise TypeError(f"Cannot convert {type(c).__name__} to check")


def _name_of(fn: Any) -> str:
    name = getattr(fn, "__name__", None)
    if not name or name == "<lambda>":
        return "check"
    return name
