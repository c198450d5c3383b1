"""
Outcome types for amass validation.

Provides the Valid/Invalid sum type and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """Successful outcome carrying the (possibly transformed) value."""

    value: T

    def is_valid(self) -> bool:
        return True

    def is_invalid(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Valid[U]:
        return Valid(fn(self.value))

    def and_then(self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain a dependent validation. Runs only on success."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """
    Failed outcome carrying one or more error messages, first-detected-first.

    An Invalid without messages cannot be built:

        Invalid(())              # ValueError
        Invalid("too short")     # ("too short",)
        Invalid(["a", "b"])      # ("a", "b")
    """

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        errors = self.errors
        if isinstance(errors, str):
            errors = (errors,)
        errors = tuple(errors)
        if not errors:
            raise ValueError("Invalid requires at least one error message")
        for msg in errors:
            if not isinstance(msg, str):
                raise TypeError(
                    f"Error messages must be str, got {type(msg).__name__}"
                )
        object.__setattr__(self, "errors", errors)

    def is_valid(self) -> bool:
        return False

    def is_invalid(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Invalid:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Invalid:
        return self

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Invalid: {list(self.errors)}")

    def unwrap_or(self, default: T) -> T:
        return default

    def __bool__(self) -> bool:
        return False


# Type aliases
Outcome = Union[Valid[T], Invalid]
CheckFn = Callable[[Any], "Valid[Any] | Invalid"]
RejectFn = Callable[[Any], bool]
