"""
Built-in rules for amass validation.

Provides factory functions that return Check instances. Every rule is stated
as the condition that REJECTS a value.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from .checks import Check, lift_predicate, transform


def Empty(message: str = "Must not be empty") -> Check:
    """
    Reject empty values ("", [], {}, None).

    Usage:
        Empty("Name must not be empty")
    """

    def is_empty(x: Any) -> bool:
        return x is None or (hasattr(x, "__len__") and len(x) == 0)

    return lift_predicate(is_empty, message, name="Empty")


def IsNone(message: str = "Required value is missing") -> Check:
    """Reject None."""
    return lift_predicate(lambda x: x is None, message, name="IsNone")


def LongerThan(n: int, message: str | None = None) -> Check:
    """
    Reject values whose length exceeds ``n``.

    Usage:
        LongerThan(7, "Maximum length of 7 chars exceeded")
    """
    return lift_predicate(
        lambda x: len(x) > n,
        message or f"Maximum length of {n} exceeded",
        name="LongerThan",
    )


def ShorterThan(n: int, message: str | None = None) -> Check:
    """Reject values whose length is below ``n``."""
    return lift_predicate(
        lambda x: len(x) < n,
        message or f"Minimum length of {n} not reached",
        name="ShorterThan",
    )


def NotMatching(pattern: str, message: str | None = None) -> Check:
    """
    Reject strings that do not fully match a regex pattern.

    Usage:
        NotMatching(r"[a-z]+")
        NotMatching(r"\\d{3}-\\d{4}", "Expected a phone number")
    """
    compiled = re.compile(pattern)

    def rejects(x: Any) -> bool:
        return not isinstance(x, str) or compiled.fullmatch(x) is None

    return lift_predicate(
        rejects, message or f"Must match pattern: {pattern}", name="NotMatching"
    )


def NotAlpha(message: str = "Must contain only letters") -> Check:
    """
    Reject strings containing anything other than letters.

    The empty string passes; pair with Empty() to reject it.
    """
    return lift_predicate(
        lambda x: len(x) > 0 and not x.isalpha(), message, name="NotAlpha"
    )


def Below(value: Any, message: str | None = None) -> Check:
    """
    Reject values less than ``value``.

    Usage:
        Below(18, "You must be at least 18 to buy beer")
    """
    return lift_predicate(
        lambda x: x < value, message or f"Must be >= {value}", name="Below"
    )


def Above(value: Any, message: str | None = None) -> Check:
    """Reject values greater than ``value``."""
    return lift_predicate(
        lambda x: x > value, message or f"Must be <= {value}", name="Above"
    )


def NotIn(values: set | frozenset | list | tuple, message: str | None = None) -> Check:
    """
    Reject values outside a set of allowed values.

    Usage:
        NotIn({"active", "inactive", "pending"})
    """
    container = frozenset(values)
    return lift_predicate(
        lambda x: x not in container,
        message or f"Must be one of: {sorted(container, key=repr)}",
        name="NotIn",
    )


def NotInstance(t: type | tuple[type, ...], message: str | None = None) -> Check:
    """Reject values that are not instances of ``t``."""
    if message is None:
        names = t if isinstance(t, tuple) else (t,)
        message = f"Expected {' or '.join(n.__name__ for n in names)}"
    return lift_predicate(lambda x: not isinstance(x, t), message, name="NotInstance")


def Strip() -> Check:
    """Transform: strip surrounding whitespace from a string."""
    return transform(lambda x: x.strip(), name="Strip")


def Parse(fn: Callable[[Any], Any], message: str) -> Check:
    """
    Transform: parse the value, failing with ``message`` on ValueError/TypeError.

    Usage:
        Parse(int, "Age must be a whole number")
    """
    return transform(fn, message, name="Parse")
