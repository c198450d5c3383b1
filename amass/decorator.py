"""
The @check and @validates decorators.
"""

from functools import wraps
from typing import Any, Callable

from .checks import Check
from .engine import ValidationPlan, run_plan
from .types import Invalid, Valid


def check(
    _func: Callable | None = None, *, name: str | None = None, transform: bool = False
) -> Any:
    """
    Decorator that turns a function into a Check.

    The decorated function may return:
    - Valid / Invalid: used as-is
    - None or True: the value passes unchanged
    - False: the value fails with "Check '<name>' failed"
    - a str or list of str: the value fails with those messages (an empty
      list passes)

    Can be used with or without arguments:
        @check
        def no_spaces(s): ...

        @check(name="normalize", transform=True)
        def normalize(s): return Valid(s.lower())

    Args:
        name: Name reported in fault messages (defaults to the function name).
        transform: If True, a Valid result replaces the value seen by later checks.
    """

    def decorator(func: Callable) -> Check:
        check_name = name or func.__name__

        @wraps(func)
        def wrapper(value: Any) -> Any:
            result = func(value)
            if isinstance(result, (Valid, Invalid)):
                return result
            if result is None or result is True:
                return Valid(value)
            if result is False:
                return Invalid((f"Check '{check_name}' failed",))
            if isinstance(result, str):
                return Invalid((result,))
            if isinstance(result, (list, tuple)):
                return Invalid(tuple(result)) if result else Valid(value)
            raise TypeError(f"Unsupported check result: {type(result).__name__}")

        return Check(fn=wrapper, name=check_name, transform=transform)

    # Handle both @check and @check(...) syntax
    if _func is not None:
        return decorator(_func)
    else:
        return decorator


def validates(*field_checks: Any, **named_field_checks: Any) -> Callable:
    """
    Decorator that makes a function the combiner of a validation plan.

    Calling the decorated function validates its arguments field by field and
    returns an Outcome; the function body only runs when every field is valid.

        @validates(name=[Empty("Name must not be empty")],
                   age=[Below(18, "You must be at least 18 to buy beer")])
        def make_person(name, age):
            return Person(name=name, age=age)

        make_person("", 17)        # Invalid(("Name must not be empty", "You must ..."))
        make_person(name="Dennis", age=42)

    The underlying plan is available as ``make_person.plan``.
    """
    if field_checks and named_field_checks:
        raise ValueError("Use either positional or named fields, not both")

    def decorator(func: Callable) -> Callable:
        plan = ValidationPlan(
            fields=field_checks or tuple(named_field_checks.values()),
            combiner=func,
            names=tuple(named_field_checks) if named_field_checks else None,
        )

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if plan.names is None:
                if kwargs:
                    raise TypeError(
                        f"{func.__name__}() takes positional arguments only"
                    )
                return run_plan(plan, args)

            if len(args) > plan.arity:
                raise TypeError(
                    f"{func.__name__}() takes {plan.arity} arguments, got {len(args)}"
                )
            inputs = dict(zip(plan.names, args))
            overlap = set(inputs) & set(kwargs)
            if overlap:
                raise TypeError(
                    f"{func.__name__}() got multiple values for {sorted(overlap)}"
                )
            inputs.update(kwargs)
            return run_plan(plan, inputs)

        wrapper.plan = plan  # type: ignore[attr-defined]
        return wrapper

    return decorator
