"""
Context manager for validation configuration (fault message, fault logging).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_FAULT_MESSAGE = "Check '{name}' raised {error}"


def describe_error(error: BaseException) -> str:
    """Render an exception as ``Type: message``, tolerating a broken __str__."""
    try:
        detail = str(error)
    except Exception:
        return type(error).__name__
    return f"{type(error).__name__}: {detail}" if detail else type(error).__name__


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    fault_message: str = DEFAULT_FAULT_MESSAGE
    log_faults: bool = True

    def __post_init__(self) -> None:
        try:
            self.fault_message.format(name="check", error="Exception")
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise ValueError(
                f"Invalid fault_message template {self.fault_message!r}: "
                "only {name} and {error} are available"
            ) from e

    def format_fault(self, name: str, error: BaseException) -> str:
        return self.fault_message.format(name=name, error=describe_error(error))


# Context variable for the active configuration
_config: ContextVar[ValidationConfig] = ContextVar(
    "validation_config", default=ValidationConfig()
)


def current_config() -> ValidationConfig:
    """Return the configuration active in the current context."""
    return _config.get()


@contextmanager
def validation_context(
    *, fault_message: str | None = None, log_faults: bool | None = None
):
    """
    Context manager for validation configuration.

    Args:
        fault_message: Template for the error reported when a check raises.
                       Receives ``name`` (the check name) and ``error``.
        log_faults: If False, faulting checks are not logged.

    Unset arguments inherit from the enclosing context.

    Raises:
        ValueError: If fault_message uses fields other than {name} and {error}.

    Example:
        from amass import run_single, validation_context

        with validation_context(fault_message="{name} is broken"):
            run_single(checks, value)  # Invalid(["lookup is broken"])
    """
    parent = _config.get()
    config = ValidationConfig(
        fault_message=parent.fault_message if fault_message is None else fault_message,
        log_faults=parent.log_faults if log_faults is None else log_faults,
    )
    token = _config.set(config)
    try:
        yield config
    finally:
        _config.reset(token)
