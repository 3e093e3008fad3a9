"""
Input validation functions.

Used by the configuration loader and by the public entry points that accept
values from a UI or the command line.
"""

from typing import Any, Optional

from .exceptions import ValidationError

# Largest PID any supported platform hands out (Linux pid_max upper bound).
MAX_PID = 4194304


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    # bool is an int subclass; True must not sneak in as 1
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if isinstance(value, float) and value != int_value:
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a positive float.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_pid(value: Any, field_name: str = "pid") -> int:
    """
    Validate a process ID coming from a caller.

    PID 0 and negative values are rejected: ``kill`` interprets them as
    process-group targets rather than a single process.
    """
    return validate_positive_integer(
        value, min_value=1, max_value=MAX_PID, field_name=field_name
    )


def validate_executable_name(value: Any, field_name: str = "executable") -> str:
    """
    Validate a configured tool name or path.

    Only the shape is checked here; whether the binary exists is decided when
    it is run, so a missing tool surfaces as ToolUnavailable at call time.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    stripped = value.strip()
    if any(ch.isspace() for ch in stripped):
        raise ValidationError(
            f"{field_name} must be a single executable name or path, got '{value}'",
            field_name=field_name,
            value=value
        )
    return stripped

