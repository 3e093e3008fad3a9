"""
Validation and error handling for the portscope package.

This module provides input validation, the OS tool error taxonomy and
error handling helpers with consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    PortscopeError,
    TerminationFailed,
    ToolError,
    ToolExecutionFailed,
    ToolTimeout,
    ToolUnavailable,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    MAX_PID,
    validate_executable_name,
    validate_pid,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Errors
    "ErrorSeverity",
    "PortscopeError",
    "TerminationFailed",
    "ToolError",
    "ToolExecutionFailed",
    "ToolTimeout",
    "ToolUnavailable",
    "ValidationError",
    # Handlers
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    # Validators
    "MAX_PID",
    "validate_executable_name",
    "validate_pid",
    "validate_positive_float",
    "validate_positive_integer",
]
