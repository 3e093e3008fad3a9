"""
Exception types and error handling helpers.

This module provides the error taxonomy raised by the OS tool wrappers and
the logging helpers used wherever an error is reported or re-raised.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class PortscopeError(Exception):
    """
    Base class for all errors surfaced to a portscope caller.

    ``str(error)`` is always a complete human-readable message, so thin
    clients can display it without inspecting the error type.
    """


class ValidationError(PortscopeError):
    """
    Exception raised when validation fails.

    This is the main exception type used throughout the validation system.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class ToolError(PortscopeError):
    """An external OS utility could not produce a usable result."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool


class ToolUnavailable(ToolError):
    """The utility binary is missing or cannot be executed."""


class ToolExecutionFailed(ToolError):
    """The utility ran but exited with a failure status."""

    def __init__(self, tool: str, message: str, returncode: int, stderr: str = ""):
        super().__init__(tool, message)
        self.returncode = returncode
        self.stderr = stderr


class ToolTimeout(ToolError):
    """The utility did not finish within the configured timeout."""

    def __init__(self, tool: str, message: str, timeout: float):
        super().__init__(tool, message)
        self.timeout = timeout


class TerminationFailed(ToolExecutionFailed):
    """The kill signal was rejected or the target process does not exist."""

    def __init__(self, pid: int, returncode: int, stderr: str, tool: str = "kill"):
        super().__init__(
            tool,
            f"Failed to kill process {pid}: {stderr}",
            returncode=returncode,
            stderr=stderr,
        )
        self.pid = pid


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    # Handle both enum and string severity values
    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


# Convenience aliases for specific error types
def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI-level error and exit the process."""
    exit_code = kwargs.pop('exit_code', 1)
    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)
    sys.exit(exit_code)
