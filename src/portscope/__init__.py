"""
portscope: see which processes are listening on which TCP ports.

The package correlates `lsof` listening sockets with `ps` process details,
groups PIDs of the same program, and can forcibly kill a process.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Report and configuration data structures
- validation: Input validation and the error taxonomy
- system: Wrappers around lsof, ps and kill
- report: Correlation, grouping and sorting
- cli: Command-line interface

Usage:
    From command line:
        portscope list
        portscope kill 1234

    Programmatically:
        from portscope import list_ports, kill_process
        for row in list_ports():
            print(row.process_name, [p.pid for p in row.pids])
"""

# Main interfaces
from .api import kill_process, list_ports
from .config import clear_config_cache, get_config, set_config_path
from .report import build_report

# Model classes for external use
from .models import (
    AppConfig,
    PidInfo,
    PortInfo,
    ReportConfig,
    ToolsConfig,
)

# Errors
from .validation import (
    PortscopeError,
    TerminationFailed,
    ToolError,
    ToolExecutionFailed,
    ToolTimeout,
    ToolUnavailable,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "kill_process",
    "list_ports",
    "build_report",
    "get_config",
    "clear_config_cache",
    "set_config_path",
    # Models
    "AppConfig",
    "PidInfo",
    "PortInfo",
    "ReportConfig",
    "ToolsConfig",
    # Errors
    "PortscopeError",
    "TerminationFailed",
    "ToolError",
    "ToolExecutionFailed",
    "ToolTimeout",
    "ToolUnavailable",
    "ValidationError",
]
