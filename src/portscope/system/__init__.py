"""
System interaction utilities.

This module wraps the OS utilities the report is built from:

- Command execution with bounded timeouts and a tool error taxonomy
- Listening socket enumeration through `lsof`
- Per-process enrichment through `ps`
- Forceful termination through `kill -9`
"""

# Command execution
from .commands import check_tool_installed, run_command

# Socket listing
from .sockets import list_listening_sockets, parse_lsof_line, parse_lsof_output

# Process enrichment
from .processes import enrich_process, parse_ps_output

# Termination
from .terminator import terminate_process

__all__ = [
    # Commands
    "check_tool_installed",
    "run_command",
    # Sockets
    "list_listening_sockets",
    "parse_lsof_line",
    "parse_lsof_output",
    # Processes
    "enrich_process",
    "parse_ps_output",
    # Termination
    "terminate_process",
]
