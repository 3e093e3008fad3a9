"""
Entry points for UI clients.

Both functions raise PortscopeError subclasses on failure; ``str(error)`` is
the message to show the user.
"""

import logging
from typing import Any, List

from .models.report import PortInfo
from .report import build_report
from .system.terminator import terminate_process

logger = logging.getLogger(__name__)


def list_ports() -> List[PortInfo]:
    """Return the current listening-port report."""
    logger.debug("list_ports called")
    return build_report()


def kill_process(pid: Any) -> str:
    """Forcefully kill ``pid`` and return a confirmation message."""
    logger.debug(f"kill_process called for PID {pid}")
    return terminate_process(pid)
