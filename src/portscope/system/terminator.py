"""
Forceful process termination.

Sends SIGKILL through the `kill` utility. There is no retry and no check
that the process actually went away; callers re-query the report for that.
"""

import logging
from typing import Optional

from ..config import get_config
from ..models.config import ToolsConfig
from ..validation import TerminationFailed, validate_pid
from .commands import run_command

logger = logging.getLogger(__name__)

KILL_SIGNAL = "-9"


def terminate_process(pid: int, tools: Optional[ToolsConfig] = None) -> str:
    """Send an immediate, non-catchable termination signal to ``pid``.

    Args:
        pid: Process ID to kill. Must be a positive integer.
        tools: Tool settings; the loaded application config when omitted.

    Returns:
        A confirmation message naming the PID.

    Raises:
        ValidationError: ``pid`` is not a positive integer.
        ToolUnavailable: kill is missing or not executable.
        TerminationFailed: kill exited non-zero; carries kill's stderr verbatim.
        ToolTimeout: kill did not finish in time.
    """
    pid = validate_pid(pid)
    tools = tools or get_config().tools

    logger.info(f"Attempting to kill process with PID: {pid}")
    returncode, stdout, stderr = run_command(
        [tools.kill, KILL_SIGNAL, str(pid)], timeout=tools.timeout_seconds
    )
    logger.debug(f"{tools.kill} exit status: {returncode}, stdout: {stdout!r}, stderr: {stderr!r}")

    if returncode != 0:
        error = TerminationFailed(pid, returncode=returncode, stderr=stderr, tool=tools.kill)
        logger.error(str(error))
        raise error

    logger.info(f"Process {pid} killed successfully")
    return f"Process {pid} killed successfully"
