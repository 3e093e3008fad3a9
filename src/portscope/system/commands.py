"""
Command execution utilities.

This module runs the external OS utilities (lsof, ps, kill) with a bounded
timeout and translates launch failures into the tool error taxonomy.
"""

import logging
import os
import shutil
import subprocess
from typing import Dict, List, Optional, Tuple

from ..validation import ToolTimeout, ToolUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def tool_environment() -> Dict[str, str]:
    """Environment for utility children; LC_ALL=C keeps output in the C locale."""
    env = os.environ.copy()
    env["LC_ALL"] = "C"
    return env


def run_command(
    args: List[str], timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
) -> Tuple[int, str, str]:
    """Execute a utility and capture its output.

    The command is run without a shell. Launch failures and timeouts raise;
    a non-zero exit status does not, the caller decides what it means.

    Args:
        args: Executable followed by its arguments.
        timeout: Seconds before the child is killed, None for no limit.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).

    Raises:
        ToolUnavailable: The executable is missing or cannot be executed.
        ToolTimeout: The executable did not finish within ``timeout``.

    Note:
        Uses UTF-8 decoding with error replacement, since process names and
        command lines may contain arbitrary bytes.
    """
    tool = args[0]
    logger.debug(f"Executing command: {args}")
    try:
        process = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=tool_environment(),
            timeout=timeout,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        logger.error(f"Failed to execute {tool}: {type(e).__name__}: {e}")
        raise ToolUnavailable(tool, f"Failed to execute {tool}: {e}") from e
    except subprocess.TimeoutExpired as e:
        logger.error(f"{tool} did not finish within {timeout}s")
        raise ToolTimeout(
            tool, f"{tool} did not finish within {timeout} seconds", timeout=timeout
        ) from e
    except OSError as e:
        logger.error(f"Failed to execute {tool}: {type(e).__name__}: {e}")
        raise ToolUnavailable(tool, f"Failed to execute {tool}: {e}") from e

    logger.debug(f"{tool} exited with status {process.returncode}")
    return process.returncode, process.stdout, process.stderr


def check_tool_installed(name: str) -> bool:
    """Check if an executable is available on the system PATH.

    Returns:
        True if the tool is found, False otherwise.
    """
    return shutil.which(name) is not None
