"""
Per-process enrichment.

This module queries `ps` for one PID at a time and extracts the owning user,
CPU and memory percentages, and the full command line. Failures are absorbed:
a process that vanished between socket listing and enrichment simply keeps
empty metadata.
"""

import logging
from typing import Optional

from ..config import get_config
from ..models.config import ToolsConfig
from ..models.report import ProcessDetails
from ..validation import ToolError
from .commands import run_command

logger = logging.getLogger(__name__)

# Trailing '=' suppresses the header line
PS_FORMAT = "user=,%cpu=,%mem=,command="


def parse_ps_output(output: str) -> Optional[ProcessDetails]:
    """Split one line of `ps -o user=,%cpu=,%mem=,command=` output.

    The first three whitespace-separated tokens are user, CPU% and MEM%;
    everything after them is the command line, re-joined with single spaces.

    Returns:
        ProcessDetails, or None if fewer than four tokens are present.

    Examples:
        >>> parse_ps_output("www  0.0  0.1 nginx: worker process")
        ProcessDetails(user='www', cpu='0.0', mem='0.1', command='nginx: worker process')
        >>> parse_ps_output("") is None
        True
    """
    tokens = output.split()
    if len(tokens) < 4:
        return None
    user, cpu, mem = tokens[:3]
    return ProcessDetails(user=user, cpu=cpu, mem=mem, command=" ".join(tokens[3:]))


def enrich_process(pid: int, tools: Optional[ToolsConfig] = None) -> Optional[ProcessDetails]:
    """Look up ownership and resource usage for a single PID.

    Args:
        pid: Process ID to query.
        tools: Tool settings; the loaded application config when omitted.

    Returns:
        ProcessDetails, or None when ps is unavailable, fails, times out or
        returns nothing usable. Never raises for tool problems.
    """
    tools = tools or get_config().tools
    try:
        returncode, stdout, _ = run_command(
            [tools.ps, "-p", str(pid), "-o", PS_FORMAT],
            timeout=tools.timeout_seconds,
        )
    except ToolError as e:
        logger.debug(f"Enrichment skipped for PID {pid}: {e}")
        return None

    if returncode != 0:
        logger.debug(f"Enrichment skipped for PID {pid}: {tools.ps} exited with {returncode}")
        return None

    details = parse_ps_output(stdout.strip())
    if details is None:
        logger.debug(f"Enrichment skipped for PID {pid}: unusable {tools.ps} output {stdout!r}")
    return details
