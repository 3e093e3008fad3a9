"""
Listening socket discovery.

This module runs `lsof` restricted to TCP sockets in the LISTEN state and
parses its column output into RawSocketRecord instances. Parsing is
best-effort: lines that do not look like a listening socket are skipped,
never reported as errors, since lsof output varies slightly across versions.
"""

import logging
from typing import List, Optional

from ..config import get_config
from ..models.config import ToolsConfig
from ..models.report import RawSocketRecord
from ..validation import ToolExecutionFailed
from .commands import run_command

logger = logging.getLogger(__name__)

# -i: internet sockets, -P: numeric ports, -n: numeric hosts,
# -sTCP:LISTEN: server sockets only, never established/outbound connections
LSOF_ARGS = ["-i", "-P", "-n", "-sTCP:LISTEN"]

# COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
MIN_LSOF_FIELDS = 9
_NAME_FIELD = 0
_PID_FIELD = 1
_PROTOCOL_FIELD = 7
_ADDRESS_FIELD = 8


def parse_lsof_line(line: str) -> Optional[RawSocketRecord]:
    """Parse one lsof data line, returning None if it is not usable.

    Examples:
        >>> parse_lsof_line("nginx 100 root 6u IPv4 0x1 0t0 TCP *:80 (LISTEN)")
        RawSocketRecord(process_name='nginx', pid=100, protocol='TCP', address='*:80')
        >>> parse_lsof_line("launchd 1 root 7u IPv4 0x1 0t0 TCP *:http (LISTEN)") is None
        True
    """
    parts = line.split()
    if len(parts) < MIN_LSOF_FIELDS:
        return None

    try:
        pid = int(parts[_PID_FIELD])
    except ValueError:
        logger.debug(f"Skipping lsof line with non-numeric PID: {line!r}")
        return None
    if pid < 0:
        return None

    record = RawSocketRecord(
        process_name=parts[_NAME_FIELD],
        pid=pid,
        protocol=parts[_PROTOCOL_FIELD],
        address=parts[_ADDRESS_FIELD],
    )
    # Service-name aliases ("*:http") and malformed addresses are dropped
    port = record.port
    if not port or not (port.isascii() and port.isdigit()):
        logger.debug(f"Skipping lsof line with non-numeric port: {line!r}")
        return None
    return record


def parse_lsof_output(output: str) -> List[RawSocketRecord]:
    """Parse full lsof output, skipping the header line."""
    records = []
    for line in output.splitlines()[1:]:
        record = parse_lsof_line(line)
        if record is not None:
            records.append(record)
    return records


def list_listening_sockets(tools: Optional[ToolsConfig] = None) -> List[RawSocketRecord]:
    """Enumerate listening TCP sockets on this host.

    Args:
        tools: Tool settings; the loaded application config when omitted.

    Returns:
        One RawSocketRecord per usable lsof line, in output order.

    Raises:
        ToolUnavailable: lsof is missing or not executable.
        ToolExecutionFailed: lsof exited with a non-zero status.
        ToolTimeout: lsof did not finish in time.
    """
    tools = tools or get_config().tools
    returncode, stdout, stderr = run_command(
        [tools.lsof, *LSOF_ARGS], timeout=tools.timeout_seconds
    )
    if returncode != 0:
        logger.error(f"{tools.lsof} command failed with status {returncode}: {stderr.strip()}")
        raise ToolExecutionFailed(
            tools.lsof,
            f"{tools.lsof} command failed",
            returncode=returncode,
            stderr=stderr,
        )

    records = parse_lsof_output(stdout)
    logger.debug(f"Parsed {len(records)} listening socket records from {tools.lsof}")
    return records
