"""
Report data models.

These structures carry data from raw `lsof` lines through the per-PID
aggregate to the rows handed to a UI. Everything here is transient: a fresh
set is built for every report request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Set, Tuple


@dataclass(frozen=True)
class RawSocketRecord:
    """One parsed line of listening-socket output."""

    process_name: str
    pid: int
    protocol: str
    # "host:port" or "*:port"
    address: str

    @property
    def port(self) -> str:
        """The text after the last ':' of the address."""
        return self.address.rsplit(":", 1)[-1]


class ProcessDetails(NamedTuple):
    """Ownership and resource usage of a single process, as reported by `ps`."""

    user: str
    cpu: str
    mem: str
    command: str


class GroupKey(NamedTuple):
    """Identity of a logical program: PIDs sharing it are reported together."""

    process_name: str
    command: str


def port_sort_key(port: str) -> int:
    """Numeric sort key for a port string; unparsable ports sort as 0."""
    try:
        return int(port)
    except ValueError:
        return 0


@dataclass
class PidAggregate:
    """
    Everything known about one PID while the report is being assembled.

    Ports keep their order of first appearance and are never repeated.
    The enrichment fields stay empty strings when `ps` gave no answer.
    """

    pid: int
    process_name: str
    ports: List[str] = field(default_factory=list)
    protocols: Set[str] = field(default_factory=set)
    user: str = ""
    cpu: str = ""
    mem: str = ""
    command: str = ""

    def add_port(self, port: str) -> None:
        if port not in self.ports:
            self.ports.append(port)

    def add_protocol(self, protocol: str) -> None:
        self.protocols.add(protocol)

    def apply_enrichment(self, details: ProcessDetails) -> None:
        self.user = details.user
        self.cpu = details.cpu
        self.mem = details.mem
        self.command = details.command

    def sorted_ports(self) -> List[str]:
        # sorted() is stable, so equal keys keep first-appearance order
        return sorted(self.ports, key=port_sort_key)

    @property
    def group_key(self) -> GroupKey:
        return GroupKey(self.process_name, self.command)


@dataclass(frozen=True)
class PidInfo:
    """One PID of a report row."""

    pid: int
    # Comma-and-space joined, numerically sorted
    ports: str
    user: str
    cpu: str
    mem: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pid": self.pid,
            "ports": self.ports,
            "user": self.user,
            "cpu": self.cpu,
            "mem": self.mem,
        }


@dataclass(frozen=True)
class PortInfo:
    """
    One report row: a logical program and the PIDs running it.

    ``pids`` is ordered by PID ascending.
    """

    process_name: str
    command: str
    pids: Tuple[PidInfo, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the plain structure consumed by UI clients."""
        return {
            "process_name": self.process_name,
            "command": self.command,
            "pids": [pid_info.to_dict() for pid_info in self.pids],
        }
