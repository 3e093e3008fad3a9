"""
Port report assembly.

This module joins the listening socket records with per-process metadata
and shapes the result into report rows:

1. Fold socket records into one PidAggregate per PID (ports de-duplicated
   in order of first appearance, protocols collected as a set).
2. Enrich every aggregate with user/CPU/MEM/command, optionally across a
   thread pool. Each worker writes only its own aggregate.
3. Group aggregates by (process name, command) so forked workers of the
   same program share a row.
4. Sort children by PID and rows by case-insensitive process name, with
   command and exact name as tie-breaks, so identical input always yields
   an identical report.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional

import psutil

from ..config import get_config
from ..models.config import AppConfig
from ..models.report import (
    GroupKey,
    PidAggregate,
    PidInfo,
    PortInfo,
    ProcessDetails,
    RawSocketRecord,
)
from ..system.processes import enrich_process
from ..system.sockets import list_listening_sockets

logger = logging.getLogger(__name__)

Enricher = Callable[[int], Optional[ProcessDetails]]


def fold_socket_records(records: Iterable[RawSocketRecord]) -> Dict[int, PidAggregate]:
    """Collapse socket records into one aggregate per distinct PID.

    The process name of a PID is taken from its first record.
    """
    aggregates: Dict[int, PidAggregate] = {}
    for record in records:
        aggregate = aggregates.get(record.pid)
        if aggregate is None:
            aggregate = PidAggregate(pid=record.pid, process_name=record.process_name)
            aggregates[record.pid] = aggregate
        aggregate.add_port(record.port)
        aggregate.add_protocol(record.protocol)
    return aggregates


def resolve_worker_count(max_workers: Optional[int], pid_count: int) -> int:
    """Number of enrichment workers to use for ``pid_count`` PIDs."""
    if pid_count <= 0:
        return 0
    limit = max_workers if max_workers is not None else (psutil.cpu_count() or 1)
    return max(1, min(limit, pid_count))


def enrich_aggregates(
    aggregates: Dict[int, PidAggregate],
    enricher: Enricher,
    max_workers: Optional[int] = None,
) -> None:
    """Apply ``enricher`` to every aggregate in place.

    A None result from the enricher leaves the aggregate's empty defaults.
    """
    pids = sorted(aggregates)
    workers = resolve_worker_count(max_workers, len(pids))
    if workers == 0:
        return

    if workers == 1:
        results = [enricher(pid) for pid in pids]
    else:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="Enricher") as executor:
            results = list(executor.map(enricher, pids))

    missing = 0
    for pid, details in zip(pids, results):
        if details is None:
            missing += 1
            continue
        aggregates[pid].apply_enrichment(details)

    if missing:
        logger.debug(f"No process details for {missing} of {len(pids)} PIDs")


def _row_sort_key(row: PortInfo):
    return (row.process_name.lower(), row.command, row.process_name)


def group_aggregates(aggregates: Iterable[PidAggregate]) -> List[PortInfo]:
    """Group aggregates by (process name, command) into sorted report rows."""
    groups: Dict[GroupKey, List[PidAggregate]] = {}
    for aggregate in aggregates:
        groups.setdefault(aggregate.group_key, []).append(aggregate)

    rows = []
    for key, members in groups.items():
        members.sort(key=lambda aggregate: aggregate.pid)
        pids = tuple(
            PidInfo(
                pid=aggregate.pid,
                ports=", ".join(aggregate.sorted_ports()),
                user=aggregate.user,
                cpu=aggregate.cpu,
                mem=aggregate.mem,
            )
            for aggregate in members
        )
        rows.append(PortInfo(process_name=key.process_name, command=key.command, pids=pids))

    rows.sort(key=_row_sort_key)
    return rows


def build_report(
    config: Optional[AppConfig] = None,
    enricher: Optional[Enricher] = None,
) -> List[PortInfo]:
    """Build the full port report for this host.

    Args:
        config: Application config; the loaded singleton when omitted.
        enricher: Per-PID metadata lookup; `ps` based enrich_process by default.

    Returns:
        Report rows, sorted and de-duplicated.

    Raises:
        ToolUnavailable, ToolExecutionFailed, ToolTimeout: lsof could not
        produce a socket list. Enrichment problems never raise.
    """
    config = config or get_config()
    if enricher is None:
        def enricher(pid: int) -> Optional[ProcessDetails]:
            return enrich_process(pid, tools=config.tools)

    records = list_listening_sockets(tools=config.tools)
    aggregates = fold_socket_records(records)
    enrich_aggregates(aggregates, enricher, max_workers=config.report.max_workers)
    rows = group_aggregates(aggregates.values())

    logger.info(f"Returning {len(rows)} unique process groups covering {len(aggregates)} PIDs")
    return rows
