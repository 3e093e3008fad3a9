"""
Report assembly: correlating listening sockets with process metadata.
"""

from .aggregator import (
    build_report,
    enrich_aggregates,
    fold_socket_records,
    group_aggregates,
    resolve_worker_count,
)

__all__ = [
    "build_report",
    "enrich_aggregates",
    "fold_socket_records",
    "group_aggregates",
    "resolve_worker_count",
]
