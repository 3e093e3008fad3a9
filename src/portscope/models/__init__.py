"""
Data models for the port report.

Configuration Models:
- OS tool names and timeouts
- Report pipeline settings

Report Models:
- Raw socket records parsed from `lsof`
- Per-PID aggregates built while correlating and enriching
- Report rows (PortInfo) and their per-PID children (PidInfo)

All models use type hints and dataclasses.
"""

# Configuration models
from .config import AppConfig, ReportConfig, ToolsConfig

# Report models
from .report import (
    GroupKey,
    PidAggregate,
    PidInfo,
    PortInfo,
    ProcessDetails,
    RawSocketRecord,
    port_sort_key,
)

__all__ = [
    # Configuration
    "AppConfig",
    "ReportConfig",
    "ToolsConfig",
    # Report
    "GroupKey",
    "PidAggregate",
    "PidInfo",
    "PortInfo",
    "ProcessDetails",
    "RawSocketRecord",
    "port_sort_key",
]
