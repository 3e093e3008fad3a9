"""
Configuration data models.

This module contains the configuration structures for the external OS tools
and the report pipeline, loaded from `config.toml`.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ToolsConfig:
    """
    Names (or paths) of the OS utilities and the per-call timeout.
    """

    # [tools]
    lsof: str = "lsof"
    ps: str = "ps"
    kill: str = "kill"
    # Upper bound for any single utility invocation, in seconds.
    timeout_seconds: float = 10.0


@dataclass
class ReportConfig:
    """
    Settings for building the port report.
    """

    # [report]
    # Maximum enrichment workers. None means psutil.cpu_count(); 1 runs sequentially.
    max_workers: Optional[int] = None


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    tools: ToolsConfig = field(default_factory=ToolsConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
