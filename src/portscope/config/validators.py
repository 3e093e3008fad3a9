"""
Configuration validation utilities.

Turns the raw `[tools]` and `[report]` tables into validated config models.
"""

import logging
from typing import Any, Dict

from ..models.config import AppConfig, ReportConfig, ToolsConfig
from ..validation import (
    ValidationError,
    validate_executable_name,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

_TOOLS_KEYS = {"lsof", "ps", "kill", "timeout_seconds"}
_REPORT_KEYS = {"max_workers"}


def _require_table(data: Any, section: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(f"[{section}] must be a table", field_name=section, value=data)
    return data


def _warn_unknown_keys(data: Dict[str, Any], known: set, section: str) -> None:
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning(f"Ignoring unknown keys in [{section}]: {', '.join(unknown)}")


def validate_tools_config(tools_data: Dict[str, Any]) -> ToolsConfig:
    """
    Validate and create a ToolsConfig from raw configuration data.

    Args:
        tools_data: Raw `[tools]` table from TOML

    Returns:
        Validated ToolsConfig instance

    Raises:
        ValidationError: If validation fails
    """
    tools_data = _require_table(tools_data, "tools")
    _warn_unknown_keys(tools_data, _TOOLS_KEYS, "tools")
    defaults = ToolsConfig()

    return ToolsConfig(
        lsof=validate_executable_name(
            tools_data.get("lsof", defaults.lsof), field_name="tools.lsof"
        ),
        ps=validate_executable_name(
            tools_data.get("ps", defaults.ps), field_name="tools.ps"
        ),
        kill=validate_executable_name(
            tools_data.get("kill", defaults.kill), field_name="tools.kill"
        ),
        timeout_seconds=validate_positive_float(
            tools_data.get("timeout_seconds", defaults.timeout_seconds),
            min_value=0.1,
            max_value=300.0,  # 5m maximum
            field_name="tools.timeout_seconds",
        ),
    )


def validate_report_config(report_data: Dict[str, Any]) -> ReportConfig:
    """
    Validate and create a ReportConfig from raw configuration data.

    Raises:
        ValidationError: If validation fails
    """
    report_data = _require_table(report_data, "report")
    _warn_unknown_keys(report_data, _REPORT_KEYS, "report")

    max_workers = report_data.get("max_workers")
    if max_workers is not None:
        max_workers = validate_positive_integer(
            max_workers,
            min_value=1,
            max_value=256,
            field_name="report.max_workers",
        )
    return ReportConfig(max_workers=max_workers)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """Validate a whole parsed config.toml document."""
    return AppConfig(
        tools=validate_tools_config(config_data.get("tools", {})),
        report=validate_report_config(config_data.get("report", {})),
    )
