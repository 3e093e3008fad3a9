"""
Integration tests against the real OS utilities.

Skipped when lsof/ps are not installed. A throwaway listening socket is
opened so there is at least one known entry in the report.
"""

import os
import socket

import pytest

from portscope.models import AppConfig, ReportConfig, ToolsConfig
from portscope.report import build_report
from portscope.system import check_tool_installed, enrich_process
from portscope.validation import ToolExecutionFailed

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (check_tool_installed("lsof") and check_tool_installed("ps")),
        reason="lsof and ps are required",
    ),
]


@pytest.fixture
def listening_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    yield sock.getsockname()[1]
    sock.close()


def test_own_listening_socket_is_reported(listening_socket):
    config = AppConfig(tools=ToolsConfig(timeout_seconds=30.0), report=ReportConfig(max_workers=2))
    try:
        rows = build_report(config)
    except ToolExecutionFailed as e:
        pytest.skip(f"lsof is not usable here: {e}")

    mine = [
        pid_info
        for row in rows
        for pid_info in row.pids
        if pid_info.pid == os.getpid()
    ]
    if not mine:
        pytest.skip("lsof cannot see sockets of this process in this environment")
    assert str(listening_socket) in mine[0].ports.split(", ")


def test_enrich_current_process():
    details = enrich_process(os.getpid(), ToolsConfig(timeout_seconds=30.0))
    if details is None:
        pytest.skip("ps does not support the requested output format here")
    assert details.command
