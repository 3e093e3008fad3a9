"""
Pytest configuration and shared fixtures for the portscope test suite.

This module provides sample tool output, a fake tool runner that stands in
for lsof/ps/kill, and an in-memory configuration.
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from portscope.models import AppConfig, ReportConfig, ToolsConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Sample tool output
# ============================================================================

LSOF_HEADER = "COMMAND     PID   USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME"


def lsof_line(name: str, pid: int, address: str, user: str = "root", protocol: str = "TCP") -> str:
    """Build one lsof -i -P -n -sTCP:LISTEN data line."""
    return f"{name:<10} {pid:>5} {user:>6}    6u  IPv4 0x5f1e2d3c4b5a6978      0t0  {protocol} {address} (LISTEN)"


def lsof_output(*lines: str) -> str:
    return "\n".join([LSOF_HEADER, *lines]) + "\n"


@pytest.fixture
def sample_lsof_output():
    """A realistic listing covering grouping, duplicates and IPv6."""
    return lsof_output(
        lsof_line("nginx", 200, "*:8080"),
        lsof_line("nginx", 100, "*:80"),
        lsof_line("nginx", 100, "[::]:80"),
        lsof_line("postgres", 310, "127.0.0.1:5432", user="postgres"),
        lsof_line("postgres", 310, "[::1]:5432", user="postgres"),
        lsof_line("Python", 4242, "127.0.0.1:8000", user="dev"),
        lsof_line("python3", 4300, "*:9000", user="dev"),
    )


@pytest.fixture
def sample_ps_outputs():
    """ps -o user=,%cpu=,%mem=,command= output keyed by PID."""
    return {
        100: "root   0.0  0.1 nginx: master\n",
        200: "root   0.0  0.1 nginx: master\n",
        310: "postgres   1.5  2.3 /usr/lib/postgresql/16/bin/postgres -D /var/lib/postgresql/16/main\n",
        4242: "dev  12.0  0.8 /usr/bin/python3 -m http.server 8000\n",
        4300: "dev   0.3  0.4 python3   app.py   --port 9000\n",
    }


# ============================================================================
# Fake tool runner
# ============================================================================

Response = Union[Tuple[int, str, str], Exception, Callable[[List[str]], Tuple[int, str, str]]]


class FakeToolRunner:
    """
    Drop-in replacement for ``run_command`` driven by canned responses.

    ``responses`` maps a tool name to a (returncode, stdout, stderr) tuple,
    an exception instance to raise, or a callable taking the argument list.
    ``ps_outputs`` maps a PID to the stdout ps should print for it; PIDs
    without an entry get ps's "no such process" exit status 1.
    """

    def __init__(self, responses: Dict[str, Response] = None, ps_outputs: Dict[int, str] = None):
        self.responses = dict(responses or {})
        self.ps_outputs = dict(ps_outputs or {})
        self.calls: List[List[str]] = []

    def __call__(self, args, timeout=None):
        self.calls.append(list(args))
        tool = args[0]
        if tool == "ps" and tool not in self.responses:
            pid = int(args[args.index("-p") + 1])
            if pid in self.ps_outputs:
                return 0, self.ps_outputs[pid], ""
            return 1, "", ""
        response = self.responses[tool]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(list(args))
        return response

    def calls_for(self, tool: str) -> List[List[str]]:
        return [call for call in self.calls if call[0] == tool]


@pytest.fixture
def fake_runner_factory(monkeypatch):
    """Install a FakeToolRunner in every module that runs OS tools."""

    def install(responses=None, ps_outputs=None) -> FakeToolRunner:
        runner = FakeToolRunner(responses, ps_outputs)
        for module in (
            "portscope.system.sockets",
            "portscope.system.processes",
            "portscope.system.terminator",
        ):
            monkeypatch.setattr(f"{module}.run_command", runner)
        return runner

    return install


# ============================================================================
# Configuration
# ============================================================================


@pytest.fixture
def app_config():
    """Default tool names, sequential enrichment."""
    return AppConfig(tools=ToolsConfig(timeout_seconds=5.0), report=ReportConfig(max_workers=1))


@pytest.fixture
def installed_config(monkeypatch, app_config):
    """
    Make ``get_config()`` return ``app_config`` without touching the disk.
    """
    monkeypatch.setattr("portscope.config.manager._CONFIG", app_config)
    yield app_config
    monkeypatch.setattr("portscope.config.manager._CONFIG", None)

