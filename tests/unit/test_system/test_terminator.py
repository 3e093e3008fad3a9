"""
Unit tests for forceful process termination.
"""

import pytest

from portscope.models import ToolsConfig
from portscope.system.terminator import terminate_process
from portscope.validation import (
    TerminationFailed,
    ToolExecutionFailed,
    ToolUnavailable,
    ValidationError,
)


@pytest.mark.unit
class TestTerminateProcess:
    """Test cases for terminate_process."""

    def test_sends_sigkill(self, fake_runner_factory):
        runner = fake_runner_factory({"kill": (0, "", "")})
        message = terminate_process(1234, ToolsConfig())

        assert runner.calls == [["kill", "-9", "1234"]]
        assert message == "Process 1234 killed successfully"

    def test_accepts_numeric_string(self, fake_runner_factory):
        runner = fake_runner_factory({"kill": (0, "", "")})
        terminate_process("77", ToolsConfig())
        assert runner.calls == [["kill", "-9", "77"]]

    def test_failure_carries_stderr_verbatim(self, fake_runner_factory):
        stderr = "kill: (50) - No such process\n"
        fake_runner_factory({"kill": (1, "", stderr)})

        with pytest.raises(TerminationFailed) as exc_info:
            terminate_process(50, ToolsConfig())

        error = exc_info.value
        assert error.pid == 50
        assert error.stderr == stderr
        assert error.returncode == 1
        assert str(error) == f"Failed to kill process 50: {stderr}"
        assert isinstance(error, ToolExecutionFailed)

    def test_permission_denied(self, fake_runner_factory):
        fake_runner_factory({"kill": (1, "", "kill: (1) - Operation not permitted\n")})
        with pytest.raises(TerminationFailed, match="Operation not permitted"):
            terminate_process(1, ToolsConfig())

    def test_missing_binary(self, fake_runner_factory):
        fake_runner_factory({"kill": ToolUnavailable("kill", "Failed to execute kill: not found")})
        with pytest.raises(ToolUnavailable):
            terminate_process(50, ToolsConfig())

    @pytest.mark.parametrize("pid", [0, -1, "abc", 1.5, True, None, 10**9])
    def test_invalid_pid_is_rejected_before_kill_runs(self, fake_runner_factory, pid):
        runner = fake_runner_factory({"kill": (0, "", "")})
        with pytest.raises(ValidationError):
            terminate_process(pid, ToolsConfig())
        assert runner.calls == []
