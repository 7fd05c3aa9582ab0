"""
Tests for the shell execution engine (runs real /bin/sh commands).
"""

import os
import signal
import threading

import pytest

from iashell.core.executor import FALLBACK_SHELL, ShellExecutor


@pytest.fixture
def sh():
    return ShellExecutor("sh")


class TestShellExecutor:

    def test_success(self, sh):
        result = sh.run("true")

        assert result.success is True
        assert result.return_code == 0
        assert result.error is None

    def test_nonzero_exit_is_reported_not_raised(self, sh):
        result = sh.run("exit 3")

        assert result.success is False
        assert result.return_code == 3
        assert "3" in result.error

    def test_output_goes_straight_to_terminal(self, sh, capfd):
        sh.run("echo hello; echo oops >&2")

        captured = capfd.readouterr()
        assert "hello" in captured.out
        assert "oops" in captured.err

    def test_shell_syntax_is_interpreted(self, sh, capfd):
        sh.run("for i in 1 2; do printf '%s,' $i; done")

        assert capfd.readouterr().out == "1,2,"

    def test_runs_in_current_directory(self, sh, tmp_path, monkeypatch, capfd):
        monkeypatch.chdir(tmp_path)
        sh.run("pwd")

        assert capfd.readouterr().out.strip() == str(tmp_path.resolve())

    def test_spawn_failure(self):
        executor = ShellExecutor("sh")
        executor.shell = "/nonexistent/shell"

        result = executor.run("true")

        assert result.success is False
        assert result.return_code is None
        assert "Failed to run command" in result.error

    def test_unknown_shell_falls_back(self):
        executor = ShellExecutor("definitely-not-a-shell-xyz")

        assert executor.shell == FALLBACK_SHELL

    def test_build_argv(self, sh):
        assert sh.build_argv("ls -la")[1:] == ["-c", "ls -la"]

    def test_embedded_null_byte_is_a_failed_result(self, sh):
        result = sh.run("echo a\x00b")

        assert result.success is False
        assert result.return_code is None
        assert "Failed to run command" in result.error


class TestInterrupts:
    """Ctrl+C belongs to the running child, not to the shell session."""

    def test_child_that_ignores_sigint_survives(self, sh, tmp_path):
        marker = tmp_path / "done"
        timer = threading.Timer(0.3, os.kill, args=(os.getpid(), signal.SIGINT))
        timer.start()

        result = sh.run(f"trap '' INT; sleep 1; touch '{marker}'")
        timer.join()

        assert result.success is True
        assert marker.exists()

    def test_child_killed_by_sigint_is_reported(self, sh):
        result = sh.run("kill -INT $$")

        assert result.success is False
        assert result.return_code is None
        assert result.error == "Interrupted"

    def test_handler_restored_after_run(self, sh):
        before = signal.getsignal(signal.SIGINT)

        sh.run("true")

        assert signal.getsignal(signal.SIGINT) is before
