"""
Execution engine.
Runs a command line through the host shell with the terminal attached, so
interactive and full-screen programs behave normally.
"""

import shutil
import signal
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

DEFAULT_SHELL = "bash"
FALLBACK_SHELL = "/bin/sh"


@dataclass
class ExecutionResult:
    """Outcome of one command run."""
    command: str
    success: bool
    return_code: Optional[int] = None
    error: Optional[str] = None


class ShellExecutor:
    """Spawns commands as `<shell> -c <command>` and waits for them."""

    def __init__(self, shell: str = DEFAULT_SHELL):
        """
        Args:
            shell: Interpreter name or path; /bin/sh is used if it cannot be found
        """
        self.shell = self._resolve_shell(shell)

    @staticmethod
    def _resolve_shell(shell: str) -> str:
        found = shutil.which(shell)
        if found:
            return found
        logger.warning(f"Shell '{shell}' not found, falling back to {FALLBACK_SHELL}")
        return FALLBACK_SHELL

    def build_argv(self, command: str) -> List[str]:
        return [self.shell, "-c", command]

    def run(self, command: str) -> ExecutionResult:
        """
        Run a command, inheriting stdin, stdout and stderr.

        Never raises for command failures: a non-zero exit or a spawn error
        is returned as an unsuccessful ExecutionResult. While the child runs,
        SIGINT is ignored here so Ctrl+C reaches only the child.

        Args:
            command: Full command line

        Returns:
            ExecutionResult
        """
        logger.info(f"Executing: {command}")
        try:
            process = subprocess.Popen(self.build_argv(command))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to spawn {command!r}: {e}")
            return ExecutionResult(
                command=command,
                success=False,
                error=f"Failed to run command: {e}"
            )

        previous_handler = _ignore_sigint()
        try:
            returncode = process.wait()
        finally:
            _restore_sigint(previous_handler)

        if returncode == 0:
            return ExecutionResult(command=command, success=True, return_code=0)

        if returncode == -signal.SIGINT:
            logger.info(f"Interrupted: {command}")
            return ExecutionResult(command=command, success=False, error="Interrupted")

        logger.info(f"Command exited with code {returncode}: {command}")
        return ExecutionResult(
            command=command,
            success=False,
            return_code=returncode,
            error=f"Command failed with exit code {returncode}"
        )


def _ignore_sigint():
    """Ignore SIGINT in this process; returns the previous handler (None off the main thread)."""
    try:
        return signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        return None


def _restore_sigint(previous_handler) -> None:
    if previous_handler is not None:
        signal.signal(signal.SIGINT, previous_handler)
