"""
Line readers for the interactive loop.

Both readers return None when input is exhausted (EOF or Ctrl+C) so the
controller has a single end-of-session signal. Other I/O failures are
raised as OSError.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory


class BasicLineReader:
    """Reads lines with input(); used when stdin is not a terminal."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None


class PromptToolkitLineReader:
    """Reads lines with prompt_toolkit, with persistent history."""

    def __init__(self, history_file: Optional[Path] = None):
        """
        Args:
            history_file: Where to keep command history; in-memory if None
        """
        if history_file is not None:
            try:
                history_file.parent.mkdir(parents=True, exist_ok=True)
                history = FileHistory(str(history_file))
            except OSError as e:
                logger.warning(f"History file unavailable ({e}); using in-memory history")
                history = InMemoryHistory()
        else:
            history = InMemoryHistory()

        self.session = PromptSession(history=history)

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return self.session.prompt(prompt)
        except (EOFError, KeyboardInterrupt):
            return None


def create_line_reader(history_file: Optional[Path] = None):
    """
    Pick a reader for the current terminal.

    prompt_toolkit needs a real TTY on both ends; pipes and redirected input
    fall back to plain input().
    """
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptToolkitLineReader(history_file)
    logger.debug("Not a TTY; using basic line reader")
    return BasicLineReader()
