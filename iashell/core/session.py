"""
Session state for one interactive run.
Created at startup, mutated in place by the controller, discarded at exit.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger


class ExecutionMode(Enum):
    """
    How translated commands are handled.

    ASK asks for confirmation each time; AUTO runs suggestions straight away.
    """
    ASK = "ask"
    AUTO = "auto"


@dataclass
class Session:
    """Mutable state of the running shell."""
    selected_model: str
    mode: ExecutionMode = ExecutionMode.ASK
    first_prompt: bool = True

    @property
    def auto_execute(self) -> bool:
        return self.mode is ExecutionMode.AUTO

    def enable_auto(self) -> None:
        """Accept-always was chosen: run future suggestions without asking."""
        if self.mode is not ExecutionMode.AUTO:
            logger.info("Execution mode: ask -> auto")
        self.mode = ExecutionMode.AUTO

    def disable_auto(self) -> None:
        """Explicit opt-out; always lands in ASK regardless of the previous mode."""
        if self.mode is not ExecutionMode.ASK:
            logger.info("Execution mode: auto -> ask")
        self.mode = ExecutionMode.ASK

    def switch_model(self, model_name: str) -> None:
        logger.info(f"Active model: {self.selected_model} -> {model_name}")
        self.selected_model = model_name
        self.first_prompt = True

    @property
    def working_directory(self) -> Optional[str]:
        """The process working directory, or None if it cannot be determined."""
        try:
            return os.getcwd()
        except OSError as e:
            logger.warning(f"Could not determine working directory: {e}")
            return None

    def display_directory(self) -> Optional[str]:
        """Working directory with the home directory abbreviated to ~."""
        cwd = self.working_directory
        if cwd is None:
            return None
        return abbreviate_home(cwd)


def abbreviate_home(path: str, home: Optional[str] = None) -> str:
    """
    Replace a leading home-directory prefix with ~.

    Args:
        path: Absolute path
        home: Home directory (defaults to the current user's)

    Returns:
        Abbreviated path
    """
    home = home if home is not None else str(Path.home())
    if home and path.startswith(home):
        return "~" + path[len(home):]
    return path
