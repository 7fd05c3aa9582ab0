"""
Shared fixtures: scripted input, recording executor and captured consoles.
"""

import io
from typing import List, Optional, Set

import pytest
from rich.console import Console

from iashell.core.controller import SessionController
from iashell.core.executor import ExecutionResult
from iashell.core.session import Session
from iashell.llm.mock_client import MockLLMClient


class ScriptedReader:
    """Feeds predefined lines; returns None once they run out."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.prompts: List[str] = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingExecutor:
    """Records commands instead of running them."""

    def __init__(self, failing: Optional[Set[str]] = None):
        self.commands: List[str] = []
        self.failing = failing or set()

    def run(self, command: str) -> ExecutionResult:
        self.commands.append(command)
        if command in self.failing:
            return ExecutionResult(command=command, success=False, return_code=1,
                                   error="Command failed with exit code 1")
        return ExecutionResult(command=command, success=True, return_code=0)


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def reader():
    return ScriptedReader()


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def client():
    return MockLLMClient(models=["llama3:latest", "mistral:7b"])


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def err_console():
    return make_console()


@pytest.fixture
def controller(client, reader, executor, console, err_console):
    """Controller with an active session on llama3 in ask mode."""
    ctrl = SessionController(
        client=client,
        reader=reader,
        executor=executor,
        console=console,
        err_console=err_console,
    )
    ctrl.session = Session(selected_model="llama3:latest")
    return ctrl
