"""
Core modules for the iashell session: state, routing, confirmation and execution.
"""

from iashell.core.controller import SessionController
from iashell.core.executor import ShellExecutor, ExecutionResult
from iashell.core.session import Session, ExecutionMode
from iashell.core.config import Config

__all__ = ["SessionController", "ShellExecutor", "ExecutionResult", "Session", "ExecutionMode", "Config"]
