"""
iashell - Interactive AI Shell

A command shell that runs ordinary shell commands and translates
natural-language requests (prefixed with //) into shell commands using
a local Ollama model.

Version: 0.3.0
"""

__version__ = "0.3.0"
__license__ = "MIT"

from iashell.core.controller import SessionController
from iashell.core.session import Session, ExecutionMode
from iashell.core.sanitizer import sanitize_command

__all__ = [
    "SessionController",
    "Session",
    "ExecutionMode",
    "sanitize_command",
]
