"""
Confirmation of suggested commands.

The user answers a suggestion with one character:
  - s / y: run it once
  - x: run it and stop asking for the rest of the session
  - anything else (including nothing): cancel

Only the execution mode remembers an "always" answer; nothing is
persisted to disk.
"""

from enum import Enum
from typing import Optional

from loguru import logger
from rich.markup import escape

ACCEPT_ONCE_KEYS = {"s", "y"}
ACCEPT_ALWAYS_KEYS = {"x"}
CONFIRM_QUESTION = "IA> Execute? [s/N/x (always)]: "


class ConfirmDecision(Enum):
    """The user's answer to a suggested command."""
    ACCEPT_ONCE = "accept_once"
    ACCEPT_ALWAYS = "accept_always"
    REJECT = "reject"

    @property
    def executes(self) -> bool:
        return self is not ConfirmDecision.REJECT


def parse_decision(answer: Optional[str]) -> ConfirmDecision:
    """
    Map a raw confirmation answer to a decision.

    Args:
        answer: Text the user typed, or None when input could not be read

    Returns:
        ConfirmDecision; unreadable or unrecognised answers reject
    """
    if answer is None:
        return ConfirmDecision.REJECT

    choice = answer.strip().lower()
    if choice in ACCEPT_ONCE_KEYS:
        return ConfirmDecision.ACCEPT_ONCE
    if choice in ACCEPT_ALWAYS_KEYS:
        return ConfirmDecision.ACCEPT_ALWAYS
    return ConfirmDecision.REJECT


class ConfirmationPrompt:
    """Asks the user whether a suggested command may run."""

    def __init__(self, reader, console):
        """
        Args:
            reader: Line reader used for the answer
            console: Rich console for the suggestion display
        """
        self.reader = reader
        self.console = console

    def ask(self, command: str) -> ConfirmDecision:
        """Show the suggestion and read the user's decision."""
        self.console.print("---")
        self.console.print("[cyan]IA>[/cyan] Suggested command:")
        self.console.print()
        self.console.print(command, markup=False, highlight=False)
        self.console.print()
        self.console.print("---")

        try:
            answer = self.reader.read_line(CONFIRM_QUESTION)
        except OSError as e:
            self.console.print(f"[red]Error reading confirmation:[/red] {escape(str(e))}")
            logger.warning(f"Confirmation read failed: {e}")
            answer = None

        decision = parse_decision(answer)
        logger.debug(f"Confirmation for {command!r}: {decision.value}")
        return decision
