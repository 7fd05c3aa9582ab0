"""
User-facing status messages.
Notices go to stdout, errors and warnings to stderr.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

PREFIX = "IA>"


class StatusReporter:
    """Prints shell notices the same way everywhere."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def notice(self, message: str) -> None:
        """An `IA>` line followed by a blank line."""
        self.console.print(f"[cyan]{PREFIX}[/cyan] {escape(message)}", highlight=False)
        self.console.print()

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{PREFIX}[/cyan] {escape(message)}", highlight=False)

    def command(self, label: str, command: str) -> None:
        """Show a command that is about to run."""
        self.console.print()
        self.console.print(f"[dim]{label}[/dim]")
        self.console.print(command, markup=False, highlight=False)
        self.console.print()

    def warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/red]", highlight=False)
