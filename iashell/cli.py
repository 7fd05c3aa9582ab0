"""
iashell Command-Line Interface
Main entry point for user interaction.
"""

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from iashell import __version__
from iashell.config import load_config
from iashell.core.banner import LogoRenderer
from iashell.core.config import config
from iashell.core.controller import SessionController, SEPARATOR
from iashell.core.errors import FatalSessionError
from iashell.core.executor import ShellExecutor
from iashell.core.input import create_line_reader
from iashell.llm.llm_factory import create_llm_client

app = typer.Typer(
    name="iashell",
    help="iashell - shell with natural-language command translation (// <request>)",
    add_completion=False
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def build_controller() -> SessionController:
    """Wire the controller from the global configuration."""
    presentation = load_config("presentation")
    return SessionController(
        client=create_llm_client(config),
        reader=create_line_reader(config.history_file),
        prompt_reader=create_line_reader(),
        executor=ShellExecutor(config.shell),
        console=console,
        err_console=err_console,
        renderer=LogoRenderer.from_config(console, config.logo_file, err_console),
        separator=presentation.get("separator", SEPARATOR)
    )


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Start the interactive shell when no subcommand is given."""
    if ctx.invoked_subcommand is not None:
        return

    config.setup_logging()
    logger.info(f"Starting iashell {__version__} ({config!r})")

    controller = build_controller()
    try:
        controller.run()
    except FatalSessionError as e:
        err_console.print(f"[red]Fatal error:[/red] {escape(str(e))}", highlight=False)
        logger.info(f"Fatal: {e}")
        raise typer.Exit(code=1)

    raise typer.Exit(code=0)


@app.command()
def version():
    """Show the iashell version."""
    console.print(f"iashell {__version__}")


def run():
    """Main entry point."""
    app()


def main():
    """Console script entry point (typer app shim)."""
    run()


if __name__ == "__main__":
    run()
