# handycmd/cli/main.py
"""
Main command-line interface for handycmd.
"""
import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from handycmd import __version__
from handycmd.config import config_manager
from handycmd.constants import APP_NAME, APP_DESCRIPTION
from handycmd.commands.dispatcher import dispatch
from handycmd.commands.models import count_failures
from handycmd.commands.reporter import outcome_reporter
from handycmd.monitoring.watcher import CommandFileWatcher
from handycmd.utils.logging import setup_logging, get_logger

# Create the app
app = typer.Typer(help=f"{APP_NAME}: {APP_DESCRIPTION}")
logger = get_logger(__name__)
console = Console()


def version_callback(value: bool):
    """Display version information and exit."""
    if value:
        console.print(f"handycmd version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug mode"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a TOML configuration file"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """handycmd: turn statements in a command file into filesystem changes"""
    if config_file is not None:
        config_manager.config_file = config_file
    config_manager.load_config()

    if debug:
        config_manager.config.debug = True

    setup_logging(debug=config_manager.config.debug)


@app.command()
def watch(
    file: Optional[Path] = typer.Argument(
        None, help="Command file to watch (defaults to the configured file)"
    ),
    delay: Optional[float] = typer.Option(
        None, "--delay", min=0, help="Debounce window in seconds"
    ),
    call_now: Optional[bool] = typer.Option(
        None, "--call-now/--no-call-now", help="Process the first change of a burst immediately"
    ),
):
    """Watch the command file and execute statements on every save."""
    settings = config_manager.config.watch
    watcher = CommandFileWatcher(
        file or settings.file,
        delay=settings.delay if delay is None else delay,
        call_now=settings.call_now if call_now is None else call_now,
        encoding=settings.encoding,
    )

    console.print(f"[bold cyan]Watching[/bold cyan] {watcher.path} [dim](Ctrl+C to stop)[/dim]")
    try:
        asyncio.run(watcher.watch())
    except KeyboardInterrupt:
        console.print("[bold yellow]Stopped watching.[/bold yellow]")


@app.command()
def run(
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Command file to execute once"
    ),
):
    """Execute the statements currently in a command file once."""
    text = file.read_text(encoding=config_manager.config.watch.encoding, errors="replace")
    results = asyncio.run(dispatch(text))

    if not results:
        outcome_reporter.info("No statements found.")
        return

    failures = sum(count_failures(outcomes) for outcomes in results.values())
    if failures:
        logger.error(f"{failures} statement(s) failed in {file}")
        raise typer.Exit(code=1)


@app.command("config")
def show_config(
    save: bool = typer.Option(
        False, "--save", help="Write the effective configuration to the config file"
    ),
):
    """Show the effective configuration."""
    console.print_json(config_manager.config.model_dump_json())

    if save:
        path = config_manager.save_config()
        console.print(f"[bold green]Configuration saved to[/bold green] {path}")
