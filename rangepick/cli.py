"""CLI entry point for rangepick."""

import logging

import typer

from rangepick.commands.admin import config_command, init_command
from rangepick.commands.picker import pick_command, show_command

app = typer.Typer(
    name="rangepick",
    help="rangepick - pick day, week, month, quarter and year ranges",
    add_completion=False,
)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log picker transitions"),
) -> None:
    """rangepick - pick day, week, month, quarter and year ranges."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    granularity: str = typer.Option(None, "--granularity", "-g", help="Default granularity to store"),
) -> None:
    """Initialize rangepick configuration."""
    init_command(force, granularity)


@app.command(name="config")
def config(
    granularity: str = typer.Option(None, "--granularity", "-g", help="Set the default granularity"),
) -> None:
    """Show your configuration or change the default granularity."""
    config_command(granularity)


@app.command()
def show(
    granularity: str = typer.Option(None, "--granularity", "-g", help="day, week, month, quarter or year"),
    at: str = typer.Option(None, "--at", help="Page to show, e.g. 2024-03-05, 2024-W10, 2024-03, 2024-Q1, 2024"),
    pick: list[str] = typer.Option(None, "--pick", "-p", help="Cell key or number to pick (repeatable)"),
) -> None:
    """Show one page of the picker after applying picks."""
    show_command(granularity, at, pick)


@app.command(name="pick")
def pick_interactive(
    granularity: str = typer.Option(None, "--granularity", "-g", help="day, week, month, quarter or year"),
    at: str = typer.Option(None, "--at", help="Page to start on, in the granularity's format"),
) -> None:
    """Pick a range interactively."""
    pick_command(granularity, at)


if __name__ == "__main__":
    app()
