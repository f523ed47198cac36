"""Admin commands for initializing and inspecting configuration."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from rangepick.config import (
    create_default_config,
    get_config_path,
    get_default_granularity,
    set_default_granularity,
)
from rangepick.domain.models import Granularity

console = Console()


def run_init(config_path: Path, granularity: Granularity | None) -> None:
    """Write a fresh config, optionally with a non-default granularity."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    if granularity is not None:
        set_default_granularity(granularity, config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Default granularity: {get_default_granularity(config_path).value}[/dim]")


def init_command(force: bool = False, granularity: str | None = None, config_path: Path | None = None) -> None:
    """Initialize rangepick configuration."""
    if config_path is None:
        config_path = get_config_path()

    try:
        resolved = Granularity.parse(granularity) if granularity is not None else None

        # Guard: refuse to overwrite without force flag
        if not force and config_path.exists():
            console.print("[red]Initialization failed:[/red]", style="bold")
            console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'rangepick init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_init(config_path, resolved)

    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def config_command(granularity: str | None = None, config_path: Path | None = None) -> None:
    """Show the config, or update the default granularity."""
    if config_path is None:
        config_path = get_config_path()

    try:
        if granularity is not None:
            resolved = Granularity.parse(granularity)
            set_default_granularity(resolved, config_path)
            console.print(f"[green]✓[/green] Default granularity set to {resolved.value}")
            return

        if not config_path.exists():
            console.print("[yellow]No config file found, using defaults[/yellow]")
        console.print(f"Config: {config_path}")
        console.print(f"[bold]Default granularity: {get_default_granularity(config_path).value}[/bold]")

    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)
