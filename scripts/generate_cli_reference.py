#!/usr/bin/env python3
"""Generate CLI reference documentation from the rangepick typer app."""

import inspect
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

# Add parent directory to path to import rangepick
sys.path.insert(0, str(Path(__file__).parent.parent))

from rangepick.cli import app
from rangepick.commands.picker import PROMPT
from rangepick.domain.models import Granularity
from rangepick.domain.strategies import strategy_for

# One sample date per granularity, shown as the --at / --pick format
SAMPLE = (2024, 3, 5)


def format_option(param_name: str, option: Any) -> str:
    """Format one option as a markdown bullet with flags, help and default."""
    flags = list(getattr(option, "param_decls", None) or [f"--{param_name.replace('_', '-')}"])
    line = "- " + ", ".join(f"`{flag}`" for flag in flags)

    if getattr(option, "help", None):
        line += f": {option.help}"

    default = getattr(option, "default", None)
    if default is not None and default is not False:
        line += f" (default: {default})"

    return line


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "```bash",
        f"rangepick {command_name} [OPTIONS]",
        "```",
        "",
    ]

    options = [
        format_option(name, param.default)
        for name, param in inspect.signature(callback).parameters.items()
        if hasattr(param.default, "help")
    ]
    if options:
        lines += ["**Options:**", "", *options, ""]

    return "\n".join(lines)


def generate_format_table() -> str:
    """Document the bound format of each granularity."""
    sample = datetime(*SAMPLE)
    lines = [
        "## Range formats",
        "",
        "| Granularity | Example bound | Page title |",
        "|-------------|---------------|------------|",
    ]
    for granularity in Granularity:
        strategy = strategy_for(granularity)
        lines.append(f"| `{granularity.value}` | `{strategy.format_bound(sample)}` | {strategy.title(sample)} |")
    lines.append("")
    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all rangepick CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "rangepick [--debug] [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
        "| `--debug` | Log picker transitions |",
        "| `--help` | Show help message and exit |",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))

    lines += ["## Interactive keys", "", f"`rangepick pick` prompts: {PROMPT.strip()}", ""]
    lines.append(generate_format_table())

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference(), encoding="utf-8")
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
