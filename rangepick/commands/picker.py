"""Show and pick commands: a terminal host for DateRangePicker."""

import sys
from datetime import datetime

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rangepick.config import get_default_granularity
from rangepick.domain.formatting import parse_bound
from rangepick.domain.models import Cell, CellKey, EmittedRange, Granularity, PickerView
from rangepick.widget import DateRangePicker

console = Console()

PROMPT = "\nPick (key or number), < prev, > next, r reset, g NAME granularity, q quit"


def resolve_granularity(name: str | None) -> Granularity:
    """Resolve the granularity option, falling back to the configured default.

    Args:
        name: Granularity name from the command line, or None.

    Returns:
        Granularity to use.

    Raises:
        ValueError: If the name is not a known granularity.
    """
    if name is None:
        return get_default_granularity()
    return Granularity.parse(name)


def resolve_start(granularity: Granularity, at: str | None) -> datetime:
    """Resolve the initial navigation cursor.

    Args:
        granularity: Granularity the bound is written in.
        at: Bound such as "2024-03" or "2024-Q1", or None for today.

    Returns:
        Cursor datetime.

    Raises:
        ValueError: If the bound does not match the granularity's format.
    """
    if at is None:
        return datetime.now()
    return parse_bound(granularity, at)


def resolve_cell_key(view: PickerView, choice: str) -> CellKey | None:
    """Map user input to a cell key on the current page.

    Accepts an exact cell key, or a 1-based position among the page's own
    cells (so "5" is the 5th of the month on a day page, "3" is Q3).

    Args:
        view: Currently rendered view.
        choice: User input.

    Returns:
        Matching cell key, or None if nothing on the page matches.
    """
    for cell in view.cells:
        if cell.key == choice:
            return cell.key

    if choice.isdigit():
        in_page = [cell for cell in view.cells if cell.in_current_page]
        index = int(choice) - 1
        if 0 <= index < len(in_page):
            return in_page[index].key

    return None


def format_cell(cell: Cell) -> str:
    """Format one cell label with rich markup for its flags."""
    if cell.is_range_start or cell.is_range_end:
        return f"[bold white on blue]{cell.label}[/bold white on blue]"
    if cell.is_selected:
        return f"[black on cyan]{cell.label}[/black on cyan]"
    if not cell.in_current_page:
        return f"[dim]{cell.label}[/dim]"
    return cell.label


def format_range_display(emitted: EmittedRange) -> str:
    """Format an emitted range for display."""
    return f"已选择: {emitted[0]} 至 {emitted[1]}"


def build_table(view: PickerView) -> Table:
    """Build a rich table for one page of cells.

    Args:
        view: Rendered picker view.

    Returns:
        Table with the page title and one row per display row.
    """
    table = Table(title=view.title, show_header=bool(view.weekday_labels), box=box.SIMPLE)

    for column in range(view.columns):
        header = view.weekday_labels[column] if view.weekday_labels else ""
        table.add_column(header, justify="center")

    for row in view.rows():
        labels = [format_cell(cell) for cell in row]
        labels += [""] * (view.columns - len(labels))
        table.add_row(*labels)

    return table


def render_picker(picker: DateRangePicker) -> None:
    """Print the current page and the selected range."""
    view = picker.render()
    console.print(build_table(view))
    if view.emitted:
        console.print(f"[dim]{format_range_display(view.emitted)}[/dim]")


def print_emitted(emitted: EmittedRange) -> None:
    """Range-change callback used by both commands."""
    console.print(f"[green]✓ {format_range_display(emitted)}[/green]")


def pick_choice(picker: DateRangePicker, choice: str) -> None:
    """Pick the cell the user named, or report that nothing matched."""
    key = resolve_cell_key(picker.render(), choice)
    if key is None:
        console.print(f"[yellow]No cell '{escape(choice)}' on this page, ignored[/yellow]")
        return
    picker.pick(key)


def handle_command(picker: DateRangePicker, choice: str) -> bool:
    """Handle one line of interactive input.

    Args:
        picker: Picker being driven.
        choice: User input.

    Returns:
        False if the user chose to quit, True otherwise.
    """
    choice = choice.strip()

    if not choice:
        return True

    if choice.lower() == "q":
        console.print("[yellow]Exiting[/yellow]")
        return False

    if choice == "<":
        picker.navigate_prev()
        return True

    if choice == ">":
        picker.navigate_next()
        return True

    if choice.lower() == "r":
        picker.reset()
        console.print("[dim]Selection cleared[/dim]")
        return True

    if choice.lower().startswith("g "):
        try:
            picker.granularity = choice[2:]
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return True
        console.print(f"[dim]Granularity: {picker.granularity.value} (selection cleared)[/dim]")
        return True

    pick_choice(picker, choice)
    return True


def show_command(granularity: str | None = None, at: str | None = None, picks: list[str] | None = None) -> None:
    """Render one page after applying scripted picks."""
    try:
        resolved = resolve_granularity(granularity)
        picker = DateRangePicker(resolved, on_range_change=print_emitted, today=resolve_start(resolved, at))
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    for choice in picks or []:
        pick_choice(picker, choice)

    render_picker(picker)
    if picker.selected_range is None:
        console.print("[dim]No range selected[/dim]")


def pick_command(granularity: str | None = None, at: str | None = None) -> None:
    """Pick a range interactively."""
    try:
        resolved = resolve_granularity(granularity)
        picker = DateRangePicker(resolved, on_range_change=print_emitted, today=resolve_start(resolved, at))
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    while True:
        render_picker(picker)
        choice: str = typer.prompt(PROMPT, type=str, default="", show_default=False)
        if not handle_command(picker, choice):
            break

    if picker.selected_range:
        console.print(format_range_display(picker.selected_range), style="bold")
