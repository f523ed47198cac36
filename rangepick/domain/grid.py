"""Pure functions for building the picker grid.

This module turns (granularity, navigation cursor, selection) into the
ordered cells of the current page:
- No I/O operations
- No stored view state; cells are derived on every call
"""

from datetime import datetime

from rangepick.dates import add, clamp_cursor
from rangepick.domain.models import Cell, Granularity, Selection
from rangepick.domain.strategies import strategy_for


def build_cells(granularity: Granularity, cursor: datetime, selection: Selection) -> list[Cell]:
    """Build the cells of the page containing the cursor.

    Args:
        granularity: Unit of selection.
        cursor: Navigation cursor deciding which page is shown.
        selection: Current selection.

    Returns:
        Cells in display order with selection flags applied.
    """
    strategy = strategy_for(granularity)
    cells: list[Cell] = []

    for slot in strategy.cells_for_page(clamp_cursor(cursor)):
        is_selected, is_start, is_end = strategy.flags(slot.period_start, slot.period_end, selection)
        cells.append(
            Cell(
                key=slot.key,
                label=slot.label,
                period_start=slot.period_start,
                period_end=slot.period_end,
                in_current_page=slot.in_current_page,
                is_selected=is_selected,
                is_range_start=is_start,
                is_range_end=is_end,
            )
        )

    return cells


def navigate(granularity: Granularity, cursor: datetime, step: int) -> datetime:
    """Move the cursor by whole pages.

    Day and week pages move by a month; month, quarter and year pages move
    by a year (the year window re-centres by one).

    Args:
        granularity: Unit of selection.
        cursor: Current cursor.
        step: Pages to move, negative for backwards.

    Returns:
        New cursor, clamped to the renderable year range.
    """
    strategy = strategy_for(granularity)
    return clamp_cursor(add(clamp_cursor(cursor), step, strategy.page_unit))


def page_title(granularity: Granularity, cursor: datetime) -> str:
    """Return the page heading, e.g. "2024年03月" or "2024年"."""
    return strategy_for(granularity).title(clamp_cursor(cursor))


def weekday_labels(granularity: Granularity) -> tuple[str, ...]:
    """Return column headings for calendar pages, empty for button pages."""
    return strategy_for(granularity).weekday_labels


def page_columns(granularity: Granularity) -> int:
    """Return how many cells make one display row."""
    return strategy_for(granularity).columns
