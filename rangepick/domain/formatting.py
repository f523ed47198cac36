"""Pure functions for writing and reading range bounds.

| Granularity | Bound       |
|-------------|-------------|
| day         | YYYY-MM-DD  |
| week        | YYYY-W{n}   | ISO 8601 week-numbering year and week, unpadded
| month       | YYYY-MM     |
| quarter     | YYYY-Q{1-4} |
| year        | YYYY        |
"""

from datetime import datetime

from rangepick.domain.models import EmittedRange, Granularity, Selection
from rangepick.domain.strategies import strategy_for


def format_bound(granularity: Granularity, dt: datetime) -> str:
    """Format a single range bound."""
    return strategy_for(granularity).format_bound(dt)


def format_range(granularity: Granularity, anchor: datetime, focus: datetime) -> EmittedRange:
    """Format a complete range for the host.

    Args:
        granularity: Unit of selection.
        anchor: Earlier bound.
        focus: Later bound.

    Returns:
        Tuple of (start, end) strings.
    """
    strategy = strategy_for(granularity)
    return strategy.format_bound(anchor), strategy.format_bound(focus)


def format_selection(granularity: Granularity, selection: Selection) -> EmittedRange | None:
    """Format a selection, or None while it is not complete."""
    if selection.anchor is None or selection.focus is None:
        return None
    return format_range(granularity, selection.anchor, selection.focus)


def parse_bound(granularity: Granularity, text: str) -> datetime:
    """Parse a formatted bound back to the start of its period.

    Args:
        granularity: Unit the bound was written in.
        text: Bound string, e.g. "2024-03-05" or "2024-Q3".

    Returns:
        First instant of the period.

    Raises:
        ValueError: If the text does not match the granularity's format.
    """
    return strategy_for(granularity).parse_bound(text.strip())

