"""Domain type definitions for rangepick.

- Granularity: the unit a range is picked in
- Selection: the (anchor, focus) pair owned by one picker
- Cell: one derived, selectable grid slot
- PickerState: the single explicit state record of a picker
- PickerView: everything a host needs to draw one render
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import NewType

from rangepick.dates import Unit

# Cell key, e.g. "2024-03-05", "2024-03", "2024-Q1", "2024"
CellKey = NewType("CellKey", str)

# Formatted (start, end) pair handed to the host
EmittedRange = tuple[str, str]


class Granularity(Enum):
    """Unit of selection."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def unit(self) -> Unit:
        """Date-arithmetic unit matching this granularity."""
        unit: Unit = self.value  # type: ignore[assignment]
        return unit

    @classmethod
    def parse(cls, value: "str | Granularity") -> "Granularity":
        """Resolve a granularity from its name.

        Args:
            value: Granularity or case-insensitive name ("day", "Week", ...).

        Returns:
            Matching Granularity.

        Raises:
            ValueError: If the name is not a known granularity.
        """
        if isinstance(value, Granularity):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(g.value for g in cls)
            raise ValueError(f"Unknown granularity '{value}' (expected one of: {names})") from None


class SelectionPhase(Enum):
    """Where a selection is in its pick cycle."""

    EMPTY = "empty"
    ANCHOR_ONLY = "anchor_only"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Selection:
    """Immutable selection pair.

    If focus is set, anchor is set and anchor <= focus.
    """

    anchor: datetime | None = None
    focus: datetime | None = None

    @property
    def phase(self) -> SelectionPhase:
        if self.anchor is None:
            return SelectionPhase.EMPTY
        if self.focus is None:
            return SelectionPhase.ANCHOR_ONLY
        return SelectionPhase.COMPLETE

    @property
    def is_complete(self) -> bool:
        return self.anchor is not None and self.focus is not None


@dataclass(frozen=True)
class Cell:
    """Immutable grid cell, recomputed on every render."""

    key: CellKey
    label: str
    period_start: datetime
    period_end: datetime
    in_current_page: bool = True
    is_selected: bool = False
    is_range_start: bool = False
    is_range_end: bool = False


@dataclass(frozen=True)
class PickerState:
    """Immutable picker state: granularity, navigation cursor, selection, last emission."""

    granularity: Granularity
    cursor: datetime
    selection: Selection = field(default_factory=Selection)
    emitted: EmittedRange | None = None


@dataclass(frozen=True)
class PickerView:
    """Immutable view-model for one render."""

    granularity: Granularity
    title: str
    columns: int
    weekday_labels: tuple[str, ...]
    cells: list[Cell]
    emitted: EmittedRange | None = None

    def rows(self) -> list[list[Cell]]:
        """Split the cells into display rows of ``columns`` cells."""
        return [self.cells[i : i + self.columns] for i in range(0, len(self.cells), self.columns)]
