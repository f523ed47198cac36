"""Domain models and pure logic for rangepick.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Selection and grid logic separated from any host surface
"""

from rangepick.domain.models import (
    Cell,
    CellKey,
    EmittedRange,
    Granularity,
    PickerState,
    PickerView,
    Selection,
    SelectionPhase,
)

__all__ = [
    "Cell",
    "CellKey",
    "EmittedRange",
    "Granularity",
    "PickerState",
    "PickerView",
    "Selection",
    "SelectionPhase",
]
