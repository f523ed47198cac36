"""Pure reducers for the picker state.

Every event is a function (PickerState, ...) -> PickerState. A pick also
returns the range to emit, which is non-None exactly when the pick moved the
selection into the COMPLETE phase.
"""

from dataclasses import replace
from datetime import datetime

from rangepick.dates import clamp_cursor
from rangepick.domain.formatting import format_selection
from rangepick.domain.grid import build_cells, navigate, page_columns, page_title, weekday_labels
from rangepick.domain.models import EmittedRange, Granularity, PickerState, PickerView
from rangepick.domain.selection import apply_pick, reset_selection


def initial_state(granularity: Granularity, today: datetime) -> PickerState:
    """Create an empty picker positioned on today's page."""
    return PickerState(granularity=granularity, cursor=clamp_cursor(today))


def pick(state: PickerState, clicked: datetime) -> tuple[PickerState, EmittedRange | None]:
    """Apply a click on the period containing ``clicked``.

    Args:
        state: Current picker state.
        clicked: Any instant inside the clicked cell's period.

    Returns:
        Tuple of (new_state, emitted) where emitted is the formatted range if
        the selection just became complete, otherwise None. The last emitted
        range stays on the state until reset.
    """
    selection = apply_pick(state.selection, clicked, state.granularity)
    emitted = format_selection(state.granularity, selection)

    if emitted is None:
        return replace(state, selection=selection), None

    return replace(state, selection=selection, emitted=emitted), emitted


def navigate_prev(state: PickerState) -> PickerState:
    """Show the previous page. The selection is untouched."""
    return replace(state, cursor=navigate(state.granularity, state.cursor, -1))


def navigate_next(state: PickerState) -> PickerState:
    """Show the next page. The selection is untouched."""
    return replace(state, cursor=navigate(state.granularity, state.cursor, 1))


def reset(state: PickerState) -> PickerState:
    """Clear the selection and the last emitted range."""
    return replace(state, selection=reset_selection(), emitted=None)


def change_granularity(state: PickerState, granularity: Granularity) -> PickerState:
    """Switch granularity. Always resets, so no bound outlives its unit."""
    return replace(reset(state), granularity=granularity)


def render(state: PickerState) -> PickerView:
    """Build the view-model for the current state."""
    return PickerView(
        granularity=state.granularity,
        title=page_title(state.granularity, state.cursor),
        columns=page_columns(state.granularity),
        weekday_labels=weekday_labels(state.granularity),
        cells=build_cells(state.granularity, state.cursor, state.selection),
        emitted=state.emitted,
    )
