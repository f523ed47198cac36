"""Pure functions for the selection state machine.

States cycle EMPTY -> ANCHOR_ONLY -> COMPLETE -> ANCHOR_ONLY -> ...

- No I/O operations
- No side effects
- Granularity only enters through the unit used for truncation
"""

from datetime import datetime

from rangepick.dates import end_of, is_before, truncate
from rangepick.domain.models import Granularity, Selection, SelectionPhase


def reset_selection() -> Selection:
    """Return the empty selection."""
    return Selection()


def apply_pick(selection: Selection, clicked: datetime, granularity: Granularity) -> Selection:
    """Apply one click to a selection.

    The clicked date is truncated to the start of its period. From EMPTY or
    COMPLETE it becomes a new anchor. From ANCHOR_ONLY it completes the range,
    swapping bounds when the click lands before the anchor. Picking the anchor's
    own period again yields a single-period range.

    Args:
        selection: Current selection.
        clicked: Any instant inside the clicked period.
        granularity: Unit of selection.

    Returns:
        New selection; anchor <= focus whenever focus is set.
    """
    unit = granularity.unit
    candidate = truncate(clicked, unit)

    if selection.phase != SelectionPhase.ANCHOR_ONLY:
        return Selection(anchor=candidate)

    anchor = selection.anchor
    assert anchor is not None

    if is_before(candidate, anchor, unit):
        return Selection(anchor=candidate, focus=end_of(anchor, unit))

    return Selection(anchor=anchor, focus=end_of(candidate, unit))
