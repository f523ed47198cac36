"""DateRangePicker: the in-process boundary a host surface talks to.

The widget owns one PickerState and replaces it on every event using the pure
reducers in ``rangepick.domain.picker``. Hosts draw ``render()`` and forward
clicks as cell keys.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from rangepick.domain import picker as reducers
from rangepick.domain.models import Cell, EmittedRange, Granularity, PickerState, PickerView

logger = logging.getLogger(__name__)

RangeCallback = Callable[[EmittedRange], None]


class DateRangePicker:
    """Range selector for one granularity at a time.

    Args:
        granularity: Granularity or its name, default "day".
        on_range_change: Called synchronously with the formatted range each
            time a pick completes a selection.
        today: Initial navigation cursor, default now.
    """

    def __init__(
        self,
        granularity: Granularity | str = Granularity.DAY,
        on_range_change: RangeCallback | None = None,
        today: datetime | None = None,
    ) -> None:
        self.on_range_change = on_range_change
        self._state = reducers.initial_state(
            Granularity.parse(granularity),
            today if today is not None else datetime.now(),
        )

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def granularity(self) -> Granularity:
        return self._state.granularity

    @granularity.setter
    def granularity(self, value: Granularity | str) -> None:
        granularity = Granularity.parse(value)
        if granularity == self._state.granularity:
            return
        logger.debug("Granularity %s -> %s, selection reset", self._state.granularity.value, granularity.value)
        self._state = reducers.change_granularity(self._state, granularity)

    @property
    def selected_range(self) -> EmittedRange | None:
        """Last emitted range, or None since construction or reset."""
        return self._state.emitted

    @property
    def title(self) -> str:
        return self.render().title

    @property
    def cells(self) -> list[Cell]:
        return self.render().cells

    def render(self) -> PickerView:
        """Build the view-model for the current page."""
        return reducers.render(self._state)

    def pick(self, cell_key: str) -> EmittedRange | None:
        """Handle a click on a cell of the current page.

        Keys not on the current page are ignored, since they can only come
        from a handler bound before the last page change.

        Args:
            cell_key: Key of the clicked cell.

        Returns:
            The emitted range if this pick completed a selection, otherwise None.
        """
        cell = next((c for c in self.cells if c.key == cell_key), None)
        if cell is None:
            logger.debug("Ignoring pick of %r: not on the current page", cell_key)
            return None

        self._state, emitted = reducers.pick(self._state, cell.period_start)
        logger.debug(
            "Picked %s: anchor=%s focus=%s",
            cell_key,
            self._state.selection.anchor,
            self._state.selection.focus,
        )

        if emitted is not None:
            logger.debug("Emitting range %s - %s", *emitted)
            if self.on_range_change is not None:
                self.on_range_change(emitted)

        return emitted

    def navigate_prev(self) -> None:
        self._state = reducers.navigate_prev(self._state)

    def navigate_next(self) -> None:
        self._state = reducers.navigate_next(self._state)

    def reset(self) -> None:
        """Clear the selection and the last emitted range."""
        self._state = reducers.reset(self._state)
