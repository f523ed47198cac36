"""Granularity strategies: one object per selection unit.

Each strategy knows how a page of cells is laid out for its granularity, how a
cell maps to a period, how a period bound is written and read back, and how
a cell's selection flags are derived. The selection machine and the grid
builder stay granularity-agnostic by going through ``strategy_for``.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from rangepick.dates import (
    Unit,
    add,
    end_of,
    is_after,
    is_before,
    is_between,
    is_same,
    iso_week,
    quarter_of,
    start_of,
    with_quarter,
)
from rangepick.domain.models import CellKey, Granularity, Selection

# Monday first, matching ISO weeks
WEEKDAY_LABELS: tuple[str, ...] = ("一", "二", "三", "四", "五", "六", "日")

YEAR_WINDOW = 5

_WEEK_RE = re.compile(r"^(\d{4})-W(\d{1,2})$")
_QUARTER_RE = re.compile(r"^(\d{4})-Q([1-4])$")
_YEAR_RE = re.compile(r"^(\d{4})$")


@dataclass(frozen=True)
class PageSlot:
    """Immutable layout slot of a page, before selection flags are applied."""

    key: CellKey
    label: str
    period_start: datetime
    period_end: datetime
    in_current_page: bool = True


def _day_key(dt: datetime) -> str:
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def _parse_day(text: str) -> datetime:
    try:
        return datetime.strptime(text, "%Y-%m-%d")
    except ValueError as e:
        raise ValueError(f"Invalid day '{text}' (expected YYYY-MM-DD): {e}") from e


class GranularityStrategy:
    """Base strategy. Subclasses fill in page layout and bound format."""

    granularity: Granularity
    page_unit: Unit
    columns: int
    weekday_labels: tuple[str, ...] = ()

    @property
    def unit(self) -> Unit:
        return self.granularity.unit

    def period_of(self, dt: datetime) -> tuple[datetime, datetime]:
        """Return the (start, end) instants of the period containing ``dt``."""
        return start_of(dt, self.unit), end_of(dt, self.unit)

    def cells_for_page(self, cursor: datetime) -> list[PageSlot]:
        raise NotImplementedError

    def format_bound(self, dt: datetime) -> str:
        raise NotImplementedError

    def parse_bound(self, text: str) -> datetime:
        raise NotImplementedError

    def title(self, cursor: datetime) -> str:
        return f"{cursor.year:04d}年"

    def contains(self, start: datetime, end: datetime, anchor: datetime, focus: datetime) -> bool:
        """Check whether a cell period lies inside [anchor, focus]."""
        return is_between(start, anchor, focus, self.unit, "[]")

    def flags(self, start: datetime, end: datetime, selection: Selection) -> tuple[bool, bool, bool]:
        """Derive (is_selected, is_range_start, is_range_end) for one cell period.

        With only an anchor, the anchor's own period previews as selected.
        """
        anchor, focus = selection.anchor, selection.focus
        if anchor is None:
            return False, False, False

        is_start = is_same(start, anchor, self.unit)
        if focus is None:
            return is_start, is_start, False

        is_end = is_same(end, focus, self.unit)
        return self.contains(start, end, anchor, focus), is_start, is_end


def _contains_by_day(start: datetime, end: datetime, anchor: datetime, focus: datetime) -> bool:
    # Exact period bounds against the selection instants, compared by day
    return not is_before(start, anchor, "day") and not is_after(end, focus, "day")


class _CalendarStrategy(GranularityStrategy):
    """Month calendar of whole weeks, used by DAY and WEEK."""

    page_unit: Unit = "month"
    columns = 7
    weekday_labels = WEEKDAY_LABELS

    def cells_for_page(self, cursor: datetime) -> list[PageSlot]:
        first = start_of(cursor, "month")
        day = start_of(first, "week")
        last = end_of(end_of(cursor, "month"), "week")

        slots: list[PageSlot] = []
        while day <= last:
            period_start, period_end = self.period_of(day)
            slots.append(
                PageSlot(
                    key=CellKey(_day_key(day)),
                    label=str(day.day),
                    period_start=period_start,
                    period_end=period_end,
                    in_current_page=day.month == first.month,
                )
            )
            day = day + timedelta(days=1)
        return slots

    def title(self, cursor: datetime) -> str:
        return f"{cursor.year:04d}年{cursor.month:02d}月"


class DayStrategy(_CalendarStrategy):
    granularity = Granularity.DAY

    def format_bound(self, dt: datetime) -> str:
        return _day_key(dt)

    def parse_bound(self, text: str) -> datetime:
        return _parse_day(text)


class WeekStrategy(_CalendarStrategy):
    """Day cells whose period is their whole ISO week."""

    granularity = Granularity.WEEK

    def contains(self, start: datetime, end: datetime, anchor: datetime, focus: datetime) -> bool:
        return _contains_by_day(start, end, anchor, focus)

    def format_bound(self, dt: datetime) -> str:
        year, week = iso_week(dt)
        return f"{year:04d}-W{week}"

    def parse_bound(self, text: str) -> datetime:
        match = _WEEK_RE.match(text)
        if not match:
            raise ValueError(f"Invalid week '{text}' (expected YYYY-Wn)")
        try:
            return datetime.fromisocalendar(int(match.group(1)), int(match.group(2)), 1)
        except ValueError as e:
            raise ValueError(f"Invalid week '{text}': {e}") from e


class MonthStrategy(GranularityStrategy):
    granularity = Granularity.MONTH
    page_unit: Unit = "year"
    columns = 4

    def cells_for_page(self, cursor: datetime) -> list[PageSlot]:
        slots: list[PageSlot] = []
        for month in range(1, 13):
            period_start, period_end = self.period_of(datetime(cursor.year, month, 1))
            slots.append(
                PageSlot(
                    key=CellKey(self.format_bound(period_start)),
                    label=f"{month}月",
                    period_start=period_start,
                    period_end=period_end,
                )
            )
        return slots

    def format_bound(self, dt: datetime) -> str:
        return f"{dt.year:04d}-{dt.month:02d}"

    def parse_bound(self, text: str) -> datetime:
        try:
            return datetime.strptime(text, "%Y-%m")
        except ValueError as e:
            raise ValueError(f"Invalid month '{text}' (expected YYYY-MM): {e}") from e


class QuarterStrategy(GranularityStrategy):
    granularity = Granularity.QUARTER
    page_unit: Unit = "year"
    columns = 4

    def cells_for_page(self, cursor: datetime) -> list[PageSlot]:
        slots: list[PageSlot] = []
        for quarter in range(1, 5):
            # Built from the page year, never from a previously shown date
            period_start, period_end = self.period_of(with_quarter(cursor.year, quarter))
            slots.append(
                PageSlot(
                    key=CellKey(self.format_bound(period_start)),
                    label=f"Q{quarter}季度",
                    period_start=period_start,
                    period_end=period_end,
                )
            )
        return slots

    def contains(self, start: datetime, end: datetime, anchor: datetime, focus: datetime) -> bool:
        return _contains_by_day(start, end, anchor, focus)

    def format_bound(self, dt: datetime) -> str:
        return f"{dt.year:04d}-Q{quarter_of(dt)}"

    def parse_bound(self, text: str) -> datetime:
        match = _QUARTER_RE.match(text)
        if not match:
            raise ValueError(f"Invalid quarter '{text}' (expected YYYY-Q1..YYYY-Q4)")
        return with_quarter(int(match.group(1)), int(match.group(2)))


class YearStrategy(GranularityStrategy):
    """Eleven-year window centred on the cursor's year."""

    granularity = Granularity.YEAR
    page_unit: Unit = "year"
    columns = 4

    def cells_for_page(self, cursor: datetime) -> list[PageSlot]:
        first = add(start_of(cursor, "year"), -YEAR_WINDOW, "year")
        slots: list[PageSlot] = []
        for offset in range(YEAR_WINDOW * 2 + 1):
            period_start, period_end = self.period_of(add(first, offset, "year"))
            slots.append(
                PageSlot(
                    key=CellKey(self.format_bound(period_start)),
                    label=str(period_start.year),
                    period_start=period_start,
                    period_end=period_end,
                )
            )
        return slots

    def format_bound(self, dt: datetime) -> str:
        return f"{dt.year:04d}"

    def parse_bound(self, text: str) -> datetime:
        if not _YEAR_RE.match(text) or int(text) < 1:
            raise ValueError(f"Invalid year '{text}' (expected YYYY)")
        return datetime(int(text), 1, 1)


STRATEGIES: dict[Granularity, GranularityStrategy] = {
    Granularity.DAY: DayStrategy(),
    Granularity.WEEK: WeekStrategy(),
    Granularity.MONTH: MonthStrategy(),
    Granularity.QUARTER: QuarterStrategy(),
    Granularity.YEAR: YearStrategy(),
}


def strategy_for(granularity: Granularity | str) -> GranularityStrategy:
    """Look up the strategy for a granularity or granularity name."""
    return STRATEGIES[Granularity.parse(granularity)]
