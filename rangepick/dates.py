"""Date utilities for rangepick.

Pure, unit-aware calendar arithmetic used by the picker core. Every
comparison truncates both sides to the unit boundary first, so time-of-day
never leaks into a "same day" or "before" decision.

Weeks follow ISO 8601: they start on Monday and are numbered within the
ISO week-numbering year.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from typing import Literal

from dateutil.relativedelta import relativedelta

Unit = Literal["day", "week", "month", "quarter", "year"]

UNITS: tuple[Unit, ...] = ("day", "week", "month", "quarter", "year")

# Years kept free on each side of the cursor so the widest page (11 years,
# or a month padded out to whole weeks) always stays representable.
CURSOR_MARGIN = 5


def _day_start(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _day_end(dt: datetime) -> datetime:
    return dt.replace(hour=23, minute=59, second=59, microsecond=999999)


def quarter_of(dt: datetime) -> int:
    """Return the quarter (1-4) the date falls in."""
    return (dt.month - 1) // 3 + 1


def start_of(dt: datetime, unit: Unit) -> datetime:
    """Truncate a date to the first instant of its unit.

    Args:
        dt: Date to truncate.
        unit: One of day, week, month, quarter, year.

    Returns:
        First instant of the period containing ``dt``.
    """
    day = _day_start(dt)
    if unit == "day":
        return day
    if unit == "week":
        return day - timedelta(days=day.weekday())
    if unit == "month":
        return day.replace(day=1)
    if unit == "quarter":
        return day.replace(month=(quarter_of(day) - 1) * 3 + 1, day=1)
    if unit == "year":
        return day.replace(month=1, day=1)
    raise ValueError(f"Unknown unit: {unit}")


def end_of(dt: datetime, unit: Unit) -> datetime:
    """Return the last instant (microsecond precision) of the date's unit.

    Args:
        dt: Date inside the period.
        unit: One of day, week, month, quarter, year.

    Returns:
        Last instant of the period containing ``dt``.
    """
    if unit == "day":
        return _day_end(dt)
    if unit == "week":
        return _day_end(start_of(dt, "week") + timedelta(days=6))
    if unit == "month":
        last_day = calendar.monthrange(dt.year, dt.month)[1]
        return _day_end(dt.replace(day=last_day))
    if unit == "quarter":
        last_month = quarter_of(dt) * 3
        last_day = calendar.monthrange(dt.year, last_month)[1]
        return _day_end(dt.replace(month=last_month, day=last_day))
    if unit == "year":
        return _day_end(dt.replace(month=12, day=31))
    raise ValueError(f"Unknown unit: {unit}")


def truncate(dt: datetime, unit: Unit) -> datetime:
    """Normalise a date to its unit boundary before it enters the picker state."""
    return start_of(dt, unit)


def add(dt: datetime, amount: int, unit: Unit) -> datetime:
    """Shift a date by a number of units.

    Month-based shifts clamp the day of month (31 Jan + 1 month = 29 Feb in
    a leap year), following ``relativedelta``.
    """
    if unit == "day":
        return dt + relativedelta(days=amount)
    if unit == "week":
        return dt + relativedelta(weeks=amount)
    if unit == "month":
        return dt + relativedelta(months=amount)
    if unit == "quarter":
        return dt + relativedelta(months=amount * 3)
    if unit == "year":
        return dt + relativedelta(years=amount)
    raise ValueError(f"Unknown unit: {unit}")


def subtract(dt: datetime, amount: int, unit: Unit) -> datetime:
    """Shift a date backwards by a number of units."""
    return add(dt, -amount, unit)


def is_same(a: datetime, b: datetime, unit: Unit) -> bool:
    """Check whether two dates fall in the same unit period."""
    return start_of(a, unit) == start_of(b, unit)


def is_before(a: datetime, b: datetime, unit: Unit | None = None) -> bool:
    """Check whether ``a`` is before ``b``, optionally truncated to a unit."""
    if unit is None:
        return a < b
    return start_of(a, unit) < start_of(b, unit)


def is_after(a: datetime, b: datetime, unit: Unit | None = None) -> bool:
    """Check whether ``a`` is after ``b``, optionally truncated to a unit."""
    if unit is None:
        return a > b
    return start_of(a, unit) > start_of(b, unit)


def is_between(
    dt: datetime,
    lower: datetime,
    upper: datetime,
    unit: Unit,
    inclusivity: str = "()",
) -> bool:
    """Check whether a date lies between two bounds at unit granularity.

    Args:
        dt: Date to test.
        lower: Lower bound.
        upper: Upper bound.
        unit: Unit both sides are truncated to.
        inclusivity: Two characters, ``[`` or ``(`` then ``]`` or ``)``.

    Returns:
        True if ``dt`` is within the bounds.
    """
    if len(inclusivity) != 2 or inclusivity[0] not in "[(" or inclusivity[1] not in "])":
        raise ValueError(f"Invalid inclusivity: {inclusivity!r}")

    if inclusivity[0] == "[":
        above = not is_before(dt, lower, unit)
    else:
        above = is_after(dt, lower, unit)

    if inclusivity[1] == "]":
        below = not is_after(dt, upper, unit)
    else:
        below = is_before(dt, upper, unit)

    return above and below


def with_quarter(year: int, quarter: int) -> datetime:
    """Build the first instant of a quarter from an explicit year.

    Args:
        year: Calendar year.
        quarter: Quarter number 1-4.

    Returns:
        Midnight on the first day of the quarter.

    Raises:
        ValueError: If quarter is outside 1-4.
    """
    if not 1 <= quarter <= 4:
        raise ValueError(f"Quarter must be 1-4, got {quarter}")
    return datetime(year, (quarter - 1) * 3 + 1, 1)


def iso_week(dt: datetime) -> tuple[int, int]:
    """Return (ISO week-numbering year, ISO week number) for a date."""
    iso = dt.isocalendar()
    return iso[0], iso[1]


def clamp_cursor(dt: datetime) -> datetime:
    """Keep a navigation cursor far enough from the datetime year limits.

    Args:
        dt: Proposed cursor.

    Returns:
        The cursor, or the nearest month of the allowed year range when the
        cursor falls outside it.
    """
    low = MINYEAR + CURSOR_MARGIN
    high = MAXYEAR - CURSOR_MARGIN
    if dt.year < low:
        return datetime(low, 1, 1)
    if dt.year > high:
        return datetime(high, 12, 1)
    return dt
