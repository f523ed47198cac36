"""rangepick - a date-range picker core for day, week, month, quarter and year ranges."""

from rangepick.domain.models import Cell, EmittedRange, Granularity, PickerView, Selection
from rangepick.widget import DateRangePicker

__all__ = ["Cell", "DateRangePicker", "EmittedRange", "Granularity", "PickerView", "Selection"]
