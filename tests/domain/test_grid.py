"""Tests for rangepick.domain.grid pure functions."""

from datetime import datetime

from rangepick.domain.grid import build_cells, navigate, page_columns, page_title, weekday_labels
from rangepick.domain.models import Cell, Granularity, Selection

END_OF_DAY = (23, 59, 59, 999999)


def by_key(cells: list[Cell]) -> dict[str, Cell]:
    return {cell.key: cell for cell in cells}


def selected_keys(cells: list[Cell]) -> list[str]:
    return [cell.key for cell in cells if cell.is_selected]


class TestCalendarPage:
    """Tests for day and week page layout."""

    def test_march_2024_spans_whole_weeks(self) -> None:
        """Should run from the Monday before the 1st to the Sunday after the 31st."""
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), Selection())

        assert len(cells) == 35
        assert cells[0].key == "2024-02-26"
        assert cells[-1].key == "2024-03-31"

    def test_marks_other_month_days(self) -> None:
        """Should flag days outside the cursor's month."""
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), Selection())

        assert [cell.in_current_page for cell in cells[:5]] == [False, False, False, False, True]
        assert sum(cell.in_current_page for cell in cells) == 31

    def test_six_week_month(self) -> None:
        """Should grow to six rows when the month needs them."""
        cells = build_cells(Granularity.DAY, datetime(2024, 9, 1), Selection())

        assert len(cells) == 42
        assert cells[0].key == "2024-08-26"
        assert cells[-1].key == "2024-10-06"

    def test_four_week_month(self) -> None:
        """Should be exactly four rows when February fits Monday to Sunday."""
        cells = build_cells(Granularity.DAY, datetime(2021, 2, 10), Selection())

        assert len(cells) == 28
        assert all(cell.in_current_page for cell in cells)

    def test_day_labels_are_day_of_month(self) -> None:
        """Should label cells with the day number."""
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), Selection())

        assert cells[0].label == "26"
        assert cells[4].label == "1"

    def test_week_cells_carry_week_period(self) -> None:
        """Should give every day cell its whole week as period."""
        cell = by_key(build_cells(Granularity.WEEK, datetime(2024, 3, 1), Selection()))["2024-03-06"]

        assert cell.period_start == datetime(2024, 3, 4)
        assert cell.period_end == datetime(2024, 3, 10, *END_OF_DAY)


class TestDaySelection:
    """Tests for day page flags."""

    def test_empty_selection_flags_nothing(self) -> None:
        """Should leave every cell unflagged."""
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), Selection())

        assert not any(cell.is_selected or cell.is_range_start or cell.is_range_end for cell in cells)

    def test_anchor_only_previews_anchor_day(self) -> None:
        """Should flag only the anchor day as selected and start."""
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), Selection(anchor=datetime(2024, 3, 5)))

        assert selected_keys(cells) == ["2024-03-05"]
        assert by_key(cells)["2024-03-05"].is_range_start
        assert not any(cell.is_range_end for cell in cells)

    def test_complete_range(self) -> None:
        """Should flag March 5-20 inclusive with start and end markers."""
        selection = Selection(anchor=datetime(2024, 3, 5), focus=datetime(2024, 3, 20, *END_OF_DAY))
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), selection)

        assert selected_keys(cells) == [f"2024-03-{day:02d}" for day in range(5, 21)]
        assert [cell.key for cell in cells if cell.is_range_start] == ["2024-03-05"]
        assert [cell.key for cell in cells if cell.is_range_end] == ["2024-03-20"]

    def test_single_day_range_is_start_and_end(self) -> None:
        """Should mark one cell as both start and end."""
        selection = Selection(anchor=datetime(2024, 3, 5), focus=datetime(2024, 3, 5, *END_OF_DAY))
        cell = by_key(build_cells(Granularity.DAY, datetime(2024, 3, 15), selection))["2024-03-05"]

        assert cell.is_selected and cell.is_range_start and cell.is_range_end

    def test_range_on_other_page_flags_nothing_here(self) -> None:
        """Should leave a page without selected days unflagged."""
        selection = Selection(anchor=datetime(2024, 1, 5), focus=datetime(2024, 1, 20, *END_OF_DAY))
        cells = build_cells(Granularity.DAY, datetime(2024, 3, 15), selection)

        assert selected_keys(cells) == []


class TestWeekSelection:
    """Tests for week page flags."""

    def test_anchor_only_previews_whole_week(self) -> None:
        """Should flag all seven days of the anchor week."""
        cells = build_cells(Granularity.WEEK, datetime(2024, 3, 1), Selection(anchor=datetime(2024, 3, 4)))

        assert selected_keys(cells) == [f"2024-03-{day:02d}" for day in range(4, 11)]
        assert all(cell.is_range_start for cell in cells if cell.is_selected)

    def test_weeks_ten_to_twelve(self) -> None:
        """Should flag every day of weeks 10, 11 and 12."""
        selection = Selection(anchor=datetime(2024, 3, 4), focus=datetime(2024, 3, 24, *END_OF_DAY))
        cells = build_cells(Granularity.WEEK, datetime(2024, 3, 1), selection)

        assert selected_keys(cells) == [f"2024-03-{day:02d}" for day in range(4, 25)]
        assert [cell.key for cell in cells if cell.is_range_start] == [f"2024-03-{day:02d}" for day in range(4, 11)]
        assert [cell.key for cell in cells if cell.is_range_end] == [f"2024-03-{day:02d}" for day in range(18, 25)]


class TestButtonPages:
    """Tests for month, quarter and year pages."""

    def test_month_page_has_twelve_months(self) -> None:
        """Should list the cursor year's months in order."""
        cells = build_cells(Granularity.MONTH, datetime(2024, 7, 19), Selection())

        assert [cell.key for cell in cells] == [f"2024-{m:02d}" for m in range(1, 13)]
        assert cells[2].label == "3月"
        assert all(cell.in_current_page for cell in cells)

    def test_month_range_flags(self) -> None:
        """Should flag February through June."""
        selection = Selection(anchor=datetime(2024, 2, 1), focus=datetime(2024, 6, 30, *END_OF_DAY))
        cells = build_cells(Granularity.MONTH, datetime(2024, 1, 1), selection)

        assert selected_keys(cells) == ["2024-02", "2024-03", "2024-04", "2024-05", "2024-06"]
        assert by_key(cells)["2024-02"].is_range_start
        assert by_key(cells)["2024-06"].is_range_end

    def test_quarter_page_uses_cursor_year(self) -> None:
        """Should build all four quarters from the page's year."""
        cells = build_cells(Granularity.QUARTER, datetime(2023, 11, 15), Selection())

        assert [cell.key for cell in cells] == ["2023-Q1", "2023-Q2", "2023-Q3", "2023-Q4"]
        assert [cell.label for cell in cells] == ["Q1季度", "Q2季度", "Q3季度", "Q4季度"]
        assert cells[3].period_start == datetime(2023, 10, 1)
        assert cells[3].period_end == datetime(2023, 12, 31, *END_OF_DAY)

    def test_quarter_containment(self) -> None:
        """Should select Q1-Q3 by containment and leave Q4 out."""
        selection = Selection(anchor=datetime(2024, 1, 1), focus=datetime(2024, 9, 30, *END_OF_DAY))
        cells = build_cells(Granularity.QUARTER, datetime(2024, 5, 1), selection)

        assert selected_keys(cells) == ["2024-Q1", "2024-Q2", "2024-Q3"]
        assert [cell.key for cell in cells if cell.is_range_start] == ["2024-Q1"]
        assert [cell.key for cell in cells if cell.is_range_end] == ["2024-Q3"]

    def test_year_window_centres_on_cursor(self) -> None:
        """Should show five years either side of the cursor year."""
        cells = build_cells(Granularity.YEAR, datetime(2025, 6, 1), Selection())

        assert [cell.key for cell in cells] == [str(y) for y in range(2020, 2031)]
        assert cells[5].label == "2025"

    def test_year_range_flags(self) -> None:
        """Should flag 2022-2024 inclusive."""
        selection = Selection(anchor=datetime(2022, 1, 1), focus=datetime(2024, 12, 31, *END_OF_DAY))
        cells = build_cells(Granularity.YEAR, datetime(2025, 6, 1), selection)

        assert selected_keys(cells) == ["2022", "2023", "2024"]


class TestNavigate:
    """Tests for navigate."""

    def test_day_moves_one_month(self) -> None:
        """Should move a day page by one month, clamping the day."""
        assert navigate(Granularity.DAY, datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
        assert navigate(Granularity.WEEK, datetime(2024, 3, 15), -1) == datetime(2024, 2, 15)

    def test_button_pages_move_one_year(self) -> None:
        """Should move month, quarter and year pages by one year."""
        for granularity in (Granularity.MONTH, Granularity.QUARTER, Granularity.YEAR):
            assert navigate(granularity, datetime(2024, 5, 1), 1) == datetime(2025, 5, 1)
            assert navigate(granularity, datetime(2024, 5, 1), -1) == datetime(2023, 5, 1)

    def test_clamps_at_upper_year_limit(self) -> None:
        """Should stop instead of overflowing."""
        assert navigate(Granularity.YEAR, datetime(9994, 12, 1), 1) == datetime(9994, 12, 1)
        assert navigate(Granularity.DAY, datetime(9994, 12, 15), 1) == datetime(9994, 12, 1)

    def test_extreme_cursor_still_renders(self) -> None:
        """Should render a full page for a cursor at the datetime limit."""
        cells = build_cells(Granularity.YEAR, datetime(9999, 1, 1), Selection())

        assert len(cells) == 11
        assert cells[-1].key == "9999"


class TestPageChrome:
    """Tests for titles, weekday labels and columns."""

    def test_titles(self) -> None:
        """Should show year and month for calendar pages, year otherwise."""
        assert page_title(Granularity.DAY, datetime(2024, 3, 5)) == "2024年03月"
        assert page_title(Granularity.WEEK, datetime(2024, 11, 5)) == "2024年11月"
        assert page_title(Granularity.MONTH, datetime(2024, 3, 5)) == "2024年"
        assert page_title(Granularity.QUARTER, datetime(2024, 3, 5)) == "2024年"
        assert page_title(Granularity.YEAR, datetime(2024, 3, 5)) == "2024年"

    def test_weekday_labels_start_monday(self) -> None:
        """Should label calendar columns Monday first."""
        assert weekday_labels(Granularity.DAY) == ("一", "二", "三", "四", "五", "六", "日")
        assert weekday_labels(Granularity.MONTH) == ()

    def test_columns(self) -> None:
        """Should lay calendar pages out in seven columns."""
        assert page_columns(Granularity.WEEK) == 7
        assert page_columns(Granularity.QUARTER) == 4
