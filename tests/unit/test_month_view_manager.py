"""Tests for the month page model: day grid, selection states, selectors and navigation arrows."""

import pytest

from jalaali_datepicker.business_logic import MonthViewManager
from jalaali_datepicker.business_logic.entities import CalendarDate, DateRange, RangeRejection
from jalaali_datepicker.constants import MonthDirection


@pytest.fixture
def month_view(calendar_manager) -> MonthViewManager:
    return MonthViewManager(calendar_manager)


class TestConstruction:
    def test_manager_is_required(self):
        with pytest.raises(ValueError):
            MonthViewManager(None)

    def test_selector_years_must_be_ordered(self, calendar_manager):
        with pytest.raises(ValueError):
            MonthViewManager(calendar_manager, selector_starting_year=1410, selector_ending_year=1400)


class TestInitialActiveDate:
    def test_selected_day_wins(self, month_view):
        selected = CalendarDate(1401, 5, 5)
        selected_range = DateRange(from_date=CalendarDate(1399, 1, 1))
        assert month_view.initial_active_date(selected, selected_range) == selected

    def test_range_start_is_next(self, month_view):
        selected_range = DateRange(from_date=CalendarDate(1399, 1, 1))
        assert month_view.initial_active_date(None, selected_range) == CalendarDate(1399, 1, 1)

    def test_falls_back_to_today(self, month_view):
        # FakeConverter's today is 1402/07/01
        assert month_view.initial_active_date() == CalendarDate(1402, 7, 1)
        assert month_view.initial_active_date(None, DateRange()) == CalendarDate(1402, 7, 1)


class TestMonthViewDays:
    def test_saturday_month_layout(self, month_view):
        cells = month_view.month_view_days(CalendarDate(1402, 7, 12))
        assert len(cells) == 30 + 7
        assert [cell.cell_id for cell in cells[:3]] == ["starting-blank-0", "starting-blank-1", "starting-blank-2"]
        assert not any(cell.is_standard for cell in cells[:3])
        assert cells[3].date == CalendarDate(1402, 7, 1)
        assert cells[-4].cell_id == "ending-blank-0"
        assert sum(1 for cell in cells if cell.is_standard) == 30

    def test_standard_cells_carry_flags(self, month_view):
        cells = month_view.month_view_days(CalendarDate(1403, 1, 1))
        first = cells[4]
        assert first.value == 1
        assert first.date == CalendarDate(1403, 1, 1)
        assert first.date.is_standard is True
        assert first.date.is_disabled is False

    def test_grid_always_has_one_extra_week(self, month_view, calendar_manager):
        for month in range(1, 13):
            active = CalendarDate(1403, month, 1)
            cells = month_view.month_view_days(active)
            assert len(cells) == calendar_manager.month_length(active) + 7

    def test_direction_builds_incoming_month(self, month_view):
        cells = month_view.month_view_days(CalendarDate(1402, 12, 20), MonthDirection.NEXT)
        standard = [cell.date for cell in cells if cell.is_standard]
        assert standard[0] == CalendarDate(1403, 1, 1)
        assert len(standard) == 31

    def test_disabled_days_and_minimum(self, calendar_manager):
        month_view = MonthViewManager(
            calendar_manager,
            disabled_days=[CalendarDate(1403, 1, 20)],
            minimum_date=CalendarDate(1403, 1, 10),
        )
        by_day = {cell.value: cell.date for cell in month_view.month_view_days(CalendarDate(1403, 1, 1))
                  if cell.is_standard}
        assert by_day[9].is_disabled
        assert not by_day[10].is_disabled
        assert by_day[20].is_disabled
        assert not by_day[21].is_disabled

    def test_maximum(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, maximum_date=CalendarDate(1403, 1, 15))
        by_day = {cell.value: cell.date for cell in month_view.month_view_days(CalendarDate(1403, 1, 1))
                  if cell.is_standard}
        assert not by_day[15].is_disabled
        assert by_day[16].is_disabled


class TestDaySelectionState:
    @pytest.fixture
    def selected_range(self):
        return DateRange(from_date=CalendarDate(1402, 7, 5), to_date=CalendarDate(1402, 7, 9))

    def test_range_start_is_not_within(self, month_view, selected_range):
        state = month_view.day_selection_state(CalendarDate(1402, 7, 5), selected_range=selected_range)
        assert state.is_range_start
        assert not state.is_range_end
        assert not state.is_within_range

    def test_range_end_is_not_within(self, month_view, selected_range):
        state = month_view.day_selection_state(CalendarDate(1402, 7, 9), selected_range=selected_range)
        assert state.is_range_end
        assert not state.is_range_start
        assert not state.is_within_range

    def test_day_between_ends(self, month_view, selected_range):
        state = month_view.day_selection_state(CalendarDate(1402, 7, 7), selected_range=selected_range)
        assert state.is_within_range
        assert not (state.is_range_start or state.is_range_end)

    def test_half_open_range_marks_start_only(self, month_view):
        selected_range = DateRange(from_date=CalendarDate(1402, 7, 5))
        start = month_view.day_selection_state(CalendarDate(1402, 7, 5), selected_range=selected_range)
        later = month_view.day_selection_state(CalendarDate(1402, 7, 6), selected_range=selected_range)
        assert start.is_range_start
        assert not later.is_within_range

    def test_today_when_not_selected(self, month_view):
        # FakeConverter's today is 1402/07/01
        state = month_view.day_selection_state(CalendarDate(1402, 7, 1))
        assert state.is_today
        assert not state.is_selected

    def test_selected_day_hides_today(self, month_view):
        today = CalendarDate(1402, 7, 1)
        state = month_view.day_selection_state(today, selected_day=today)
        assert state.is_selected
        assert not state.is_today

    def test_disabled_day(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, disabled_days=[CalendarDate(1402, 7, 3)])
        assert month_view.day_selection_state(CalendarDate(1402, 7, 3)).is_disabled
        assert not month_view.day_selection_state(CalendarDate(1402, 7, 4)).is_disabled

    def test_month_view_cells_carry_states(self, month_view, selected_range):
        cells = month_view.month_view_days(
            CalendarDate(1402, 7, 1), selected_day=CalendarDate(1402, 7, 20), selected_range=selected_range
        )
        by_day = {cell.value: cell.state for cell in cells if cell.is_standard}
        assert all(cell.state.is_blank for cell in cells if not cell.is_standard)
        assert not any(state.is_blank for state in by_day.values())
        assert by_day[1].is_today
        assert by_day[5].is_range_start
        assert by_day[9].is_range_end
        assert [day for day, state in by_day.items() if state.is_within_range] == [6, 7, 8]
        assert by_day[20].is_selected

    def test_cells_without_selection(self, month_view):
        cells = month_view.month_view_days(CalendarDate(1402, 8, 1))
        assert not any(cell.state.is_today for cell in cells)
        assert not any(cell.state.is_selected or cell.state.is_within_range for cell in cells)


class TestSelectors:
    def test_month_year_text(self, month_view):
        assert month_view.month_year_text(CalendarDate(1402, 7, 1)) == "مهر ۱۴۰۲"

    def test_months_after_maximum(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, maximum_date=CalendarDate(1402, 6, 15))
        assert month_view.is_month_selectable(1402, 6)
        assert not month_view.is_month_selectable(1402, 7)

    def test_months_before_minimum(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, minimum_date=CalendarDate(1402, 3, 1))
        assert not month_view.is_month_selectable(1402, 1)
        assert not month_view.is_month_selectable(1402, 2)
        assert month_view.is_month_selectable(1402, 3)

    def test_esfand_before_minimum_in_next_year(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, minimum_date=CalendarDate(1403, 1, 1))
        assert not month_view.is_month_selectable(1402, 12)

    def test_selectable_months_lists_all_twelve(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, maximum_date=CalendarDate(1402, 6, 15))
        months = month_view.selectable_months(1402)
        assert [month for month, _ in months] == list(range(1, 13))
        assert [month for month, selectable in months if selectable] == list(range(1, 7))

    def test_selector_years(self, calendar_manager):
        month_view = MonthViewManager(
            calendar_manager,
            minimum_date=CalendarDate(1390, 6, 1),
            maximum_date=CalendarDate(1410, 1, 1),
            selector_starting_year=1388,
            selector_ending_year=1412,
        )
        years = dict(month_view.selector_years())
        assert len(years) == 25
        assert not years[1389]
        assert years[1390]
        assert years[1410]
        assert not years[1411]

    def test_default_selector_bounds(self, month_view):
        years = month_view.selector_years()
        assert years[0] == (1300, True)
        assert years[-1] == (1450, True)

    def test_select_month_and_year_keep_other_fields(self, month_view):
        active = CalendarDate(1402, 7, 12)
        assert month_view.select_month(active, 2) == CalendarDate(1402, 2, 12)
        assert month_view.select_year(active, 1399) == CalendarDate(1399, 7, 12)


class TestNavigationArrows:
    def test_no_bounds_never_disabled(self, month_view):
        active = CalendarDate(1402, 6, 10)
        assert not month_view.is_next_month_disabled(active)
        assert not month_view.is_previous_month_disabled(active)

    def test_next_month_after_maximum(self, calendar_manager):
        active = CalendarDate(1402, 6, 10)
        assert MonthViewManager(calendar_manager, maximum_date=CalendarDate(1402, 6, 31)).is_next_month_disabled(active)
        assert not MonthViewManager(calendar_manager, maximum_date=CalendarDate(1402, 7, 1)).is_next_month_disabled(active)

    def test_next_month_across_year(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, maximum_date=CalendarDate(1402, 12, 29))
        assert month_view.is_next_month_disabled(CalendarDate(1402, 12, 1))

    def test_previous_month_at_minimum(self, calendar_manager):
        active = CalendarDate(1402, 6, 10)
        assert MonthViewManager(calendar_manager, minimum_date=CalendarDate(1402, 6, 1)).is_previous_month_disabled(active)
        assert MonthViewManager(calendar_manager, minimum_date=CalendarDate(1402, 6, 15)).is_previous_month_disabled(active)
        assert not MonthViewManager(calendar_manager, minimum_date=CalendarDate(1402, 5, 20)).is_previous_month_disabled(active)


class TestClickDay:
    def test_click_uses_view_configuration(self, calendar_manager):
        month_view = MonthViewManager(calendar_manager, disabled_days=[CalendarDate(1402, 7, 5)])
        state = month_view.click_day(CalendarDate(1402, 7, 1))
        assert state == DateRange(from_date=CalendarDate(1402, 7, 1))
        rejected = month_view.click_day(CalendarDate(1402, 7, 10), existing_range=state)
        assert isinstance(rejected, RangeRejection)
        assert rejected.previous_range == state
        assert rejected.day == CalendarDate(1402, 7, 5)

    def test_single_day_click(self, month_view):
        assert month_view.click_day(CalendarDate(1402, 7, 3), is_day_range=False) == CalendarDate(1402, 7, 3)
