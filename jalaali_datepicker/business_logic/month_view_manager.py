# jalaali_datepicker/business_logic/month_view_manager.py
from typing import Iterable, List, Optional, Tuple, Union

from jalaali_datepicker.business_logic.calendar_manager import CalendarManager
from jalaali_datepicker.business_logic.range_selection_manager import (
    RangeSelectionManager, RangeSelectionResult
)
from jalaali_datepicker.business_logic.entities.calendar_date_entity import CalendarDate
from jalaali_datepicker.business_logic.entities.date_range_entity import DateRange
from jalaali_datepicker.business_logic.entities.day_cell_entity import DayCell, DaySelectionState
from jalaali_datepicker.config import DEFAULT_SELECTOR_STARTING_YEAR, DEFAULT_SELECTOR_ENDING_YEAR
from jalaali_datepicker.constants import MonthDirection, DAYS_IN_WEEK, MONTHS_IN_YEAR
from jalaali_datepicker.utils.persian_formatter import get_month_name, to_persian_number
import logging

logger = logging.getLogger(__name__)


class MonthViewManager:
    """
    State-free model of one calendar page: the day grid, the month and year
    selectors and the navigation arrows, under fixed disabled days and
    optional minimum/maximum dates.
    """

    def __init__(self,
                 calendar_manager: CalendarManager,
                 disabled_days: Optional[Iterable[CalendarDate]] = None,
                 minimum_date: Optional[CalendarDate] = None,
                 maximum_date: Optional[CalendarDate] = None,
                 selector_starting_year: int = DEFAULT_SELECTOR_STARTING_YEAR,
                 selector_ending_year: int = DEFAULT_SELECTOR_ENDING_YEAR):
        if calendar_manager is None:
            raise ValueError("calendar_manager cannot be None")
        if selector_starting_year > selector_ending_year:
            raise ValueError("selector_starting_year must not be after selector_ending_year.")
        self.calendar_manager = calendar_manager
        self.range_selection_manager = RangeSelectionManager(calendar_manager)
        self.disabled_days = tuple(disabled_days or ())
        self.minimum_date = minimum_date
        self.maximum_date = maximum_date
        self.selector_starting_year = selector_starting_year
        self.selector_ending_year = selector_ending_year

    def initial_active_date(self,
                            selected_day: Optional[CalendarDate] = None,
                            selected_range: Optional[DateRange] = None) -> CalendarDate:
        """The page shown on open: the selected day, else the range start, else today."""
        if selected_day is not None:
            return selected_day
        if selected_range is not None and selected_range.from_date is not None:
            return selected_range.from_date
        return self.calendar_manager.today()

    def is_day_disabled(self, day: CalendarDate, is_standard: bool = True) -> bool:
        return self.range_selection_manager.is_day_disabled(
            day, self.disabled_days, self.minimum_date, self.maximum_date, is_standard
        )

    def month_view_days(self,
                        active_date: CalendarDate,
                        direction: Optional[Union[MonthDirection, str]] = None,
                        selected_day: Optional[CalendarDate] = None,
                        selected_range: Optional[DateRange] = None) -> List[DayCell]:
        """
        Cells of one month page: leading blanks, the month's days, trailing blanks.
        Every page has an extra week of cells, so len == month_length + 7.
        Each cell carries its DaySelectionState against selected_day / selected_range.
        """
        cm = self.calendar_manager
        view_date = active_date if direction is None else cm.shift_month(active_date, direction)
        offset = cm.first_weekday_offset(view_date)
        today = cm.today()
        logger.debug(f"Building month view for {view_date.year}/{view_date.month} with {offset} leading cells")

        blank_state = DaySelectionState(is_blank=True)
        starting_blanks = [
            DayCell(cell_id=f"starting-blank-{index}", value=index + 1, state=blank_state) for index in range(offset)
        ]
        standard_days = []
        for index in range(cm.month_length(view_date)):
            day = CalendarDate(year=view_date.year, month=view_date.month, day=index + 1)
            day = day.with_flags(is_standard=True, is_disabled=self.is_day_disabled(day))
            state = self.day_selection_state(day, selected_day, selected_range, today=today)
            standard_days.append(DayCell(cell_id=f"standard-{index}", value=index + 1, date=day, state=state))
        ending_blanks = [
            DayCell(cell_id=f"ending-blank-{index}", value=index + 1, state=blank_state)
            for index in range(DAYS_IN_WEEK - offset)
        ]
        return starting_blanks + standard_days + ending_blanks

    def day_selection_state(self,
                            day: CalendarDate,
                            selected_day: Optional[CalendarDate] = None,
                            selected_range: Optional[DateRange] = None,
                            today: Optional[CalendarDate] = None) -> DaySelectionState:
        """
        Selection state of one day. Range ends are matched exactly; check_in_range
        covers only the days strictly between them. A selected day is never
        reported as today.
        """
        cm = self.calendar_manager
        today = today if today is not None else cm.today()
        selected_range = selected_range if selected_range is not None else DateRange()
        is_selected = cm.is_same_day(day, selected_day)
        is_disabled = day.is_disabled if day.is_disabled is not None else self.is_day_disabled(day)
        return DaySelectionState(
            is_today=cm.is_same_day(day, today) and not is_selected,
            is_selected=is_selected,
            is_range_start=cm.is_same_day(day, selected_range.from_date),
            is_range_end=cm.is_same_day(day, selected_range.to_date),
            is_within_range=cm.check_in_range(day, selected_range.from_date, selected_range.to_date),
            is_blank=day.is_standard is False,
            is_disabled=bool(is_disabled),
        )

    def month_year_text(self, calendar_date: CalendarDate) -> str:
        return f"{get_month_name(calendar_date.month)} {to_persian_number(calendar_date.year)}"

    def is_month_selectable(self, year: int, month: int) -> bool:
        cm = self.calendar_manager
        month_start = CalendarDate(year=year, month=month, day=1)
        if self.maximum_date is not None and cm.is_before(self.maximum_date, month_start):
            return False
        if self.minimum_date is not None:
            next_month_start = cm.shift_month(month_start, MonthDirection.NEXT)
            if cm.is_before(next_month_start, self.minimum_date) or cm.is_same_day(next_month_start, self.minimum_date):
                return False
        return True

    def selectable_months(self, year: int) -> List[Tuple[int, bool]]:
        return [(month, self.is_month_selectable(year, month)) for month in range(1, MONTHS_IN_YEAR + 1)]

    def selector_years(self) -> List[Tuple[int, bool]]:
        """(year, selectable) pairs for the year selector."""
        years = []
        for year in range(self.selector_starting_year, self.selector_ending_year + 1):
            is_after_maximum = self.maximum_date is not None and year > self.maximum_date.year
            is_before_minimum = self.minimum_date is not None and year < self.minimum_date.year
            years.append((year, not (is_after_maximum or is_before_minimum)))
        return years

    def select_month(self, active_date: CalendarDate, month: int) -> CalendarDate:
        return CalendarDate(year=active_date.year, month=month, day=active_date.day)

    def select_year(self, active_date: CalendarDate, year: int) -> CalendarDate:
        return CalendarDate(year=year, month=active_date.month, day=active_date.day)

    def is_next_month_disabled(self, active_date: CalendarDate) -> bool:
        if self.maximum_date is None:
            return False
        next_month_start = self.calendar_manager.shift_month(active_date, MonthDirection.NEXT)
        return self.calendar_manager.is_before(self.maximum_date, next_month_start)

    def is_previous_month_disabled(self, active_date: CalendarDate) -> bool:
        if self.minimum_date is None:
            return False
        cm = self.calendar_manager
        month_start = active_date.first_of_month()
        return cm.is_before(month_start, self.minimum_date) or cm.is_same_day(self.minimum_date, month_start)

    def click_day(self,
                  clicked_day: CalendarDate,
                  existing_range: Optional[DateRange] = None,
                  is_day_range: bool = True) -> Union[CalendarDate, RangeSelectionResult]:
        return self.range_selection_manager.handle_day_click(
            clicked_day,
            existing_range=existing_range,
            is_day_range=is_day_range,
            disabled_days=self.disabled_days,
            minimum_date=self.minimum_date,
            maximum_date=self.maximum_date,
        )
