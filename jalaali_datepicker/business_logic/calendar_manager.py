# jalaali_datepicker/business_logic/calendar_manager.py
from typing import Optional, Union, TYPE_CHECKING
from datetime import date

from jalaali_datepicker.business_logic.entities.calendar_date_entity import CalendarDate
from jalaali_datepicker.constants import (
    MonthDirection, MONTHS_IN_YEAR, GREGORIAN_SATURDAY, SATURDAY_WEEKDAY_OFFSET
)
import logging
if TYPE_CHECKING: # This block is only for type checkers
    from jalaali_datepicker.utils.date_converter import CalendarConverter

logger = logging.getLogger(__name__)


class CalendarManager:
    """
    Date arithmetic over Jalaali CalendarDate values.
    Every method is pure apart from today(), which reads the converter's clock.
    Missing dates never raise: comparisons with None are simply False.
    """

    def __init__(self, converter: 'CalendarConverter'):
        if converter is None:
            raise ValueError("converter cannot be None")
        self.converter = converter
        logger.debug(f"CalendarManager initialized with {type(converter).__name__}.")

    def today(self) -> CalendarDate:
        year, month, day = self.converter.today()
        return CalendarDate(year=year, month=month, day=day)

    def is_leap_year(self, year: int) -> bool:
        return self.converter.is_leap(year)

    def month_length(self, calendar_date: CalendarDate) -> int:
        return self.converter.days_in_month(calendar_date.year, calendar_date.month)

    def to_gregorian(self, calendar_date: CalendarDate) -> date:
        return self.converter.to_gregorian(calendar_date.year, calendar_date.month, calendar_date.day)

    def from_gregorian(self, gregorian_date: date) -> CalendarDate:
        year, month, day = self.converter.from_gregorian(gregorian_date)
        return CalendarDate(year=year, month=month, day=day)

    def to_jalaali_str(self, gregorian_date: Optional[date]) -> str:
        """یک آبجکت date میلادی را به رشته تاریخ شمسی با فرمت YYYY/MM/DD تبدیل می‌کند."""
        if gregorian_date is None:
            return "-"
        return str(self.from_gregorian(gregorian_date))

    def parse_jalaali_str(self, text: Optional[str]) -> Optional[CalendarDate]:
        """
        Parses YYYY/MM/DD Jalaali text. Malformed text, or a date the converter
        cannot place on the Gregorian calendar, gives None.
        """
        if not isinstance(text, str) or not text:
            return None
        try:
            parts = [int(part) for part in text.split('/')]
            if len(parts) != 3:
                return None
            calendar_date = CalendarDate(year=parts[0], month=parts[1], day=parts[2])
            self.to_gregorian(calendar_date)
        except ValueError:
            logger.debug(f"Could not parse Jalaali date string: {text!r}")
            return None
        return calendar_date

    def first_weekday_offset(self, calendar_date: CalendarDate) -> int:
        """
        Number of leading cells before the first day of the month in a
        Saturday-first week. Months starting on Saturday get SATURDAY_WEEKDAY_OFFSET.
        """
        gregorian_first_day = self.to_gregorian(calendar_date.first_of_month())
        weekday = (gregorian_first_day.weekday() + 1) % 7 # 0=Sunday .. 6=Saturday
        logger.debug(f"First day of {calendar_date.year}/{calendar_date.month} falls on weekday {weekday}")
        if weekday < GREGORIAN_SATURDAY:
            return weekday + 1
        return SATURDAY_WEEKDAY_OFFSET

    def shift_month(self, calendar_date: CalendarDate, direction: Union[MonthDirection, str]) -> CalendarDate:
        """Moves one month forward or back. The day is always reset to 1."""
        direction = MonthDirection(direction)
        to_sum = 1 if direction == MonthDirection.NEXT else -1
        new_month = calendar_date.month + to_sum
        new_year = calendar_date.year
        if new_month < 1:
            new_month = MONTHS_IN_YEAR
            new_year -= 1
        if new_month > MONTHS_IN_YEAR:
            new_month = 1
            new_year += 1
        return CalendarDate(year=new_year, month=new_month, day=1)

    def is_same_day(self, first: Optional[CalendarDate], second: Optional[CalendarDate]) -> bool:
        if first is None or second is None:
            return False
        return first.as_tuple() == second.as_tuple()

    def is_before(self, first: Optional[CalendarDate], second: Optional[CalendarDate]) -> bool:
        if first is None or second is None:
            return False
        return self.to_gregorian(first) < self.to_gregorian(second)

    def check_in_range(self,
                       day: Optional[CalendarDate],
                       from_date: Optional[CalendarDate],
                       to_date: Optional[CalendarDate]) -> bool:
        """True only when day lies strictly between from_date and to_date."""
        if day is None or from_date is None or to_date is None:
            return False
        native_day = self.to_gregorian(day)
        return self.to_gregorian(from_date) < native_day < self.to_gregorian(to_date)
