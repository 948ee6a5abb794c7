# jalaali_datepicker/utils/date_converter.py

from datetime import date, datetime
from typing import Callable, Optional, Protocol, Tuple
import jdatetime


JalaaliTuple = Tuple[int, int, int]


class CalendarConverter(Protocol):
    """Jalaali <-> Gregorian primitive used by CalendarManager."""

    def today(self) -> JalaaliTuple: ...

    def days_in_month(self, year: int, month: int) -> int: ...

    def is_leap(self, year: int) -> bool: ...

    def to_gregorian(self, year: int, month: int, day: int) -> date: ...

    def from_gregorian(self, gregorian_date: date) -> JalaaliTuple: ...


class JdatetimeConverter:
    """CalendarConverter backed by jdatetime. `clock` returns today's Gregorian date."""

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        self.clock = clock if clock is not None else date.today

    def today(self) -> JalaaliTuple:
        return self.from_gregorian(self.clock())

    def is_leap(self, year: int) -> bool:
        return jdatetime.date(year, 1, 1).isleap()

    def days_in_month(self, year: int, month: int) -> int:
        if month <= 6:
            return 31
        if month < 12:
            return 30
        # اسفند
        return 30 if self.is_leap(year) else 29

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        # Invalid Jalaali values raise ValueError from jdatetime
        return jdatetime.date(year, month, day).togregorian()

    def from_gregorian(self, gregorian_date: date) -> JalaaliTuple:
        if isinstance(gregorian_date, datetime):
            gregorian_date = gregorian_date.date()
        j_date = jdatetime.date.fromgregorian(date=gregorian_date)
        return j_date.year, j_date.month, j_date.day
