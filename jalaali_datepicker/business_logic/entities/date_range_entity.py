# jalaali_datepicker/business_logic/entities/date_range_entity.py
from dataclasses import dataclass, field
from typing import Optional
from .calendar_date_entity import CalendarDate


@dataclass(frozen=True)
class DateRange:
    from_date: Optional[CalendarDate] = field(default=None)
    to_date: Optional[CalendarDate] = field(default=None) # from_date <= to_date once both are set

    @property
    def is_empty(self) -> bool:
        return self.from_date is None and self.to_date is None

    @property
    def is_complete(self) -> bool:
        return self.from_date is not None and self.to_date is not None


@dataclass(frozen=True)
class RangeRejection:
    """A range update refused because `day` (a disabled day) falls inside it."""
    previous_range: DateRange
    day: CalendarDate

    @property
    def rejected(self) -> bool:
        return True
