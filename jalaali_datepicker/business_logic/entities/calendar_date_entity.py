# jalaali_datepicker/business_logic/entities/calendar_date_entity.py
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int # 1-12
    day: int # 1-31, not validated here
    # Display-only flags, set by the month view. Not part of equality.
    is_standard: Optional[bool] = field(default=None, compare=False)
    is_disabled: Optional[bool] = field(default=None, compare=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'CalendarDate':
        """Builds a date from a {'year', 'month', 'day'} mapping."""
        return cls(
            year=int(data['year']),
            month=int(data['month']),
            day=int(data['day']),
            is_standard=data.get('is_standard'),
            is_disabled=data.get('is_disabled'),
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def first_of_month(self) -> 'CalendarDate':
        return CalendarDate(year=self.year, month=self.month, day=1)

    def with_flags(self, is_standard: Optional[bool] = None, is_disabled: Optional[bool] = None) -> 'CalendarDate':
        return replace(self, is_standard=is_standard, is_disabled=is_disabled)

    def __str__(self) -> str:
        return f"{self.year}/{self.month:02d}/{self.day:02d}"
