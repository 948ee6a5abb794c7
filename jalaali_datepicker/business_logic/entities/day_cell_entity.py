# jalaali_datepicker/business_logic/entities/day_cell_entity.py
from dataclasses import dataclass, field
from typing import Optional
from .calendar_date_entity import CalendarDate


@dataclass(frozen=True)
class DaySelectionState:
    is_today: bool = False # only when the day is not also the selected day
    is_selected: bool = False
    is_range_start: bool = False
    is_range_end: bool = False
    is_within_range: bool = False # strictly between the range ends
    is_blank: bool = False
    is_disabled: bool = False


@dataclass(frozen=True)
class DayCell:
    cell_id: str # e.g. "starting-blank-0", "standard-4"
    value: int
    date: Optional[CalendarDate] = field(default=None) # None for padding cells
    state: DaySelectionState = field(default_factory=DaySelectionState, compare=False)

    @property
    def is_standard(self) -> bool:
        return self.date is not None
