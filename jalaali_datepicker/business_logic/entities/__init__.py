# jalaali_datepicker/business_logic/entities/__init__.py
from .calendar_date_entity import CalendarDate
from .date_range_entity import DateRange, RangeRejection
from .day_cell_entity import DayCell, DaySelectionState
__all__ = [
    "CalendarDate", "DateRange", "RangeRejection", "DayCell", "DaySelectionState",
]
