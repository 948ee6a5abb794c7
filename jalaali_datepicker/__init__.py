# jalaali_datepicker/__init__.py
from jalaali_datepicker.business_logic import (
    CalendarManager, RangeSelectionManager, MonthViewManager, create_calendar_manager
)
from jalaali_datepicker.business_logic.entities import (
    CalendarDate, DateRange, RangeRejection, DayCell, DaySelectionState
)
from jalaali_datepicker.constants import MonthDirection
from jalaali_datepicker.utils.date_converter import CalendarConverter, JdatetimeConverter

__version__ = "0.1.0"
