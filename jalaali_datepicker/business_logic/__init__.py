# jalaali_datepicker/business_logic/__init__.py
from typing import Optional, TYPE_CHECKING

from .calendar_manager import CalendarManager
from .range_selection_manager import RangeSelectionManager
from .month_view_manager import MonthViewManager
if TYPE_CHECKING:
    from jalaali_datepicker.utils.date_converter import CalendarConverter


def create_calendar_manager(converter: Optional['CalendarConverter'] = None) -> CalendarManager:
    """CalendarManager wired to jdatetime unless another converter is given."""
    if converter is None:
        from jalaali_datepicker.utils.date_converter import JdatetimeConverter
        converter = JdatetimeConverter()
    return CalendarManager(converter)
