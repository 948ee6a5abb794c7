# jalaali_datepicker/business_logic/range_selection_manager.py
from typing import Iterable, Optional, Union

from jalaali_datepicker.business_logic.calendar_manager import CalendarManager
from jalaali_datepicker.business_logic.entities.calendar_date_entity import CalendarDate
from jalaali_datepicker.business_logic.entities.date_range_entity import DateRange, RangeRejection
import logging

logger = logging.getLogger(__name__)

RangeSelectionResult = Union[DateRange, RangeRejection]


class RangeSelectionManager:
    def __init__(self, calendar_manager: CalendarManager):
        if calendar_manager is None:
            raise ValueError("calendar_manager cannot be None")
        self.calendar_manager = calendar_manager

    def build_range_selection(self,
                              existing_range: Optional[DateRange],
                              clicked_day: CalendarDate,
                              disabled_days: Optional[Iterable[CalendarDate]] = None
                              ) -> RangeSelectionResult:
        """
        Applies a click to a range selection.
        A complete range restarts from the clicked day; otherwise the empty end
        is filled (from_date first) and the ends are swapped if out of order.
        If a disabled day lies strictly inside the result, the previous range is
        kept and a RangeRejection naming that day is returned.
        """
        existing_range = existing_range if existing_range is not None else DateRange()
        clicked_day = CalendarDate(year=clicked_day.year, month=clicked_day.month, day=clicked_day.day)

        if existing_range.is_complete or existing_range.from_date is None:
            # Only to_date survives a restart when from_date was never set
            to_date = None if existing_range.is_complete else existing_range.to_date
            from_date = clicked_day
        else:
            from_date, to_date = existing_range.from_date, clicked_day

        # swap from and to values if from is later than to
        if self.calendar_manager.is_before(to_date, from_date):
            from_date, to_date = to_date, from_date

        for disabled_day in disabled_days or []:
            if self.calendar_manager.check_in_range(disabled_day, from_date, to_date):
                logger.warning(f"Range {from_date} - {to_date} rejected: disabled day {disabled_day} is inside it.")
                return RangeRejection(previous_range=existing_range, day=disabled_day)

        new_range = DateRange(from_date=from_date, to_date=to_date)
        logger.debug(f"Range selection updated to {from_date} - {to_date}")
        return new_range

    def is_day_disabled(self,
                        day: CalendarDate,
                        disabled_days: Optional[Iterable[CalendarDate]] = None,
                        minimum_date: Optional[CalendarDate] = None,
                        maximum_date: Optional[CalendarDate] = None,
                        is_standard: bool = True) -> bool:
        """Listed as disabled, or (for days of the shown month) outside minimum/maximum."""
        cm = self.calendar_manager
        if any(cm.is_same_day(day, disabled_day) for disabled_day in disabled_days or []):
            return True
        if not is_standard:
            return False
        return cm.is_before(day, minimum_date) or cm.is_before(maximum_date, day)

    def handle_day_click(self,
                         clicked_day: CalendarDate,
                         existing_range: Optional[DateRange] = None,
                         is_day_range: bool = True,
                         disabled_days: Optional[Iterable[CalendarDate]] = None,
                         minimum_date: Optional[CalendarDate] = None,
                         maximum_date: Optional[CalendarDate] = None
                         ) -> Union[CalendarDate, RangeSelectionResult]:
        """
        Single-day mode returns the clicked day; range mode returns the new range.
        Clicking a disabled day is rejected with the clicked day itself.
        """
        disabled_days = list(disabled_days or [])
        existing_range = existing_range if existing_range is not None else DateRange()
        if self.is_day_disabled(clicked_day, disabled_days, minimum_date, maximum_date):
            logger.warning(f"Click on disabled day {clicked_day} ignored.")
            return RangeRejection(previous_range=existing_range, day=clicked_day)

        if not is_day_range:
            return CalendarDate(year=clicked_day.year, month=clicked_day.month, day=clicked_day.day)
        return self.build_range_selection(existing_range, clicked_day, disabled_days)
