# jalaali_datepicker/constants.py

from enum import Enum

# General
DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12

# getDay()-style index of Saturday (0=Sunday .. 6=Saturday)
GREGORIAN_SATURDAY = 6
# Offset returned for months starting on Saturday. Kept as the picker has always rendered it.
SATURDAY_WEEKDAY_OFFSET = 3


class MonthDirection(Enum):
    NEXT = "NEXT"
    PREVIOUS = "PREVIOUS"


PERSIAN_DIGITS = ['۰', '۱', '۲', '۳', '۴', '۵', '۶', '۷', '۸', '۹']

PERSIAN_MONTHS = [
    'فروردین',
    'اردیبهشت',
    'خرداد',
    'تیر',
    'مرداد',
    'شهریور',
    'مهر',
    'آبان',
    'آذر',
    'دی',
    'بهمن',
    'اسفند',
]

# هفته از شنبه شروع می‌شود
WEEK_DAYS = {
    'saturday': 'شنبه',
    'sunday': 'یکشنبه',
    'monday': 'دوشنبه',
    'tuesday': 'سه شنبه',
    'wednesday': 'چهارشنبه',
    'thursday': 'پنجشنبه',
    'friday': 'جمعه',
}
