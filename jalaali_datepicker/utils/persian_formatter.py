# jalaali_datepicker/utils/persian_formatter.py

from typing import List, Optional, Union

from jalaali_datepicker.constants import PERSIAN_DIGITS, PERSIAN_MONTHS, WEEK_DAYS

LATIN_DIGITS = '0123456789'


def to_persian_number(number: Union[int, str]) -> str:
    """ارقام لاتین را به ارقام فارسی تبدیل می‌کند. کاراکترهای غیر عددی دست نخورده می‌مانند."""
    return ''.join(
        PERSIAN_DIGITS[int(letter)] if letter in LATIN_DIGITS else letter
        for letter in str(number)
    )


def pad_zero(number: Optional[int]) -> str:
    """Two-digit month/day text. A missing value falls back to '01'."""
    if not number:
        return '01'
    text = str(number)
    return f"0{text}" if len(text) == 1 else text


def get_month_name(month: int) -> str:
    return PERSIAN_MONTHS[month - 1]


def get_month_number(month_name: str) -> int:
    """Returns 1-12, or 0 if the name is not a Persian month."""
    if month_name not in PERSIAN_MONTHS:
        return 0
    return PERSIAN_MONTHS.index(month_name) + 1


def get_weekday_initials() -> List[str]:
    # حرف اول نام روزها، از شنبه تا جمعه
    return [name[0] for name in WEEK_DAYS.values()]
