"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Tuple, Union


def parse_iso_date(value: Union[str, date]) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    Dates pass through unchanged and datetimes are truncated to their
    date. Malformed strings raise ValueError from date.fromisoformat.
    """
    # datetime is a date subclass, so it must be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def previous_month(day: date) -> Tuple[int, int]:
    """(year, month) of the calendar month before the one containing day"""
    if day.month == 1:
        return day.year - 1, 12
    return day.year, day.month - 1
