"""
Date utilities for the rent schedule
Calendar helpers, month walking and due-date clamping
"""

from datetime import date, datetime, timezone
from typing import Iterator, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..core.errors import InvalidDate

DateLike = Union[date, datetime, str]

THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def is_leap_year(year: int) -> bool:
    """
    Determines if the year is a leap year

    Years divisible by 400 are NOT treated as leap years here (2000 -> False).
    Schedules already issued depend on this rule, so it is kept as-is.
    """
    return year % 4 == 0 and year % 100 != 0


def last_day_of_month(year: int, month: int) -> int:
    """
    Last valid day for a 1-based calendar month
    """
    if month in THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31


def calculate_due_date(year: int, month: int, day: int) -> date:
    """
    Rent due date for a month, clamping the requested day to the month length

    Args:
        year: Calendar year
        month: Calendar month (1-12)
        day: Requested day of month
    Returns:
        Due date (a UTC calendar date)
    """
    return date(year, month, min(day, last_day_of_month(year, month)))


def to_calendar_date(value: DateLike, field_name: str) -> date:
    """
    Normalize a date, datetime or ISO-8601 string to a UTC calendar date

    Time-of-day is dropped; aware datetimes are converted to UTC first.

    Raises:
        InvalidDate: if the value does not represent a real calendar date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = date_parser.isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise InvalidDate(f"{field_name} is invalid.") from e
    else:
        raise InvalidDate(f"{field_name} is invalid.")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def iter_month_starts(start: date, end: date) -> Iterator[date]:
    """
    Yield day 1 of every calendar month from start's month while <= end
    """
    cursor = first_of_month(start)
    while cursor <= end:
        yield cursor
        # date has no month after 9999-12
        if same_month(cursor, end):
            return
        cursor += relativedelta(months=1)


def months_spanned(start: date, end: date) -> int:
    """
    Number of calendar months touched by [start, end], inclusive
    """
    if start > end:
        return 0
    return (end.year - start.year) * 12 + end.month - start.month + 1


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month
