"""
Date utility functions for Weekendly.

Everything here works on civil dates (``datetime.date``): a calendar day
with no time of day and no timezone. Datetimes are truncated to their date
before any comparison so "today" and table dates always compare like for like.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, Union

from weekendly.exceptions import DateParseError


DateLike = Union[date, datetime, str]

ISO_DATE_FORMAT = "%Y-%m-%d"

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def is_weekend(check_date: date) -> bool:
    """
    Check if a date falls on a weekend (Saturday or Sunday).

    Args:
        check_date: The date to check

    Returns:
        True if the date is Saturday or Sunday, False otherwise

    Examples:
        >>> is_weekend(date(2025, 1, 4))  # Saturday
        True
        >>> is_weekend(date(2025, 1, 5))  # Sunday
        True
        >>> is_weekend(date(2025, 1, 6))  # Monday
        False
    """
    return check_date.weekday() in (5, 6)  # Saturday=5, Sunday=6


def add_days(start: date, days: int) -> date:
    """Return the civil date ``days`` after ``start`` (negative goes back)."""
    return start + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """
    Whole days from ``start`` to ``end``.

    Negative when ``end`` is before ``start``.

    Examples:
        >>> days_between(date(2025, 8, 1), date(2025, 8, 15))
        14
        >>> days_between(date(2025, 8, 15), date(2025, 8, 1))
        -14
    """
    return (end - start).days


def date_range(start: date, end: date) -> Iterator[date]:
    """
    Generate all dates between start and end (inclusive).

    Args:
        start: Start date
        end: End date

    Yields:
        Each date from start to end (inclusive)

    Examples:
        >>> dates = list(date_range(date(2025, 1, 1), date(2025, 1, 3)))
        >>> len(dates)
        3
        >>> dates[-1]
        datetime.date(2025, 1, 3)
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def get_weekday_name(check_date: date) -> str:
    """
    Get the name of the weekday for a given date.

    Examples:
        >>> get_weekday_name(date(2025, 1, 6))
        'Monday'
        >>> get_weekday_name(date(2025, 1, 11))
        'Saturday'
    """
    return WEEKDAY_NAMES[check_date.weekday()]


def parse_iso_date(date_str: str) -> date:
    """
    Parse a strict ISO calendar date (YYYY-MM-DD).

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object

    Raises:
        DateParseError: If the string is not a valid ISO date

    Examples:
        >>> parse_iso_date("2025-08-15")
        datetime.date(2025, 8, 15)
        >>> parse_iso_date(" 2025-08-15 ")
        datetime.date(2025, 8, 15)
    """
    if not isinstance(date_str, str) or not date_str.strip():
        raise DateParseError(date_str)

    try:
        return datetime.strptime(date_str.strip(), ISO_DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(date_str) from e


def to_civil_date(value: DateLike) -> date:
    """
    Normalise a date, datetime or ISO string to a civil date.

    Datetimes keep only their calendar date; timezone info is ignored.

    Raises:
        DateParseError: If ``value`` is a malformed string or an unsupported type
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise DateParseError(value)


def format_iso_date(value: date) -> str:
    """Format a civil date as YYYY-MM-DD."""
    return value.isoformat()
