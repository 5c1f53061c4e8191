"""
Long weekend detection.

A long weekend is a maximal run of consecutive off-days (weekends plus table
holidays) that contains at least one holiday and lasts three days or more.
Spans are grown outward from each holiday in the scan window, so chained
holidays and the weekends between them collapse into a single span.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from weekendly.holidays.calendar import HolidayCalendar, HolidayRecord
from weekendly.utils.date_utils import (
    DateLike,
    add_days,
    days_between,
    format_iso_date,
    is_weekend,
    to_civil_date,
)

logger = logging.getLogger(__name__)

DEFAULT_DAYS_AHEAD = 90
MIN_LONG_WEEKEND_DAYS = 3


class LongWeekendType(str, Enum):
    """Classification of a span by its length."""

    REGULAR = "regular"
    LONG = "long"
    EXTENDED = "extended"


def categorize_long_weekend(duration: int) -> LongWeekendType:
    """
    Classify a span by duration.

    Examples:
        >>> categorize_long_weekend(4).value
        'extended'
        >>> categorize_long_weekend(3).value
        'long'
        >>> categorize_long_weekend(2).value
        'regular'
    """
    if duration >= 4:
        return LongWeekendType.EXTENDED
    if duration == 3:
        return LongWeekendType.LONG
    return LongWeekendType.REGULAR


@dataclass(frozen=True)
class LongWeekendSpan:
    """
    A run of consecutive off-days around a holiday.

    Two spans are the same long weekend when their (start, end) keys match,
    regardless of which holiday triggered them.
    """

    start_date: date
    end_date: date
    duration: int
    type: LongWeekendType
    trigger_holiday: Optional[HolidayRecord] = None
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    days_until: Optional[int] = None

    @property
    def key(self) -> Tuple[str, str]:
        """Deduplication identity: ISO start and end dates."""
        return (format_iso_date(self.start_date), format_iso_date(self.end_date))

    def contains_date(self, check_date: date) -> bool:
        """Check if a given date falls within this span."""
        return self.start_date <= check_date <= self.end_date

    def with_trigger(self, holiday: HolidayRecord) -> "LongWeekendSpan":
        return replace(self, trigger_holiday=holiday)

    def with_suggestions(self, suggestions: Iterable[str], days_until: int) -> "LongWeekendSpan":
        """Copy of this span enriched for display."""
        return replace(self, suggestions=tuple(suggestions), days_until=days_until)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation using the presentation layer's keys."""
        return {
            "startDate": format_iso_date(self.start_date),
            "endDate": format_iso_date(self.end_date),
            "duration": self.duration,
            "type": self.type.value,
            "triggerHoliday": self.trigger_holiday.to_dict() if self.trigger_holiday else None,
            "suggestions": list(self.suggestions),
            "daysUntil": self.days_until,
        }

    def __repr__(self) -> str:
        trigger = self.trigger_holiday.name if self.trigger_holiday else None
        return (
            f"<LongWeekendSpan({self.key[0]}..{self.key[1]}, "
            f"duration={self.duration}, type='{self.type.value}', trigger='{trigger}')>"
        )


def remove_duplicate_long_weekends(spans: Iterable[LongWeekendSpan]) -> List[LongWeekendSpan]:
    """
    Drop spans whose (start, end) key was already seen.

    The first span encountered wins, so the trigger holiday of a shared span
    is whichever holiday came first in table order.
    """
    seen = set()
    unique = []
    for span in spans:
        if span.key in seen:
            continue
        seen.add(span.key)
        unique.append(span)
    return unique


class LongWeekendDetector:
    """
    Finds long weekends around the holidays of an injected calendar.

    The detector keeps no state between calls; every detection recomputes
    from the calendar.
    """

    def __init__(self, calendar: HolidayCalendar, min_duration: int = MIN_LONG_WEEKEND_DAYS):
        """
        Initialize the detector.

        Args:
            calendar: Holiday table to detect against
            min_duration: Shortest span, in days, reported as a long weekend
        """
        if min_duration < 1:
            raise ValueError(f"min_duration must be at least 1, got {min_duration}")
        self.calendar = calendar
        self.min_duration = min_duration

    def is_day_off(self, check_date: date) -> bool:
        """True for Saturdays, Sundays and any date listed in the calendar."""
        return is_weekend(check_date) or self.calendar.is_holiday(check_date)

    def calculate_long_weekend(self, holiday_date: date) -> LongWeekendSpan:
        """
        Grow the run of off-days around ``holiday_date`` in both directions.

        The walk may leave the scan window and cross into years outside the
        calendar, where only weekends count.

        Args:
            holiday_date: Date to grow from

        Returns:
            Span without a trigger holiday attached
        """
        start = holiday_date
        end = holiday_date

        while self.is_day_off(add_days(start, -1)):
            start = add_days(start, -1)

        while self.is_day_off(add_days(end, 1)):
            end = add_days(end, 1)

        duration = days_between(start, end) + 1
        return LongWeekendSpan(
            start_date=start,
            end_date=end,
            duration=duration,
            type=categorize_long_weekend(duration),
        )

    def detect_long_weekends(
        self,
        start_date: Optional[DateLike] = None,
        days_ahead: int = DEFAULT_DAYS_AHEAD,
    ) -> List[LongWeekendSpan]:
        """
        Detect long weekends touching the window [start_date, start_date + days_ahead].

        Only the tables for the window's start year and end year are scanned,
        so a window longer than a year skips the holidays of any year in
        between. The default 90-day window never hits this.

        Args:
            start_date: First day of the window (date, datetime or ISO string).
                If None, uses today.
            days_ahead: Window length in days (default: 90)

        Returns:
            Unique spans of at least ``min_duration`` days, sorted by start date

        Raises:
            ValueError: If days_ahead is negative
            DateParseError: If start_date is a malformed date string
        """
        if days_ahead < 0:
            raise ValueError(f"days_ahead must be non-negative, got {days_ahead}")

        start_date = date.today() if start_date is None else to_civil_date(start_date)

        end_date = add_days(start_date, days_ahead)
        candidate_years = list(dict.fromkeys((start_date.year, end_date.year)))

        logger.debug(
            f"Scanning {start_date}..{end_date} for long weekends (years: {candidate_years})"
        )

        found: List[LongWeekendSpan] = []
        for year in candidate_years:
            for holiday in self.calendar.holidays_for_year(year):
                if not start_date <= holiday.date <= end_date:
                    continue

                span = self.calculate_long_weekend(holiday.date)
                if span.duration >= self.min_duration:
                    found.append(span.with_trigger(holiday))

        unique = remove_duplicate_long_weekends(found)
        unique.sort(key=lambda span: span.start_date)

        logger.debug(
            f"Found {len(unique)} long weekend(s) ({len(found) - len(unique)} duplicate(s) dropped)"
        )
        return unique
