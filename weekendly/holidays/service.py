"""
Holiday service: the query surface the planner UI talks to.

Wraps an injected HolidayCalendar and LongWeekendDetector and adds the
"relative to today" operations (upcoming long weekends with suggestions,
next holiday). "Today" comes from an injectable provider so results are
reproducible in tests.
"""

from datetime import date
from functools import lru_cache
from typing import Callable, List, Optional

from weekendly.holidays.calendar import HolidayCalendar, HolidayRecord, get_default_calendar
from weekendly.holidays.detector import (
    DEFAULT_DAYS_AHEAD,
    MIN_LONG_WEEKEND_DAYS,
    LongWeekendDetector,
    LongWeekendSpan,
)
from weekendly.holidays.suggestions import generate_long_weekend_suggestions
from weekendly.utils.date_utils import DateLike, days_between, to_civil_date
from weekendly.utils.logging_config import get_logger

DEFAULT_SUGGESTION_LIMIT = 3


class HolidayService:
    """
    Holiday lookups and long weekend queries over a single calendar.

    Example:
        >>> service = HolidayService(today_provider=lambda: date(2025, 7, 1))
        >>> [w.trigger_holiday.name for w in service.get_upcoming_long_weekends_with_suggestions(1)]
        ['Independence Day']
    """

    def __init__(
        self,
        calendar: Optional[HolidayCalendar] = None,
        today_provider: Optional[Callable[[], date]] = None,
        default_days_ahead: int = DEFAULT_DAYS_AHEAD,
        min_duration: int = MIN_LONG_WEEKEND_DAYS,
    ):
        """
        Initialize the holiday service.

        Args:
            calendar: Holiday table. If None, uses the built-in Indian holidays.
            today_provider: Zero-argument callable returning today's civil date.
                If None, uses date.today.
            default_days_ahead: Scan horizon used when callers don't pass one
            min_duration: Shortest span reported as a long weekend
        """
        if default_days_ahead < 0:
            raise ValueError(f"default_days_ahead must be non-negative, got {default_days_ahead}")

        self.calendar = calendar if calendar is not None else get_default_calendar()
        self.detector = LongWeekendDetector(self.calendar, min_duration=min_duration)
        self.default_days_ahead = default_days_ahead
        self._today_provider = today_provider or date.today
        self.logger = get_logger(__name__, {"component": "holiday_service"})

    def today(self) -> date:
        """Today's civil date according to the configured provider."""
        return to_civil_date(self._today_provider())

    # ------------------------------------------------------------------
    # Table lookups
    # ------------------------------------------------------------------

    def get_holidays_for_year(self, year: int) -> List[HolidayRecord]:
        """All holidays for ``year`` in table order; empty for unknown years."""
        return list(self.calendar.holidays_for_year(year))

    def is_holiday(self, check_date: DateLike) -> bool:
        """
        Check if a date is a table holiday.

        Raises:
            DateParseError: If ``check_date`` is a malformed date string
        """
        return self.calendar.is_holiday(to_civil_date(check_date))

    def get_holiday_info(self, check_date: DateLike) -> Optional[HolidayRecord]:
        """
        Get the holiday on a date, or None if there isn't one.

        Raises:
            DateParseError: If ``check_date`` is a malformed date string
        """
        return self.calendar.get_holiday_info(to_civil_date(check_date))

    def is_day_off(self, check_date: DateLike) -> bool:
        """Check if a date is a weekend day or a table holiday."""
        return self.detector.is_day_off(to_civil_date(check_date))

    # ------------------------------------------------------------------
    # Long weekends
    # ------------------------------------------------------------------

    def detect_long_weekends(
        self,
        start_date: Optional[DateLike] = None,
        days_ahead: Optional[int] = None,
    ) -> List[LongWeekendSpan]:
        """
        Detect long weekends in a window.

        Args:
            start_date: First day of the window. If None, uses today.
            days_ahead: Window length. If None, uses the service default.

        Returns:
            Unique long weekends sorted by start date (no suggestions attached)
        """
        start = to_civil_date(start_date) if start_date is not None else self.today()
        if days_ahead is None:
            days_ahead = self.default_days_ahead
        return self.detector.detect_long_weekends(start, days_ahead)

    def get_upcoming_long_weekends_with_suggestions(
        self, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> List[LongWeekendSpan]:
        """
        Get the next ``limit`` long weekends with suggestions and a countdown.

        Args:
            limit: Maximum number of long weekends to return (0 returns [])

        Returns:
            Long weekends from today's default window, each with
            ``suggestions`` and ``days_until`` filled in

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        today = self.today()
        long_weekends = self.detector.detect_long_weekends(today, self.default_days_ahead)

        upcoming = [
            weekend.with_suggestions(
                generate_long_weekend_suggestions(weekend),
                days_between(today, weekend.start_date),
            )
            for weekend in long_weekends[:limit]
        ]

        self.logger.debug(
            f"Returning {len(upcoming)} of {len(long_weekends)} upcoming long weekend(s)"
        )
        return upcoming

    # ------------------------------------------------------------------
    # Upcoming holidays
    # ------------------------------------------------------------------

    def get_upcoming_holidays(self, limit: Optional[int] = None) -> List[HolidayRecord]:
        """
        Holidays strictly after today in the current and next year, earliest first.

        Args:
            limit: Optional maximum number of holidays to return
        """
        today = self.today()
        holidays = [
            *self.calendar.holidays_for_year(today.year),
            *self.calendar.holidays_for_year(today.year + 1),
        ]

        upcoming = sorted(
            (holiday for holiday in holidays if holiday.date > today),
            key=lambda holiday: holiday.date,
        )
        return upcoming if limit is None else upcoming[:limit]

    def get_next_holiday(self) -> Optional[HolidayRecord]:
        """The next holiday after today, or None if the table has run out."""
        upcoming = self.get_upcoming_holidays(limit=1)
        if not upcoming:
            self.logger.debug(f"No holidays left in the table after {self.today()}")
            return None
        return upcoming[0]


@lru_cache()
def get_holiday_service() -> HolidayService:
    """
    Get the cached default service instance.

    Settings decide the scan horizon and minimum span length.
    """
    from weekendly.config import get_settings

    settings = get_settings()
    return HolidayService(
        default_days_ahead=settings.default_days_ahead,
        min_duration=settings.min_long_weekend_days,
    )
