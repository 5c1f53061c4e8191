"""
Holiday awareness for Weekendly.

Exports the holiday calendar, the long weekend detector and the service
that combines them with suggestions.
"""

from weekendly.holidays.calendar import (
    INDIAN_HOLIDAYS,
    HolidayCalendar,
    HolidayCategory,
    HolidayRecord,
    get_default_calendar,
)
from weekendly.holidays.detector import (
    LongWeekendDetector,
    LongWeekendSpan,
    LongWeekendType,
    categorize_long_weekend,
    remove_duplicate_long_weekends,
)
from weekendly.holidays.service import HolidayService, get_holiday_service
from weekendly.holidays.suggestions import generate_long_weekend_suggestions

__all__ = [
    "INDIAN_HOLIDAYS",
    "HolidayCalendar",
    "HolidayCategory",
    "HolidayRecord",
    "get_default_calendar",
    "LongWeekendDetector",
    "LongWeekendSpan",
    "LongWeekendType",
    "categorize_long_weekend",
    "remove_duplicate_long_weekends",
    "HolidayService",
    "get_holiday_service",
    "generate_long_weekend_suggestions",
]
