"""
Activity suggestions for long weekends.

Suggestions are plain strings assembled from three independent rule groups:
duration tier, festival keywords in the trigger holiday's name, and the
season of the start date (Indian climate). Groups are concatenated in that
order without deduplication.
"""

from typing import List, Tuple

from weekendly.holidays.detector import LongWeekendSpan

EXTENDED_WEEKEND_SUGGESTIONS = (
    "Perfect time for a short vacation to hill stations or beaches",
    "Consider visiting heritage sites or exploring nearby states",
    "Plan a spiritual journey to temples or ashrams",
    "Organize a family reunion or wedding celebrations",
)

LONG_WEEKEND_SUGGESTIONS = (
    "Great for a weekend getaway to nearby cities",
    "Try adventure activities like trekking or river rafting",
    "Plan festival celebrations with family and friends",
    "Explore local cuisine and street food tours",
)

# Checked in this order; every matching group is appended.
FESTIVAL_SUGGESTIONS: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (
        ("diwali",),
        (
            "Perfect time for home decoration and rangoli making",
            "Plan family gatherings and sweet exchanges",
            "Visit temples and attend cultural programs",
        ),
    ),
    (
        ("holi",),
        (
            "Organize color celebrations with friends and family",
            "Prepare traditional sweets like gujiya and thandai",
            "Visit parks for Holi celebrations",
        ),
    ),
    (
        ("ganesh",),
        (
            "Participate in Ganesh pandal visits",
            "Learn traditional arts and crafts",
            "Enjoy modak making and cultural performances",
        ),
    ),
    (
        ("independence", "republic"),
        (
            "Attend flag hoisting ceremonies",
            "Visit historical monuments and museums",
            "Organize patriotic movie marathons",
        ),
    ),
)

SUMMER_SUGGESTIONS = (
    "Plan early morning or evening outdoor activities",
    "Visit hill stations to escape the heat",
    "Enjoy seasonal fruits like mangoes and watermelons",
)

MONSOON_SUGGESTIONS = (
    "Perfect weather for trekking in Western Ghats",
    "Enjoy hot pakoras and chai during rains",
    "Visit waterfalls and green landscapes",
)

WINTER_SUGGESTIONS = (
    "Ideal weather for outdoor festivals and events",
    "Plan picnics in gardens and parks",
    "Enjoy traditional winter foods and warm gatherings",
)


def duration_suggestions(duration: int) -> List[str]:
    if duration >= 4:
        return list(EXTENDED_WEEKEND_SUGGESTIONS)
    if duration == 3:
        return list(LONG_WEEKEND_SUGGESTIONS)
    return []


def festival_suggestions(holiday_name: str) -> List[str]:
    """Suggestions for every festival keyword found in ``holiday_name``."""
    name = holiday_name.lower()
    suggestions: List[str] = []
    for keywords, group in FESTIVAL_SUGGESTIONS:
        if any(keyword in name for keyword in keywords):
            suggestions.extend(group)
    return suggestions


def seasonal_suggestions(month: int) -> List[str]:
    """
    Suggestions for the season of ``month`` (1-12).

    March-June is summer, July-October monsoon and post-monsoon,
    November-February winter.
    """
    if 3 <= month <= 6:
        return list(SUMMER_SUGGESTIONS)
    if 7 <= month <= 10:
        return list(MONSOON_SUGGESTIONS)
    return list(WINTER_SUGGESTIONS)


def generate_long_weekend_suggestions(span: LongWeekendSpan) -> List[str]:
    """
    Build the ordered suggestion list for a long weekend.

    Args:
        span: Detected long weekend

    Returns:
        Duration-tier, festival and seasonal suggestions, in that order

    Examples:
        >>> from datetime import date
        >>> from weekendly.holidays.calendar import HolidayRecord
        >>> from weekendly.holidays.detector import LongWeekendSpan, LongWeekendType
        >>> span = LongWeekendSpan(
        ...     date(2025, 8, 15), date(2025, 8, 17), 3, LongWeekendType.LONG,
        ...     HolidayRecord("Independence Day", date(2025, 8, 15)),
        ... )
        >>> len(generate_long_weekend_suggestions(span))
        10
    """
    suggestions = duration_suggestions(span.duration)

    if span.trigger_holiday is not None:
        suggestions.extend(festival_suggestions(span.trigger_holiday.name))

    suggestions.extend(seasonal_suggestions(span.start_date.month))
    return suggestions
