"""
Weekend length presets used by the planner.

Maps a detected long weekend onto the planner's fixed presets and provides
the short labels the holiday banner shows.
"""

from enum import Enum
from typing import List

from weekendly.holidays.detector import LongWeekendSpan


class WeekendType(str, Enum):
    """Planner weekend presets."""

    REGULAR = "regular"  # Saturday-Sunday
    LONG = "long"  # Friday-Sunday
    EXTENDED = "extended"  # Friday-Monday
    CUSTOM = "custom"  # User-defined days


DEFAULT_DAYS = {
    WeekendType.REGULAR: ["saturday", "sunday"],
    WeekendType.LONG: ["friday", "saturday", "sunday"],
    WeekendType.EXTENDED: ["friday", "saturday", "sunday", "monday"],
}


def get_default_days(weekend_type: WeekendType | str) -> List[str]:
    """
    Get the planner days for a preset.

    Custom and unknown types fall back to Saturday and Sunday.

    Examples:
        >>> get_default_days("long")
        ['friday', 'saturday', 'sunday']
        >>> get_default_days(WeekendType.CUSTOM)
        ['saturday', 'sunday']
    """
    try:
        weekend_type = WeekendType(weekend_type)
    except ValueError:
        weekend_type = WeekendType.REGULAR
    return list(DEFAULT_DAYS.get(weekend_type, DEFAULT_DAYS[WeekendType.REGULAR]))


def weekend_type_for_duration(duration: int) -> WeekendType:
    """Preset that fits a span of ``duration`` days."""
    if duration == 3:
        return WeekendType.LONG
    if duration >= 4:
        return WeekendType.EXTENDED
    return WeekendType.REGULAR


def weekend_type_for_span(span: LongWeekendSpan) -> WeekendType:
    """Preset the "plan this weekend" action switches to for ``span``."""
    return weekend_type_for_duration(span.duration)


def format_duration_text(duration: int) -> str:
    """Banner label such as '3-day'."""
    return f"{duration}-day"


def describe_days_until(days_until: int) -> str:
    """
    Human countdown for the banner.

    Examples:
        >>> describe_days_until(0)
        'Today!'
        >>> describe_days_until(12)
        '12 days away'
    """
    if days_until == 0:
        return "Today!"
    if days_until == 1:
        return "Tomorrow!"
    return f"{days_until} days away"


def urgency_for_days_until(days_until: int) -> str:
    """Banner urgency bucket: 'urgent', 'soon' or 'upcoming'."""
    if days_until <= 7:
        return "urgent"
    if days_until <= 14:
        return "soon"
    return "upcoming"
