"""
Input validators for CLI commands.
Ensures data quality and provides better error messages.
"""

from datetime import date
from typing import Optional

import typer

from weekendly.exceptions import DateParseError
from weekendly.utils.date_utils import parse_iso_date


def validate_date_string(value: Optional[str]) -> Optional[date]:
    """
    Validate a date string in YYYY-MM-DD format.

    Args:
        value: Date string to validate (can be None)

    Returns:
        The parsed civil date, or None if value is None

    Raises:
        typer.BadParameter: If the date is malformed
    """
    if value is None:
        return None

    try:
        return parse_iso_date(value)
    except DateParseError:
        raise typer.BadParameter(
            f"Invalid date format. Expected YYYY-MM-DD (e.g., 2025-08-15), got '{value}'"
        )


def validate_non_negative(value: int, name: str = "value") -> int:
    """
    Validate that a count is zero or greater.

    Raises:
        typer.BadParameter: If the count is negative
    """
    if value < 0:
        raise typer.BadParameter(f"{name} must be zero or greater (got {value})")
    return value


def validate_year(value: Optional[int]) -> Optional[int]:
    """
    Validate a calendar year.

    Raises:
        typer.BadParameter: If the year is outside 1-9999
    """
    if value is None:
        return None
    if not 1 <= value <= 9999:
        raise typer.BadParameter(f"Year must be between 1 and 9999 (got {value})")
    return value


# Typer callback functions for use with Option/Argument
def date_callback(value: Optional[str]) -> Optional[str]:
    """Callback for validating dates in Typer options."""
    if value is None:
        return None
    validate_date_string(value)
    return value


def non_negative_callback(value: int) -> int:
    """Callback for validating counts in Typer options."""
    return validate_non_negative(value, "Count")


def year_callback(value: Optional[int]) -> Optional[int]:
    """Callback for validating years in Typer options."""
    return validate_year(value)
