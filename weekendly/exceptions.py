"""
Custom exceptions for the Weekendly application.

This module provides:
1. Base exception hierarchy for application-wide error handling
2. Informative exceptions with actionable guidance

Lookups that find nothing (no holiday on a date, no long weekend in the
window) are not errors and never raise. Only malformed input and broken
configuration end up here.
"""

from typing import Any, Optional


# ============================================================================
# Base Exception Hierarchy (for application-wide error handling)
# ============================================================================


class WeekendlyException(Exception):
    """Base exception class for all Weekendly exceptions."""

    pass


class CalendarDataException(WeekendlyException):
    """Exception raised when the holiday table itself is malformed."""

    pass


class ConfigurationException(WeekendlyException):
    """Exception raised for configuration errors."""

    pass


class DateParseError(WeekendlyException, ValueError):
    """
    Raised when a value cannot be interpreted as a civil date.

    Subclasses ValueError so callers that only know about the standard
    library still catch it.

    Attributes:
        value: The raw value that failed to parse
        expected_format: Human-readable description of the accepted format
    """

    def __init__(self, value: Any, expected_format: str = "YYYY-MM-DD"):
        self.value = value
        self.expected_format = expected_format
        self.message = (
            f"Invalid date {value!r}: expected {expected_format} (e.g., 2025-08-15)"
        )
        super().__init__(self.message)

    def __str__(self):
        """Return detailed error message."""
        return self.message


# ============================================================================
# Informative Exceptions with Actionable Guidance
# ============================================================================


class InformativeException(WeekendlyException):
    """Base class for informative exceptions with actionable guidance."""

    def __init__(self, message: str, remediation: Optional[str] = None,
                 details: Optional[str] = None, commands: Optional[list[str]] = None):
        """
        Initialize an informative exception.

        Args:
            message: Clear explanation of what went wrong
            remediation: Specific remediation instructions
            details: Relevant configuration or context details
            commands: List of troubleshooting commands to try
        """
        self.message = message
        self.remediation = remediation
        self.details = details
        self.commands = commands or []

        full_message = f"\n{'=' * 80}\n"
        full_message += f"ERROR: {message}\n"

        if details:
            full_message += f"\nDETAILS:\n{details}\n"

        if remediation:
            full_message += f"\nHOW TO FIX:\n{remediation}\n"

        if commands:
            full_message += "\nTROUBLESHOOTING COMMANDS:\n"
            for cmd in commands:
                full_message += f"  $ {cmd}\n"

        full_message += f"{'=' * 80}\n"

        super().__init__(full_message)


class InvalidHolidayEntryError(InformativeException, CalendarDataException):
    """Raised when a holiday table entry is missing fields or has a bad value."""

    def __init__(self, year: int, entry: Any, error_details: str = ""):
        message = f"Invalid holiday entry in the {year} table"

        details = f"Entry: {entry!r}"
        if error_details:
            details += f"\nError: {error_details}"

        remediation = """
1. Every entry needs 'name', 'date' and 'type' keys
2. 'date' must be an ISO date (YYYY-MM-DD) inside the year it is listed under
3. 'type' must be one of: national, festival, religious
        """.strip()

        super().__init__(message, remediation, details)


class ConfigurationError(InformativeException, ConfigurationException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_item: str, expected: str, actual: str = ""):
        message = f"Invalid configuration for {config_item}"

        details = f"Expected: {expected}"
        if actual:
            details += f"\nActual: {actual}"

        remediation = """
1. Check your .env file for correct configuration
2. Refer to .env.example for the correct format
3. Ensure all environment variables hold valid values
        """.strip()

        commands = [
            "cat .env.example",
            "weekendly config",
        ]

        super().__init__(message, remediation, details, commands)
