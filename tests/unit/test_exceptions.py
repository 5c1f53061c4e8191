"""
Unit tests for the exception hierarchy.
"""

import pytest

from weekendly.exceptions import (
    CalendarDataException,
    ConfigurationError,
    ConfigurationException,
    DateParseError,
    InformativeException,
    InvalidHolidayEntryError,
    WeekendlyException,
)


class TestDateParseError:
    """Tests for DateParseError."""

    def test_message_and_value(self):
        """Test the raw value is kept and shown."""
        error = DateParseError("2025-13-01")
        assert error.value == "2025-13-01"
        assert "'2025-13-01'" in str(error)
        assert "YYYY-MM-DD" in str(error)

    def test_hierarchy(self):
        """Test it is both a Weekendly error and a ValueError."""
        error = DateParseError("x")
        assert isinstance(error, WeekendlyException)
        assert isinstance(error, ValueError)


class TestInformativeExceptions:
    """Tests for exceptions with remediation guidance."""

    def test_informative_message_sections(self):
        """Test the message includes details, remediation and commands."""
        error = InformativeException(
            "Something broke", remediation="Fix it", details="Context", commands=["weekendly config"]
        )
        message = str(error)
        assert "ERROR: Something broke" in message
        assert "DETAILS:\nContext" in message
        assert "HOW TO FIX:\nFix it" in message
        assert "$ weekendly config" in message

    def test_invalid_holiday_entry(self):
        """Test holiday entry errors are calendar data errors."""
        error = InvalidHolidayEntryError(2025, {"name": "X"}, "missing date")
        assert isinstance(error, CalendarDataException)
        assert "2025" in error.message
        assert "missing date" in error.details

    def test_configuration_error(self):
        """Test configuration errors carry expected and actual values."""
        error = ConfigurationError("DEFAULT_DAYS_AHEAD", "a value >= 0", "-1")
        assert isinstance(error, ConfigurationException)
        assert "Expected: a value >= 0" in str(error)
        assert "Actual: -1" in str(error)

    def test_catchable_as_base(self):
        """Test every error can be caught as WeekendlyException."""
        with pytest.raises(WeekendlyException):
            raise ConfigurationError("LOG_LEVEL", "a log level")
