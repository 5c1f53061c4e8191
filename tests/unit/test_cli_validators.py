"""
Unit tests for CLI input validators.
"""

from datetime import date

import pytest
import typer

from weekendly.cli.validators import (
    date_callback,
    non_negative_callback,
    validate_date_string,
    validate_non_negative,
    validate_year,
)


class TestDateValidator:
    """Tests for date validation."""

    def test_valid_date(self):
        """Test that a valid date is parsed."""
        assert validate_date_string("2025-08-15") == date(2025, 8, 15)

    def test_past_dates_allowed(self):
        """Test that past dates are accepted for holiday lookups."""
        assert validate_date_string("2024-01-26") == date(2024, 1, 26)

    def test_none_passthrough(self):
        """Test that None is returned unchanged."""
        assert validate_date_string(None) is None

    @pytest.mark.parametrize("value", ["15-08-2025", "2025-02-30", "tomorrow", ""])
    def test_invalid_dates(self, value):
        """Test that invalid dates are rejected."""
        with pytest.raises(typer.BadParameter, match="Expected YYYY-MM-DD"):
            validate_date_string(value)

    def test_date_callback_returns_string(self):
        """Test the Typer callback keeps the original string."""
        assert date_callback("2025-08-15") == "2025-08-15"
        assert date_callback(None) is None


class TestCountValidators:
    """Tests for count and year validation."""

    def test_non_negative(self):
        """Test zero and positive counts pass."""
        assert validate_non_negative(0) == 0
        assert non_negative_callback(5) == 5

    def test_negative_rejected(self):
        """Test negative counts are rejected."""
        with pytest.raises(typer.BadParameter, match="zero or greater"):
            validate_non_negative(-1, "limit")

    def test_year(self):
        """Test year bounds."""
        assert validate_year(2025) == 2025
        assert validate_year(None) is None
        with pytest.raises(typer.BadParameter):
            validate_year(0)
