"""
Pytest configuration and shared fixtures for Weekendly tests.
"""

import os
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

from weekendly.config import get_settings
from weekendly.holidays.calendar import HolidayCalendar, HolidayCategory, HolidayRecord
from weekendly.holidays.service import HolidayService


# Load test environment variables before any settings are read
env_file = Path(__file__).parent.parent / ".env.test"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    os.environ.setdefault("DEBUG", "False")
    os.environ.setdefault("LOG_LEVEL", "INFO")
    os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_holiday():
    """Build a HolidayRecord from an ISO date string."""

    def _make(name: str, iso_date: str, category: str = "national") -> HolidayRecord:
        return HolidayRecord(name, date.fromisoformat(iso_date), HolidayCategory(category))

    return _make


@pytest.fixture
def make_calendar(make_holiday):
    """
    Build a synthetic calendar from (name, iso_date) pairs.

    Usage:
        def test_something(make_calendar):
            calendar = make_calendar(("Labour Day", "2025-05-01"))
    """

    def _make(*entries) -> HolidayCalendar:
        return HolidayCalendar.from_records(make_holiday(name, iso) for name, iso in entries)

    return _make


@pytest.fixture
def service_on():
    """Build a HolidayService over the built-in table with a fixed "today"."""

    def _make(today: date, **kwargs) -> HolidayService:
        return HolidayService(today_provider=lambda: today, **kwargs)

    return _make
