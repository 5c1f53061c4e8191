"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from weekendly.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for var in ("DEFAULT_DAYS_AHEAD", "DEFAULT_SUGGESTION_LIMIT", "MIN_LONG_WEEKEND_DAYS"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)
        assert settings.app_name == "Weekendly"
        assert settings.default_days_ahead == 90
        assert settings.default_suggestion_limit == 3
        assert settings.min_long_weekend_days == 3

    def test_env_override(self, monkeypatch):
        """Test values come from environment variables."""
        monkeypatch.setenv("DEFAULT_DAYS_AHEAD", "120")
        monkeypatch.setenv("default_suggestion_limit", "5")

        settings = Settings(_env_file=None)
        assert settings.default_days_ahead == 120
        assert settings.default_suggestion_limit == 5

    def test_negative_horizon_rejected(self, monkeypatch):
        """Test that negative horizons fail validation."""
        monkeypatch.setenv("DEFAULT_DAYS_AHEAD", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "raw,expected",
        [("debug", "DEBUG"), (" warning ", "WARNING"), ("verbose", "INFO"), ("", "INFO")],
    )
    def test_log_level_normalized(self, monkeypatch, raw, expected):
        """Test log level is uppercased and unknown levels fall back to INFO."""
        monkeypatch.setenv("LOG_LEVEL", raw)
        assert Settings(_env_file=None).log_level == expected

    def test_get_settings_cached(self):
        """Test get_settings returns one instance until cleared."""
        assert get_settings() is get_settings()
