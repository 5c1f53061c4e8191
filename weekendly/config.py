"""
Configuration management using Pydantic Settings.
Loads environment variables with validation and type checking.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Weekendly", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")

    # Logging
    log_file: Optional[str] = Field(
        default=None, description="Optional log file path (JSON lines, rotated)"
    )
    json_logs: bool = Field(default=False, description="Emit JSON logs on the console")

    # Long weekend detection
    default_days_ahead: int = Field(
        default=90, ge=0, description="Scan horizon in days for long weekend detection"
    )
    default_suggestion_limit: int = Field(
        default=3, ge=0, description="Number of upcoming long weekends to show"
    )
    min_long_weekend_days: int = Field(
        default=3, ge=1, description="Minimum run of off-days that counts as a long weekend"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        """Uppercase the log level and fall back to INFO for unknown values."""
        if not v:
            return "INFO"
        level = str(v).strip().upper()
        return level if level in VALID_LOG_LEVELS else "INFO"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to avoid re-reading environment variables.
    """
    return Settings()

