"""
Configuration settings for the recallmate scheduling engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recall_engine.core.clock import SystemClock


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Scoring constants
    # ========================================
    good_recall_threshold: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Recall score at or above which a review counts as high quality",
    )

    # ========================================
    # Daily study goal
    # ========================================
    daily_goal_minutes: int = Field(
        default=60,
        ge=1,
        description="Minutes of study per day needed to meet the goal",
    )
    goal_enabled: bool = Field(
        default=True,
        description="Whether daily goal checks are evaluated at all",
    )

    # ========================================
    # Calendar
    # ========================================
    timezone: str | None = Field(
        default=None,
        description="IANA zone used for calendar-day boundaries (local time if unset)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for the stderr log sink",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        # Raises ZoneInfoNotFoundError (a KeyError) for unknown zones
        try:
            ZoneInfo(v)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def build_clock(self) -> SystemClock:
        """Clock for the configured timezone."""
        return SystemClock(tz=ZoneInfo(self.timezone) if self.timezone else None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
