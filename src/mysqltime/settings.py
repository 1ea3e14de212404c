"""Library configuration: environment-driven settings via pydantic-settings.

Environment variables use the ``MYSQLTIME_`` prefix, e.g.
``MYSQLTIME_TIME_ZONE=Europe/Copenhagen``. ``get_settings()`` is cached,
so the environment is read once per process.
"""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(env_prefix="MYSQLTIME_", env_file=".env", extra="ignore")

    # IANA zone used for standard calendar conversion; None = host local zone
    time_zone: str | None = None

    @field_validator("time_zone", mode="before")
    @classmethod
    def check_time_zone(cls, v: str | None) -> str | None:
        """Reject zone names the tz database cannot resolve."""
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v!r}") from e
        return v

    def tzinfo(self) -> tzinfo | None:
        """Return the configured zone, or None for the host local zone."""
        if self.time_zone is None:
            return None
        return ZoneInfo(self.time_zone)


@lru_cache
def get_settings() -> Settings:
    return Settings()
