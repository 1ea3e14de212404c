"""Shared test fixtures for pyMySQLTime tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from mysqltime.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test with the host local zone and a fresh settings cache."""
    monkeypatch.delenv("MYSQLTIME_TIME_ZONE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tz_copenhagen() -> ZoneInfo:
    """Europe/Copenhagen zone (CET/CEST), skipping when no tz database is installed."""
    try:
        return ZoneInfo("Europe/Copenhagen")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")


@pytest.fixture
def tz_new_york() -> ZoneInfo:
    """America/New_York zone (EST/EDT), skipping when no tz database is installed."""
    try:
        return ZoneInfo("America/New_York")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")


# Test markers for different test types
def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, pure computation)"
    )
