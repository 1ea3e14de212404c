"""MySQL time exception classes."""

from __future__ import annotations

from datetime import datetime
from typing import Any


class MySQLTimeError(Exception):
    """Base exception for all mysqltime errors."""


class InvalidTimeFormatError(MySQLTimeError):
    """Time value cannot be held faithfully by the standard calendar.

    Raised when converting to ``datetime`` changed at least one field
    (zero month/day, day 31 in a 30-day month, a wall time skipped by DST).
    The normalized result is still available on the exception.

    Attributes:
        time_value: The value that was converted
        normalized: Normalized aware datetime, or None if it falls outside
                    the range ``datetime`` can represent
    """

    time_value: Any
    normalized: datetime | None

    def __init__(self, time_value: Any, normalized: datetime | None = None) -> None:
        super().__init__(f"Invalid time format: {time_value}")
        self.time_value = time_value
        self.normalized = normalized
