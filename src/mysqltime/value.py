"""MySQL time value representation.

This module contains the TimeValue class: a fixed-field date and time that,
unlike ``datetime.datetime``, can hold zero month and day fields:
- 0000-00-00 is the zero date ("no date")
- 2006-12-00 or 2006-00-00 are partial dates accepted by MySQL

Field ranges are not checked on construction. Callers supply range checked
fields; only the zero sentinels are handled specially.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from enum import IntEnum
from typing import Self

from .calendar import calc_daynr
from .common import TimeInternal
from .exceptions import InvalidTimeFormatError
from .settings import get_settings
from .week import WeekBehaviour, calc_week, week_mode

logger = logging.getLogger(__name__)


class Weekday(IntEnum):
    """Day of week as reported by the standard calendar conversion."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True, order=True)
class TimeValue:
    """Immutable MySQL date/time value.

    Examples:
        >>> t = TimeValue(2024, 2, 29, 13, 5, 0)
        >>> str(t)
        '2024-02-29 13:05:00'
        >>> t.year_day
        60
        >>> str(TimeValue(2006, 12, 0))
        '2006-12-00 00:00:00'
    """

    year: int = 0  # year <= 9999
    month: int = 0  # month <= 12
    day: int = 0  # day <= 31
    hour: int = 0  # hour <= 23
    minute: int = 0  # minute <= 59
    second: int = 0  # second <= 59
    microsecond: int = 0  # microsecond <= 999999

    @classmethod
    def zero(cls) -> Self:
        """Return the 0000-00-00 00:00:00 sentinel."""
        return cls()

    @classmethod
    def from_datetime(cls, t: TimeInternal) -> Self:
        """Copy the seven fields of any time-like value (e.g. ``datetime``)."""
        return cls(t.year, t.month, t.day, t.hour, t.minute, t.second, t.microsecond)

    @property
    def is_zero_date(self) -> bool:
        """True if year, month and day are all zero."""
        return self.year == 0 and self.month == 0 and self.day == 0

    @property
    def year_day(self) -> int:
        """Day of year (1-366), or 0 if month or day is zero."""
        if self.month == 0 or self.day == 0:
            return 0
        return calc_daynr(self.year, self.month, self.day) - calc_daynr(self.year, 1, 1) + 1

    def week(self, mode: int) -> int:
        """Week number for WEEK(date, mode); 0 for dates with zero month or day."""
        if self.month == 0 or self.day == 0:
            return 0
        _, week = calc_week(self, week_mode(mode))
        return week

    def year_week(self, mode: int) -> tuple[int, int]:
        """Year and week for YEARWEEK(date, mode).

        Week numbers are always 1-53 here; the year may differ from
        ``self.year`` in the first and last week of the year.
        """
        return calc_week(self, week_mode(mode) | WeekBehaviour.YEAR)

    def weekday(self) -> Weekday:
        """Day of week in the configured time zone.

        Dates the standard calendar cannot hold (zero month or day, day 31
        of a 30-day month, any date in year 0) report Weekday.SUNDAY rather than raising. This
        best-effort fallback is intentional and matches MySQL's lenient
        handling of such dates.
        """
        try:
            dt = self.to_datetime()
        except InvalidTimeFormatError:
            logger.debug("No weekday for %s, falling back to %s", self, Weekday.SUNDAY.name)
            return Weekday.SUNDAY
        return Weekday(dt.isoweekday() % 7)

    def to_datetime(self, zone: tzinfo | None = None) -> datetime:
        """Convert to an aware standard calendar datetime.

        ``datetime`` can't represent month 0 or day 0; the value is first
        normalized to the nearest date the way a lenient calendar would,
        e.g. 2006-12-00 00:00:00 becomes 2006-11-30 00:00:00. The result is
        compared field by field with this value.

        Python's ``datetime`` has no year 0, so any value in year 0 (including
        the zero date and e.g. 0000-01-01) fails with ``normalized=None``.

        Args:
            zone: Target time zone (default: configured zone, see settings)

        Returns:
            Aware datetime with exactly the fields of this value

        Raises:
            InvalidTimeFormatError: If normalization changed any field. The
                normalized datetime is available as ``normalized`` on the error.
        """
        if zone is None:
            zone = get_settings().tzinfo()

        normalized = _normalize(self, zone)
        if normalized is None or (
            normalized.year != self.year
            or normalized.month != self.month
            or normalized.day != self.day
            or normalized.hour != self.hour
            or normalized.minute != self.minute
            or normalized.second != self.second
            or normalized.microsecond != self.microsecond
        ):
            raise InvalidTimeFormatError(self, normalized)
        return normalized

    def __str__(self) -> str:
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.microsecond:
            text += f".{self.microsecond:06d}"
        return text


ZERO_TIME = TimeValue.zero()


def _normalize(t: TimeValue, zone: tzinfo | None) -> datetime | None:
    """Build a datetime from possibly out of range fields, carrying overflow.

    Month overflow carries into the year, every other field carries into the
    next larger one. Wall times skipped by a DST transition are moved by a
    round trip through UTC. ``zone=None`` means the host local zone.

    Returns:
        Normalized aware datetime, or None if outside datetime's range
    """
    carry, month_index = divmod(t.month - 1, 12)
    try:
        naive = datetime(t.year + carry, month_index + 1, 1) + timedelta(
            days=t.day - 1,
            hours=t.hour,
            minutes=t.minute,
            seconds=t.second,
            microseconds=t.microsecond,
        )
        aware = naive.replace(tzinfo=zone) if zone is not None else naive.astimezone()
    except (ValueError, OverflowError, OSError):
        return None

    try:
        return aware.astimezone(UTC).astimezone(zone)
    except (ValueError, OverflowError, OSError):
        # The UTC instant lies beyond year 1 or 9999; keep the wall time as is
        return aware
