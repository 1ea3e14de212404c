"""Integer encodings of time values (YYYYMMDD, HHMMSS, YYYYMMDDHHMMSS).

No validation or range clamping is applied; zero fields encode as zero
digits, e.g. 2006-12-00 becomes 20061200.
"""

from __future__ import annotations

from .common import TimeInternal


def date_to_uint64(t: TimeInternal) -> int:
    """Convert time value to integer in YYYYMMDD format."""
    return t.year * 10000 + t.month * 100 + t.day


def time_to_uint64(t: TimeInternal) -> int:
    """Convert time value to integer in HHMMSS format."""
    return t.hour * 10000 + t.minute * 100 + t.second


def datetime_to_uint64(t: TimeInternal) -> int:
    """Convert time value to integer in YYYYMMDDHHMMSS format."""
    return date_to_uint64(t) * 1_000_000 + time_to_uint64(t)
