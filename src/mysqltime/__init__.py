"""
pyMySQLTime: MySQL compatible calendar arithmetic.

This library reproduces MySQL's date/time semantics: zero-tolerant date
values, day numbers, WEEK()/YEARWEEK() numbering, time differences and
TIMESTAMPDIFF() intervals.
"""

from __future__ import annotations

from .calendar import calc_daynr, calc_days_in_year, calc_weekday
from .common import TimeInternal
from .diff import IntervalUnit, TimeDiff, calc_time_diff, calc_time_from_sec, timestamp_diff
from .encoding import date_to_uint64, datetime_to_uint64, time_to_uint64
from .exceptions import InvalidTimeFormatError, MySQLTimeError
from .value import ZERO_TIME, TimeValue, Weekday
from .week import WeekBehaviour, calc_week, week_mode

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Values
    "TimeInternal",
    "TimeValue",
    "Weekday",
    "ZERO_TIME",
    # Calendar
    "calc_daynr",
    "calc_days_in_year",
    "calc_weekday",
    # Weeks
    "WeekBehaviour",
    "calc_week",
    "week_mode",
    # Differences
    "IntervalUnit",
    "TimeDiff",
    "calc_time_diff",
    "calc_time_from_sec",
    "timestamp_diff",
    # Encodings
    "date_to_uint64",
    "datetime_to_uint64",
    "time_to_uint64",
    # Errors
    "InvalidTimeFormatError",
    "MySQLTimeError",
]
