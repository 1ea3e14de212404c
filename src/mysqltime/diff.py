"""Time differences: elapsed seconds and TIMESTAMPDIFF() style intervals.

Calendar distance is measured in day numbers (see ``calc_daynr``), so month
lengths and leap years are accounted for. Month based units count whole
calendar months with day and time-of-day borrow rather than dividing a
number of days.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import StrEnum
from typing import NamedTuple

from .calendar import calc_daynr, trunc_div, trunc_mod
from .common import MICROSECONDS_IN_SECOND, SECONDS_IN_24_HOUR, TimeInternal
from .value import ZERO_TIME, TimeValue

logger = logging.getLogger(__name__)


class IntervalUnit(StrEnum):
    """Units accepted by ``timestamp_diff``."""

    YEAR = "YEAR"
    QUARTER = "QUARTER"
    MONTH = "MONTH"
    WEEK = "WEEK"
    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
    SECOND = "SECOND"
    MICROSECOND = "MICROSECOND"

    @classmethod
    def parse(cls, unit: IntervalUnit | str) -> IntervalUnit:
        """Look up a unit by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known unit
        """
        if isinstance(unit, IntervalUnit):
            return unit
        try:
            return cls(unit.upper())
        except ValueError:
            raise ValueError(f"Unknown interval unit: {unit!r}") from None


_MONTH_UNITS = frozenset({IntervalUnit.YEAR, IntervalUnit.QUARTER, IntervalUnit.MONTH})


class TimeDiff(NamedTuple):
    """Absolute difference between two time values plus its sign."""

    seconds: int
    microseconds: int
    neg: bool


def calc_time_from_sec(seconds: int, microseconds: int, to: TimeValue = ZERO_TIME) -> TimeValue:
    """Split elapsed seconds into hour, minute and second fields.

    The date fields of ``to`` are kept. Hours are not wrapped at 24 since the
    result is an elapsed time, not a wall clock time.
    """
    hour = trunc_div(seconds, 3600)
    seconds = trunc_mod(seconds, 3600)
    return dataclasses.replace(
        to,
        hour=hour,
        minute=trunc_div(seconds, 60),
        second=trunc_mod(seconds, 60),
        microsecond=microseconds,
    )


def _seconds_of_day(t: TimeInternal) -> int:
    return t.hour * 3600 + t.minute * 60 + t.second


def calc_time_diff(t1: TimeInternal, t2: TimeInternal, sign: int) -> TimeDiff:
    """Calculate the difference between two time values as seconds + microseconds.

    Args:
        t1: Minuend (DATE, TIME or DATETIME like value)
        t2: Subtrahend, preprocessed with ``sign`` first
        sign: +1 to compute t1 - t2, -1 to compute t1 + t2

    Returns:
        TimeDiff with the absolute seconds and microseconds, and ``neg`` set
        when the signed result is negative
    """
    days = calc_daynr(t1.year, t1.month, t1.day)
    days -= sign * calc_daynr(t2.year, t2.month, t2.day)

    tmp = (
        days * SECONDS_IN_24_HOUR + _seconds_of_day(t1) - sign * _seconds_of_day(t2)
    ) * MICROSECONDS_IN_SECOND + t1.microsecond - sign * t2.microsecond

    neg = False
    if tmp < 0:
        tmp = -tmp
        neg = True
    seconds, microseconds = divmod(tmp, MICROSECONDS_IN_SECOND)
    return TimeDiff(seconds, microseconds, neg)


def _calc_months(begin: TimeInternal, end: TimeInternal) -> int:
    """Count whole calendar months from ``begin`` to ``end``.

    A month is only complete once the day of month, and on the same day the
    time of day, of ``begin`` has been reached again.
    """
    year_beg, year_end = begin.year, end.year
    month_beg, month_end = begin.month, end.month
    day_beg, day_end = begin.day, end.day
    second_beg, second_end = _seconds_of_day(begin), _seconds_of_day(end)
    microsecond_beg, microsecond_end = begin.microsecond, end.microsecond

    # calc years
    years = year_end - year_beg
    month_borrow = month_end < month_beg or (month_end == month_beg and day_end < day_beg)
    if month_borrow:
        years -= 1

    # calc months
    months = 12 * years
    if month_borrow:
        months += 12 - (month_beg - month_end)
    else:
        months += month_end - month_beg

    if day_end < day_beg:
        months -= 1
    elif day_end == day_beg and (
        second_end < second_beg or (second_end == second_beg and microsecond_end < microsecond_beg)
    ):
        months -= 1

    return months


def timestamp_diff(unit: IntervalUnit | str, t1: TimeInternal, t2: TimeInternal) -> int:
    """Calculate ``t2 - t1`` in the given unit, truncated toward zero.

    The result is positive when ``t2`` is later than ``t1``.

    Examples:
        >>> timestamp_diff("MONTH", TimeValue(2003, 2, 1), TimeValue(2003, 5, 1))
        3
        >>> timestamp_diff(IntervalUnit.YEAR, TimeValue(2002, 5, 1), TimeValue(2001, 1, 1))
        -1

    An unknown unit name yields 0, like an unmatched unit in MySQL.
    """
    try:
        unit = IntervalUnit.parse(unit)
    except ValueError:
        logger.debug("Unknown interval unit %r, difference is 0", unit)
        return 0

    # t2 is passed first: neg is set when t2 is earlier than t1
    seconds, microseconds, neg = calc_time_diff(t2, t1, 1)

    months = 0
    if unit in _MONTH_UNITS:
        if neg:
            months = _calc_months(t2, t1)
        else:
            months = _calc_months(t1, t2)

    sign = -1 if neg else 1
    match unit:
        case IntervalUnit.YEAR:
            return trunc_div(months, 12) * sign
        case IntervalUnit.QUARTER:
            return trunc_div(months, 3) * sign
        case IntervalUnit.MONTH:
            return months * sign
        case IntervalUnit.WEEK:
            return seconds // SECONDS_IN_24_HOUR // 7 * sign
        case IntervalUnit.DAY:
            return seconds // SECONDS_IN_24_HOUR * sign
        case IntervalUnit.HOUR:
            return seconds // 3600 * sign
        case IntervalUnit.MINUTE:
            return seconds // 60 * sign
        case IntervalUnit.SECOND:
            return seconds * sign
        case IntervalUnit.MICROSECOND:
            # In MySQL the difference between any two valid datetime values
            # in microseconds fits into a signed 64-bit integer.
            return (seconds * MICROSECONDS_IN_SECOND + microseconds) * sign
