"""Week numbering for WEEK() and YEARWEEK() style queries.

The week mode is a 3-bit integer (0-7) selecting the first day of the week,
the week number range and the rule deciding which week is week 1:

    ====  ===========  =====  ================================
    Mode  First day    Range  Week 1 is the first week...
    ====  ===========  =====  ================================
    0     Sunday       0-53   with a Sunday in this year
    1     Monday       0-53   with 4 or more days this year
    2     Sunday       1-53   with a Sunday in this year
    3     Monday       1-53   with 4 or more days this year
    4     Sunday       0-53   with 4 or more days this year
    5     Monday       0-53   with a Monday in this year
    6     Sunday       1-53   with 4 or more days this year
    7     Monday       1-53   with a Monday in this year
    ====  ===========  =====  ================================

Reference: MySQL Reference Manual, WEEK() function
"""

from __future__ import annotations

from enum import Flag

from .calendar import calc_daynr, calc_days_in_year, calc_weekday, trunc_div
from .common import TimeInternal

WEEK_MODE_MASK = 0b00000111  # Only the low 3 bits of a mode are significant


class WeekBehaviour(Flag):
    """Decoded week mode bits."""

    # If set, Monday is first day of week, otherwise Sunday is first day of week
    MONDAY_FIRST = 0b001
    # If set, week is in range 1-53 and the year may roll over, otherwise 0-53
    YEAR = 0b010
    # If set, the week containing the first 'first-day-of-week' is week 1,
    # otherwise weeks are numbered according to ISO 8601:1988
    FIRST_WEEKDAY = 0b100

    @property
    def monday_first(self) -> bool:
        return WeekBehaviour.MONDAY_FIRST in self

    @property
    def week_year(self) -> bool:
        return WeekBehaviour.YEAR in self

    @property
    def first_weekday(self) -> bool:
        return WeekBehaviour.FIRST_WEEKDAY in self


def week_mode(mode: int) -> WeekBehaviour:
    """Decode a week mode integer into its behaviour flags."""
    behaviour = WeekBehaviour(mode & WEEK_MODE_MASK)
    # Sunday-first modes flip the week 1 rule: mode 0 counts from the first
    # Sunday while mode 4 uses the 4-day rule.
    if not behaviour.monday_first:
        behaviour ^= WeekBehaviour.FIRST_WEEKDAY
    return behaviour


def _first_week_belongs_to_previous_year(first_weekday: bool, weekday: int) -> bool:
    return (first_weekday and weekday != 0) or (not first_weekday and weekday >= 4)


def calc_week(t: TimeInternal, behaviour: WeekBehaviour) -> tuple[int, int]:
    """Calculate the (year, week) pair for a date.

    Without ``WeekBehaviour.YEAR`` a date in the leading partial week of
    January is reported as week 0 of its own year. With it, such a date
    belongs to the last week of the previous year, and a date in the trailing
    days of December may be reported as week 1 of the next year.

    Args:
        t: Any value with year/month/day fields
        behaviour: Decoded week mode (see ``week_mode``)

    Returns:
        Tuple (year, week)
    """
    daynr = calc_daynr(t.year, t.month, t.day)
    first_daynr = calc_daynr(t.year, 1, 1)
    monday_first = behaviour.monday_first
    week_year = behaviour.week_year
    first_weekday = behaviour.first_weekday

    weekday = calc_weekday(first_daynr, not monday_first)
    year = t.year

    if t.month == 1 and t.day <= 7 - weekday:
        if not week_year and _first_week_belongs_to_previous_year(first_weekday, weekday):
            return year, 0
        week_year = True
        year -= 1
        days = calc_days_in_year(year)
        first_daynr -= days
        weekday = (weekday + 53 * 7 - days) % 7

    if _first_week_belongs_to_previous_year(first_weekday, weekday):
        days = daynr - (first_daynr + 7 - weekday)
    else:
        days = daynr - (first_daynr - weekday)

    if week_year and days >= 52 * 7:
        weekday = (weekday + calc_days_in_year(year)) % 7
        if (not first_weekday and weekday < 4) or (first_weekday and weekday == 0):
            return year + 1, 1

    return year, trunc_div(days, 7) + 1
