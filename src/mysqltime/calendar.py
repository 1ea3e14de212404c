"""Day number arithmetic on the proleptic calendar used by MySQL.

All divisions truncate toward zero. The correction terms of ``calc_daynr``
depend on it for year 0, where the year is decremented to -1 for January
and February.
"""

from __future__ import annotations


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching ``trunc_div`` (sign follows the dividend)."""
    return a - b * trunc_div(a, b)


def calc_daynr(year: int, month: int, day: int) -> int:
    """Calculate days since 0000-00-00.

    Month and day are not validated; out of range values still produce a
    number. Year 0 with month 0 is the zero date and always maps to 0.
    """
    if year == 0 and month == 0:
        return 0

    delsum = 365 * year + 31 * (month - 1) + day
    if month <= 2:
        year -= 1
    else:
        delsum -= trunc_div(month * 4 + 23, 10)
    temp = trunc_div((trunc_div(year, 100) + 1) * 3, 4)
    return delsum + trunc_div(year, 4) - temp


def calc_days_in_year(year: int) -> int:
    """Return 366 for Gregorian leap years, else 365. Valid for any year."""
    if (year & 3) == 0 and (year % 100 != 0 or (year % 400 == 0 and year != 0)):
        return 366
    return 365


def calc_weekday(daynr: int, sunday_first_day_of_week: bool) -> int:
    """Calculate weekday from a day number.

    Returns 0 for Monday, 1 for Tuesday ... 6 for Sunday. With
    ``sunday_first_day_of_week`` the index is shifted so 0 is Sunday.
    """
    daynr += 5
    if sunday_first_day_of_week:
        daynr += 1
    return trunc_mod(daynr, 7)
