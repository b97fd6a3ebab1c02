"""Proleptic Gregorian day counting relative to 2000-01-01.

These are pure integer algorithms, valid for any year (including years before 1 CE, using
astronomical year numbering). They count days in the civil reckoning of whatever time scale the
caller is working in.

References:
    #. H. Hinnant, "chrono-Compatible Low-Level Date Algorithms"
    #. :cite:t:`vallado_2013_astro`, Section 3.5.1, Algorithm 14
"""

from __future__ import annotations

DAYS_PER_ERA = 146097
"""``int``: days in a 400 year Gregorian cycle."""

_ERA_EPOCH_TO_Y2K = 730425
"""``int``: days from 0000-03-01 to 2000-01-01."""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def isLeapYear(year: int) -> bool:
    """Given a Gregorian calendar year, determine whether it is a leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def daysInMonth(year: int, month: int) -> int:
    """Return the number of days of `month` (1-12) in `year`."""
    if month == 2 and isLeapYear(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def daysFromCivil(year: int, month: int, day: int) -> int:
    """Return the number of days from 2000-01-01 to the given date (negative before it).

    Note:
        Fields are not validated; a day of 0 is the last day of the previous month.
    """
    # Count from March so that the leap day falls at the end of the year
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - _ERA_EPOCH_TO_Y2K


def civilFromDays(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`.daysFromCivil`; return ``(year, month, day)``."""
    days += _ERA_EPOCH_TO_Y2K
    era = days // DAYS_PER_ERA
    day_of_era = days - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day
