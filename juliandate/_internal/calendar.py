"""Calendar utilities for juliandate.

This module converts between proleptic Gregorian calendar dates and
chronological Julian day numbers (JDN), and derives calendar fields
from a day number. The conversion itself is delegated to jdcal.

JDN 2451545 = 2000-01-01

This module is not part of the public API.
"""

from __future__ import annotations

import jdcal

from juliandate._internal.constants import (
    CYCLE_BASE_YEAR,
    CYCLE_DAYS,
    CYCLE_YEARS,
    DAYS_PER_WEEK,
    JDN_J2000,
    JDN_MJD_OFFSET,
    MAX_MONTH,
    MJD_0,
)


def calendar_to_julian(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to its Julian day number.

    The components are not validated; jdcal normalizes out-of-range
    days into the following month. Callers validate first.

    The year is folded into the 400-year cycle starting at 2000 before
    jdcal sees it, so any integer year converts exactly.

    Args:
        year: The year (astronomical numbering, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The Julian day number.

    Examples:
        >>> calendar_to_julian(2000, 1, 1)
        2451545
    """
    cycles, offset = divmod(year - CYCLE_BASE_YEAR, CYCLE_YEARS)
    _, mjd = jdcal.gcal2jd(CYCLE_BASE_YEAR + offset, month, day)
    return int(mjd) + JDN_MJD_OFFSET + cycles * CYCLE_DAYS


def julian_to_calendar(day_number: int) -> tuple[int, int, int]:
    """Convert a Julian day number to (year, month, day).

    Total over all integers: the day number is folded into the 400-year
    cycle starting at 2000-01-01 before jdcal sees it.

    Args:
        day_number: The Julian day number.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> julian_to_calendar(2451545)
        (2000, 1, 1)
    """
    cycles, offset = divmod(day_number - JDN_J2000, CYCLE_DAYS)
    year, month, day, _ = jdcal.jd2gcal(MJD_0, JDN_J2000 + offset - JDN_MJD_OFFSET)
    return int(year) + cycles * CYCLE_YEARS, int(month), int(day)


def month_length(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Computed as the distance between the first of this month and the
    first of the next, so leap years come from the conversion itself.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    first = calendar_to_julian(year, month, 1)
    if month == MAX_MONTH:
        following = calendar_to_julian(year + 1, 1, 1)
    else:
        following = calendar_to_julian(year, month + 1, 1)
    return following - first


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar."""
    return bool(jdcal.is_leap(year))


def iso_weekday(day_number: int) -> int:
    """Return the ISO weekday of a Julian day number.

    JDN 0 was a Monday, so the weekday is the residue plus one.

    Returns:
        Day of week (1=Monday, 7=Sunday).

    Examples:
        >>> iso_weekday(2451545)  # 2000-01-01, a Saturday
        6
    """
    return day_number % DAYS_PER_WEEK + 1


def day_of_year(day_number: int) -> int:
    """Return the 1-based day of the year for a Julian day number."""
    year, _, _ = julian_to_calendar(day_number)
    return day_number - calendar_to_julian(year, 1, 1) + 1


__all__ = [
    "calendar_to_julian",
    "julian_to_calendar",
    "month_length",
    "is_leap_year",
    "iso_weekday",
    "day_of_year",
]
