"""Calendar navigation and arithmetic for CalendarDate.

This module provides the canonical implementations that the CalendarDate
methods delegate to:
    - first_of: First day of the day/week/month/year containing a date
    - last_of: Last day of the day/week/month/year containing a date
    - add_unit: Add a signed number of days, weeks, months or years

Arithmetic is strict. Adding months or years rebuilds the date from its
calendar components, and a day-of-month that does not exist in the
target month raises RangeError instead of being clamped:

    2020-05-31 + 1 month  -> 2020-06-31  -> RangeError
    2020-02-29 + 1 year   -> 2021-02-29  -> RangeError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from juliandate._internal.calendar import julian_to_calendar, month_length
from juliandate._internal.constants import DAYS_PER_WEEK, MAX_MONTH, MIN_MONTH, MONTHS_PER_YEAR
from juliandate._internal.validation import validate_integer
from juliandate.errors import InvalidArgumentError, RangeError
from juliandate.units.unit import Unit

if TYPE_CHECKING:
    from juliandate.core.date import CalendarDate

_log = logging.getLogger(__name__)


def _require_unit(unit: object) -> Unit:
    if not isinstance(unit, Unit):
        raise InvalidArgumentError(f"unit must be a Unit member, got {unit!r}")
    return unit


def first_of(date: CalendarDate, unit: Unit) -> CalendarDate:
    """Return the first day of the given unit containing date.

    Args:
        date: The reference date.
        unit: DAY, WEEK (ISO weeks start on Monday), MONTH or YEAR.

    Returns:
        A CalendarDate; date itself for Unit.DAY.

    Raises:
        InvalidArgumentError: If unit is not a Unit member.

    Examples:
        >>> first_of(CalendarDate(2020, 6, 12), Unit.WEEK)
        CalendarDate(2020, 6, 8)
        >>> first_of(CalendarDate(2020, 6, 12), Unit.MONTH)
        CalendarDate(2020, 6, 1)
    """
    from juliandate.core.date import CalendarDate

    unit = _require_unit(unit)
    day_number = date.to_day_number()

    if unit is Unit.DAY:
        return date
    elif unit is Unit.WEEK:
        return CalendarDate.from_day_number(day_number - (date.iso_weekday - 1))
    elif unit is Unit.MONTH:
        year, month, _ = julian_to_calendar(day_number)
        return CalendarDate(year, month, 1)
    elif unit is Unit.YEAR:
        year, _, _ = julian_to_calendar(day_number)
        return CalendarDate(year, MIN_MONTH, 1)
    raise InvalidArgumentError(f"unhandled unit {unit!r}")


def last_of(date: CalendarDate, unit: Unit) -> CalendarDate:
    """Return the last day of the given unit containing date.

    Args:
        date: The reference date.
        unit: DAY, WEEK (ISO weeks end on Sunday), MONTH or YEAR.

    Returns:
        A CalendarDate; date itself for Unit.DAY.

    Raises:
        InvalidArgumentError: If unit is not a Unit member.

    Examples:
        >>> last_of(CalendarDate(2020, 6, 12), Unit.WEEK)
        CalendarDate(2020, 6, 14)
        >>> last_of(CalendarDate(2020, 2, 3), Unit.MONTH)
        CalendarDate(2020, 2, 29)
        >>> last_of(CalendarDate(2020, 6, 12), Unit.YEAR)
        CalendarDate(2020, 12, 31)
    """
    from juliandate.core.date import CalendarDate

    unit = _require_unit(unit)
    day_number = date.to_day_number()

    if unit is Unit.DAY:
        return date
    elif unit is Unit.WEEK:
        return CalendarDate.from_day_number(day_number + (DAYS_PER_WEEK - date.iso_weekday))
    elif unit is Unit.MONTH:
        year, month, _ = julian_to_calendar(day_number)
        return CalendarDate(year, month, month_length(year, month))
    elif unit is Unit.YEAR:
        year, _, _ = julian_to_calendar(day_number)
        return CalendarDate(year, MAX_MONTH, month_length(year, MAX_MONTH))
    raise InvalidArgumentError(f"unhandled unit {unit!r}")


def split_months(amount: int) -> tuple[int, int]:
    """Split a month count into whole years and residual months.

    Both parts carry the sign of amount.

    Examples:
        >>> split_months(38)
        (3, 2)
        >>> split_months(-38)
        (-3, -2)
    """
    years, months = divmod(abs(amount), MONTHS_PER_YEAR)
    if amount < 0:
        return -years, -months
    return years, months


def _rebuild(year: int, month: int, day: int, source: CalendarDate) -> CalendarDate:
    from juliandate.core.date import CalendarDate

    try:
        return CalendarDate(year, month, day)
    except RangeError:
        _log.debug(
            "%s does not land on a calendar date (%d-%02d-%02d)", source, year, month, day
        )
        raise


def add_unit(date: CalendarDate, amount: int, unit: Unit) -> CalendarDate:
    """Add a signed number of units to date.

    Args:
        date: The starting date.
        amount: Number of units to add (negative to subtract).
        unit: The unit of amount.

    Returns:
        A new CalendarDate, or date itself when amount is 0.

    Raises:
        TypeError: If amount is not an int.
        InvalidArgumentError: If unit is not a Unit member (not checked
            when amount is 0).
        RangeError: If a MONTH or YEAR step lands on a day that does not
            exist in the target month.

    Examples:
        >>> add_unit(CalendarDate(2020, 6, 12), 38, Unit.MONTH)
        CalendarDate(2023, 8, 12)
        >>> add_unit(CalendarDate(2020, 6, 12), -2, Unit.WEEK)
        CalendarDate(2020, 5, 29)
    """
    from juliandate.core.date import CalendarDate

    validate_integer("amount", amount)
    if amount == 0:
        return date

    unit = _require_unit(unit)
    day_number = date.to_day_number()

    if unit is Unit.DAY:
        return CalendarDate.from_day_number(day_number + amount)
    elif unit is Unit.WEEK:
        return CalendarDate.from_day_number(day_number + amount * DAYS_PER_WEEK)
    elif unit is Unit.MONTH:
        year, month, day = julian_to_calendar(day_number)
        years, months = split_months(amount)
        year += years
        month += months
        if month > MAX_MONTH:
            month -= MONTHS_PER_YEAR
            year += 1
        elif month < MIN_MONTH:
            month += MONTHS_PER_YEAR
            year -= 1
        return _rebuild(year, month, day, date)
    elif unit is Unit.YEAR:
        year, month, day = julian_to_calendar(day_number)
        return _rebuild(year + amount, month, day, date)
    raise InvalidArgumentError(f"unhandled unit {unit!r}")


__all__ = [
    "first_of",
    "last_of",
    "add_unit",
    "split_months",
]
