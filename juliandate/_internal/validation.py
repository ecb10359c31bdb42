"""Validation utilities for juliandate.

This module provides the checks that keep every CalendarDate on a legal
proleptic Gregorian date.

This module is not part of the public API.
"""

from __future__ import annotations

from juliandate._internal.constants import MAX_MONTH, MIN_MONTH, SAFE_DAY
from juliandate.errors import RangeError


def validate_integer(name: str, value: object) -> None:
    """Validate that a calendar component is an int.

    Raises:
        TypeError: If value is not an int (bool is rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    if month < MIN_MONTH or month > MAX_MONTH:
        raise RangeError("month is out of range")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day exists in the given year and month.

    Days up to 28 exist in every month. Larger days are checked against
    the length of the month as reported by the calendar conversion.

    Args:
        year: The year.
        month: The month (1-12), already validated.
        day: The day to validate.

    Raises:
        RangeError: If the month has no such day.
    """
    from juliandate._internal.calendar import month_length

    if day < 1:
        raise RangeError("day is out of range")
    if day <= SAFE_DAY:
        return
    if day > month_length(year, month):
        raise RangeError("day is out of range")


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a legal calendar date.

    Raises:
        TypeError: If a component is not an int.
        RangeError: If the month or day is out of range.
    """
    validate_integer("year", year)
    validate_integer("month", month)
    validate_integer("day", day)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_integer",
    "validate_month",
    "validate_day",
    "validate_date",
]
