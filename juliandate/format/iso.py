"""ISO date formatting and parsing.

This module converts CalendarDate values to and from the ISO calendar
date form YEAR-MM-DD.

The year has no fixed width: one or more digits are accepted on input
and the year is written at its natural width on output, so both
"202-03-06" and "10191-03-06" are valid. Month and day are always two
digits.

Only non-negative years can be parsed. Dates before year 0 still
format (CalendarDate(-44, 3, 15) gives "-44-03-15"), but that output is
not accepted by parse_iso_date, so it does not round-trip.

Examples:
    >>> from juliandate import CalendarDate
    >>> from juliandate.format import parse_iso_date, format_iso_date

    >>> parse_iso_date("2020-06-12")
    CalendarDate(2020, 6, 12)

    >>> format_iso_date(CalendarDate(2020, 6, 12))
    '2020-06-12'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from juliandate._internal.calendar import julian_to_calendar
from juliandate.errors import InvalidFormatError, RangeError

if TYPE_CHECKING:
    from juliandate.core.date import CalendarDate

_ISO_DATE = re.compile(r"([0-9]+)-([0-9]{2})-([0-9]{2})")


def parse_iso_date(text: str) -> CalendarDate:
    """Parse a YEAR-MM-DD string into a CalendarDate.

    The whole string must match; surrounding whitespace is not stripped.

    Args:
        text: The ISO date string.

    Returns:
        The parsed CalendarDate.

    Raises:
        InvalidFormatError: If text is not a string of the form YEAR-MM-DD.
        RangeError: If the month or day does not exist, or the year has
            more digits than int() accepts.

    Examples:
        >>> parse_iso_date("10191-03-06")
        CalendarDate(10191, 3, 6)

        >>> parse_iso_date("2020-06-31")
        Traceback (most recent call last):
        ...
        juliandate.errors.RangeError: day is out of range
    """
    from juliandate.core.date import CalendarDate

    if not isinstance(text, str):
        raise InvalidFormatError(
            f"invalid ISO date {text!r}: expected str, got {type(text).__name__}"
        )

    match = _ISO_DATE.fullmatch(text)
    if not match:
        raise InvalidFormatError(f"invalid ISO date {text!r}, must be YYYY-MM-DD")

    try:
        year = int(match.group(1))
    except ValueError as exc:
        # more digits than the interpreter converts to int
        raise RangeError("year is out of range") from exc
    month = int(match.group(2))
    day = int(match.group(3))

    return CalendarDate(year, month, day)


def format_iso_date(value: CalendarDate) -> str:
    """Format a CalendarDate as YEAR-MM-DD.

    Examples:
        >>> format_iso_date(CalendarDate(202, 3, 6))
        '202-03-06'
    """
    year, month, day = julian_to_calendar(value.to_day_number())
    return f"{year}-{month:02d}-{day:02d}"


__all__ = ["parse_iso_date", "format_iso_date"]
