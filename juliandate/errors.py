"""Juliandate exception hierarchy.

All juliandate-specific exceptions inherit from JulianDateError.
"""

from __future__ import annotations


class JulianDateError(Exception):
    """Base exception for all juliandate errors."""

    pass


class RangeError(JulianDateError):
    """A calendar component is outside the legal range.

    Raised when a month or day cannot exist in the proleptic Gregorian
    calendar, including when calendar arithmetic would land on such a
    date. Arithmetic never clamps; it raises this instead.

    Examples:
        - Month value outside 1-12
        - Day 31 in a 30-day month
        - February 29 in a non-leap year
        - 2020-05-31 plus one month
    """

    pass


class InvalidFormatError(JulianDateError):
    """A string does not match the ISO date grammar YEAR-MM-DD.

    Examples:
        - Missing year, month or day field
        - Non-numeric fields
        - One- or three-digit month or day
        - Surrounding whitespace or text
    """

    pass


class InvalidArgumentError(JulianDateError):
    """An argument is not one of the values an operation accepts.

    Raised when something other than a Unit member is passed where a
    unit is required.
    """

    pass


__all__ = [
    "JulianDateError",
    "RangeError",
    "InvalidFormatError",
    "InvalidArgumentError",
]
