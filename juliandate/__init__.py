"""Juliandate: an immutable calendar date built on Julian day numbers.

A CalendarDate stores a single integer, the Julian day number, and
derives year, month, day and weekday from it. Construction validates
every calendar component, and calendar arithmetic fails loudly instead
of clamping when the result would not exist.

Core Types:
    CalendarDate: Proleptic Gregorian calendar date

Units:
    Unit: Navigation and arithmetic granularity (DAY, WEEK, MONTH, YEAR)

Format Functions:
    parse_iso_date: Parse a YEAR-MM-DD string
    format_iso_date: Format a date as YEAR-MM-DD
    format_pattern: Format a date with letter directives (Y, m, d, N, t, ...)

Clock:
    use_clock: Pin the current date inside a with-block
    set_clock: Replace the current-date source

Exceptions:
    JulianDateError: Base exception
    RangeError: Month or day out of range
    InvalidFormatError: String is not a YEAR-MM-DD date
    InvalidArgumentError: Unit outside the enumeration

Example:
    >>> from juliandate import CalendarDate, Unit
    >>> d = CalendarDate.from_string("2020-06-12")
    >>> d.last_of(Unit.MONTH).to_iso_date()
    '2020-06-30'
    >>> d.add_unit(2, Unit.WEEK).format("j.n.Y")
    '26.6.2020'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from juliandate.core.date import CalendarDate

# Units
from juliandate.units.unit import Unit

# Exceptions
from juliandate.errors import (
    InvalidArgumentError,
    InvalidFormatError,
    JulianDateError,
    RangeError,
)

# Format functions
from juliandate.format import format_iso_date, format_pattern, parse_iso_date

# Clock
from juliandate._internal.clock import set_clock, use_clock

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    # Units
    "Unit",
    # Exceptions
    "JulianDateError",
    "RangeError",
    "InvalidFormatError",
    "InvalidArgumentError",
    # Format functions
    "parse_iso_date",
    "format_iso_date",
    "format_pattern",
    # Clock
    "set_clock",
    "use_clock",
]
