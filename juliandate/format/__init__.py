"""Date formatting and parsing.

This module provides functions for converting CalendarDate values to and
from string representations:
    - ISO calendar date formatting and parsing (YEAR-MM-DD)
    - Letter-directive pattern formatting

Functions:
    parse_iso_date: Parse a YEAR-MM-DD string.
    format_iso_date: Format a CalendarDate as YEAR-MM-DD.
    format_pattern: Format a CalendarDate using a letter pattern.

Examples:
    >>> from juliandate.format import parse_iso_date, format_pattern

    >>> d = parse_iso_date("2020-06-12")
    >>> format_pattern(d, "d.m.Y")
    '12.06.2020'
"""

from __future__ import annotations

from juliandate.format.iso import format_iso_date, parse_iso_date
from juliandate.format.pattern import format_pattern

__all__: list[str] = [
    # ISO
    "parse_iso_date",
    "format_iso_date",
    # Pattern
    "format_pattern",
]
