"""Letter-directive date formatting.

This module renders a CalendarDate through a pattern in which single
letters stand for calendar fields, the vocabulary familiar from PHP's
date(). Only locale-independent numeric fields are supported.

Supported Directives:
    Y - Year, at least 4 digits (2020, 0202, -0044)
    y - Year, last 2 digits (20)
    m - Month, 2 digits (01-12)
    n - Month, no padding (1-12)
    d - Day of month, 2 digits (01-31)
    j - Day of month, no padding (1-31)
    N - ISO weekday (1=Monday, 7=Sunday)
    w - Weekday (0=Sunday, 6=Saturday)
    z - Day of year, starting at 0 (0-365)
    t - Number of days in the month (28-31)
    L - 1 in a leap year, 0 otherwise

Any other character is copied as is. A backslash copies the character
after it verbatim, so "\\Y" renders a literal "Y".

Not Supported (locale-dependent):
    D, l - Weekday names
    M, F - Month names

Examples:
    >>> from juliandate import CalendarDate
    >>> from juliandate.format import format_pattern

    >>> format_pattern(CalendarDate(2000, 1, 1), "Y-m-d")
    '2000-01-01'

    >>> format_pattern(CalendarDate(2020, 2, 7), "j.n.Y (N) t")
    '7.2.2020 (5) 29'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from juliandate._internal.calendar import (
    day_of_year,
    is_leap_year,
    iso_weekday,
    julian_to_calendar,
    month_length,
)

if TYPE_CHECKING:
    from juliandate.core.date import CalendarDate


def _year(year: int) -> str:
    if year >= 0:
        return f"{year:04d}"
    return f"{year:05d}"  # Include minus sign


# Each directive receives (day_number, year, month, day)
_DIRECTIVES: dict[str, Callable[[int, int, int, int], str]] = {
    "Y": lambda n, y, m, d: _year(y),
    "y": lambda n, y, m, d: f"{y % 100:02d}",
    "m": lambda n, y, m, d: f"{m:02d}",
    "n": lambda n, y, m, d: str(m),
    "d": lambda n, y, m, d: f"{d:02d}",
    "j": lambda n, y, m, d: str(d),
    "N": lambda n, y, m, d: str(iso_weekday(n)),
    "w": lambda n, y, m, d: str(iso_weekday(n) % 7),
    "z": lambda n, y, m, d: str(day_of_year(n) - 1),
    "t": lambda n, y, m, d: str(month_length(y, m)),
    "L": lambda n, y, m, d: "1" if is_leap_year(y) else "0",
}


def format_pattern(value: CalendarDate, pattern: str) -> str:
    """Format a CalendarDate using a letter-directive pattern.

    Args:
        value: The date to format.
        pattern: Pattern string; see the module docstring for directives.

    Returns:
        Formatted string.

    Raises:
        TypeError: If pattern is not a string.

    Examples:
        >>> format_pattern(CalendarDate(2020, 4, 17), "N")
        '5'

        >>> format_pattern(CalendarDate(2020, 4, 17), "\\\\Y: Y")
        'Y: 2020'
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a str, got {type(pattern).__name__}")

    day_number = value.to_day_number()
    year, month, day = julian_to_calendar(day_number)

    result = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            result.append(pattern[i + 1])
            i += 2
            continue
        directive = _DIRECTIVES.get(char)
        if directive is None:
            result.append(char)
        else:
            result.append(directive(day_number, year, month, day))
        i += 1

    return "".join(result)


__all__ = ["format_pattern"]
