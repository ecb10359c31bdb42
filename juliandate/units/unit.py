"""Unit enumeration for calendar navigation and arithmetic.

This module provides the Unit enum selecting the granularity of
first_of/last_of navigation and add_unit arithmetic.
"""

from __future__ import annotations

from enum import Enum


class Unit(Enum):
    """Calendar units understood by CalendarDate.

    The set is closed: DAY, WEEK, MONTH and YEAR. DAY and WEEK have a
    fixed length in days; MONTH and YEAR do not (month lengths vary and
    leap years have 366 days).

    Examples:
        >>> Unit.WEEK.fixed_days()
        7

        >>> Unit.MONTH.fixed_days() is None
        True

        >>> Unit("year")
        <Unit.YEAR: 'year'>
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def fixed_days(self) -> int | None:
        """Return the length of one unit in days.

        Returns:
            1 for DAY, 7 for WEEK, None for the variable-length MONTH
            and YEAR.
        """
        lengths: dict[Unit, int | None] = {
            Unit.DAY: 1,
            Unit.WEEK: 7,
            Unit.MONTH: None,
            Unit.YEAR: None,
        }
        return lengths[self]


__all__ = ["Unit"]
