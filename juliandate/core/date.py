"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing dates in
the proleptic Gregorian calendar, stored as a Julian day number.
"""

from __future__ import annotations

from juliandate._internal.calendar import (
    calendar_to_julian,
    day_of_year,
    is_leap_year,
    iso_weekday,
    julian_to_calendar,
    month_length,
)
from juliandate._internal.clock import current_calendar_date
from juliandate._internal.validation import validate_date, validate_integer
from juliandate.arithmetic import ops
from juliandate.units.unit import Unit


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate stores a single integer, the chronological Julian day
    number (JDN 2451545 = 2000-01-01). Year, month, day and the other
    calendar fields are derived from it on demand.

    Instances are immutable. Navigation and arithmetic return new
    instances, and arithmetic never clamps: adding a month to May 31
    raises RangeError because June 31 does not exist.

    Attributes:
        year: The year.
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2020, 6, 12)
        >>> d.to_day_number()
        2459013
        >>> d.iso_weekday  # Friday
        5

        >>> d.first_of(Unit.WEEK)
        CalendarDate(2020, 6, 8)

        >>> d.add_unit(38, Unit.MONTH)
        CalendarDate(2023, 8, 12)

        >>> CalendarDate(2020, 5, 31).add_unit(1, Unit.MONTH)
        Traceback (most recent call last):
        ...
        juliandate.errors.RangeError: day is out of range
    """

    __slots__ = ("_day_number",)

    def __init__(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> None:
        """Create a CalendarDate from year, month, and day.

        With no arguments the date is today, as reported by the active
        clock source (see juliandate.use_clock).

        Args:
            year: The year.
            month: The month (1-12).
            day: The day of the month.

        Raises:
            TypeError: If only some components are given, or a component
                is not an int.
            RangeError: If the month or day does not exist.

        Examples:
            >>> CalendarDate(2020, 2, 29)
            CalendarDate(2020, 2, 29)

            >>> CalendarDate(2019, 2, 29)
            Traceback (most recent call last):
            ...
            juliandate.errors.RangeError: day is out of range
        """
        components = (year, month, day)
        if all(c is None for c in components):
            year, month, day = current_calendar_date()
        elif any(c is None for c in components):
            raise TypeError("CalendarDate() takes either no arguments or year, month and day")

        validate_date(year, month, day)  # type: ignore[arg-type]
        self._day_number = calendar_to_julian(year, month, day)  # type: ignore[arg-type]

    @classmethod
    def today(cls) -> CalendarDate:
        """Return today's date from the active clock source."""
        return cls()

    @classmethod
    def from_day_number(cls, day_number: int) -> CalendarDate:
        """Create a CalendarDate directly from a Julian day number.

        Every integer is a valid day number, so no validation beyond the
        type check takes place.

        Args:
            day_number: The Julian day number.

        Returns:
            The corresponding CalendarDate.

        Examples:
            >>> CalendarDate.from_day_number(2451545)
            CalendarDate(2000, 1, 1)
        """
        validate_integer("day_number", day_number)
        date = cls.__new__(cls)
        date._day_number = day_number
        return date

    @classmethod
    def from_string(cls, text: str) -> CalendarDate:
        """Parse a date from an ISO calendar date string (YEAR-MM-DD).

        Args:
            text: The date string. The year may have any number of digits.

        Returns:
            The parsed CalendarDate.

        Raises:
            InvalidFormatError: If text does not match YEAR-MM-DD.
            RangeError: If the month or day does not exist.

        Examples:
            >>> CalendarDate.from_string("2020-06-12")
            CalendarDate(2020, 6, 12)
        """
        from juliandate.format.iso import parse_iso_date

        return parse_iso_date(text)

    def to_day_number(self) -> int:
        """Return the Julian day number of this date."""
        return self._day_number

    @property
    def year(self) -> int:
        year, _, _ = julian_to_calendar(self._day_number)
        return year

    @property
    def month(self) -> int:
        _, month, _ = julian_to_calendar(self._day_number)
        return month

    @property
    def day(self) -> int:
        _, _, day = julian_to_calendar(self._day_number)
        return day

    @property
    def iso_weekday(self) -> int:
        """Return the ISO day of the week (1=Monday, 7=Sunday)."""
        return iso_weekday(self._day_number)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month.

        Examples:
            >>> CalendarDate(2020, 2, 1).days_in_month
            29
            >>> CalendarDate(2019, 2, 1).days_in_month
            28
        """
        year, month, _ = julian_to_calendar(self._day_number)
        return month_length(year, month)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return day_of_year(self._day_number)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return julian_to_calendar(self._day_number)

    # Navigation

    def first_of(self, unit: Unit) -> CalendarDate:
        """Return the first day of the day, week, month or year containing this date.

        Raises:
            InvalidArgumentError: If unit is not a Unit member.
        """
        return ops.first_of(self, unit)

    def last_of(self, unit: Unit) -> CalendarDate:
        """Return the last day of the day, week, month or year containing this date.

        Raises:
            InvalidArgumentError: If unit is not a Unit member.
        """
        return ops.last_of(self, unit)

    # Arithmetic

    def add_unit(self, amount: int, unit: Unit) -> CalendarDate:
        """Return a new CalendarDate offset by amount units.

        An amount of 0 returns this date unchanged. Month and year steps
        keep the day of the month and raise RangeError when the target
        month has no such day.

        Args:
            amount: Number of units to add (can be negative).
            unit: Unit.DAY, Unit.WEEK, Unit.MONTH or Unit.YEAR.

        Returns:
            The offset date.

        Raises:
            InvalidArgumentError: If unit is not a Unit member.
            RangeError: If the resulting date does not exist.

        Examples:
            >>> CalendarDate(2020, 6, 12).add_unit(-38, Unit.MONTH)
            CalendarDate(2017, 4, 12)

            >>> CalendarDate(2020, 2, 29).add_unit(1, Unit.YEAR)
            Traceback (most recent call last):
            ...
            juliandate.errors.RangeError: day is out of range
        """
        return ops.add_unit(self, amount, unit)

    def sub_unit(self, amount: int, unit: Unit) -> CalendarDate:
        """Return a new CalendarDate moved back by amount units."""
        validate_integer("amount", amount)
        return ops.add_unit(self, -amount, unit)

    def add_days(self, days: int) -> CalendarDate:
        return ops.add_unit(self, days, Unit.DAY)

    def add_weeks(self, weeks: int) -> CalendarDate:
        return ops.add_unit(self, weeks, Unit.WEEK)

    def add_months(self, months: int) -> CalendarDate:
        return ops.add_unit(self, months, Unit.MONTH)

    def add_years(self, years: int) -> CalendarDate:
        return ops.add_unit(self, years, Unit.YEAR)

    # Formatting

    def format(self, pattern: str) -> str:
        """Format this date with a letter-directive pattern.

        See juliandate.format.pattern for the supported letters.

        Examples:
            >>> CalendarDate(2000, 1, 1).format("Y-m-d")
            '2000-01-01'
            >>> CalendarDate(2020, 4, 17).format("N")
            '5'
        """
        from juliandate.format.pattern import format_pattern

        return format_pattern(self, pattern)

    def to_iso_date(self) -> str:
        """Return the date as YEAR-MM-DD.

        The year is written at its natural width.

        Examples:
            >>> CalendarDate(2020, 4, 18).to_iso_date()
            '2020-04-18'
            >>> CalendarDate(10191, 3, 6).to_iso_date()
            '10191-03-06'
        """
        from juliandate.format.iso import format_iso_date

        return format_iso_date(self)

    def __sub__(self, other: object) -> int:
        """Return the signed number of days between two dates.

        Examples:
            >>> CalendarDate(2020, 3, 1) - CalendarDate(2020, 2, 1)
            29
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number - other._day_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number == other._day_number

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number < other._day_number

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number <= other._day_number

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number > other._day_number

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number >= other._day_number

    def __hash__(self) -> int:
        return hash(self._day_number)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_day_number"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        year, month, day = julian_to_calendar(self._day_number)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_date()


__all__ = ["CalendarDate"]
