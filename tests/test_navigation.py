"""Tests for first_of / last_of navigation."""

from __future__ import annotations

import pytest

from juliandate import CalendarDate, Unit
from juliandate.arithmetic import first_of, last_of
from juliandate.errors import InvalidArgumentError


class TestFirstOf:
    """Tests for CalendarDate.first_of()."""

    def test_day_is_identity(self) -> None:
        """The first day of a day is the date itself."""
        d = CalendarDate(2020, 6, 12)
        assert d.first_of(Unit.DAY) == d
        assert d.first_of(Unit.DAY).to_iso_date() == "2020-06-12"

    @pytest.mark.parametrize("day", range(8, 15))
    def test_week_starts_on_monday(self, day: int) -> None:
        """Every day of the week 2020-06-08..14 maps to Monday the 8th."""
        d = CalendarDate(2020, 6, day)
        assert d.first_of(Unit.WEEK).to_iso_date() == "2020-06-08"

    def test_week_across_month_boundary(self) -> None:
        """The Monday can lie in the previous month."""
        assert CalendarDate(2020, 7, 1).first_of(Unit.WEEK) == CalendarDate(2020, 6, 29)

    def test_week_across_year_boundary(self) -> None:
        """The Monday can lie in the previous year."""
        assert CalendarDate(2021, 1, 1).first_of(Unit.WEEK) == CalendarDate(2020, 12, 28)

    @pytest.mark.parametrize("month", range(1, 13))
    def test_month(self, month: int) -> None:
        """The first day of a month is day 1."""
        d = CalendarDate(2020, month, 15)
        assert d.first_of(Unit.MONTH).to_iso_date() == f"2020-{month:02d}-01"

    def test_year(self) -> None:
        """The first day of a year is January 1."""
        assert CalendarDate(2020, 6, 12).first_of(Unit.YEAR).to_iso_date() == "2020-01-01"

    def test_invalid_unit(self) -> None:
        """Anything but a Unit member raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            CalendarDate(2020, 6, 12).first_of(5)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            CalendarDate(2020, 6, 12).first_of("month")  # type: ignore[arg-type]

    def test_function_matches_method(self) -> None:
        """The module function and the method agree."""
        d = CalendarDate(2020, 6, 12)
        for unit in Unit:
            assert first_of(d, unit) == d.first_of(unit)


class TestLastOf:
    """Tests for CalendarDate.last_of()."""

    def test_day_is_identity(self) -> None:
        """The last day of a day is the date itself."""
        d = CalendarDate(2020, 6, 12)
        assert d.last_of(Unit.DAY) == d

    @pytest.mark.parametrize("day", range(8, 15))
    def test_week_ends_on_sunday(self, day: int) -> None:
        """Every day of the week 2020-06-08..14 maps to Sunday the 14th."""
        d = CalendarDate(2020, 6, day)
        assert d.last_of(Unit.WEEK).to_iso_date() == "2020-06-14"

    def test_week_across_year_boundary(self) -> None:
        """The Sunday can lie in the next year."""
        assert CalendarDate(2020, 12, 30).last_of(Unit.WEEK) == CalendarDate(2021, 1, 3)

    def test_month_standard_year(self) -> None:
        """Last days of the months of 2019."""
        lengths = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        for month, length in enumerate(lengths, start=1):
            d = CalendarDate(2019, month, 1)
            assert d.last_of(Unit.MONTH).to_iso_date() == f"2019-{month:02d}-{length}"

    def test_month_leap_year(self) -> None:
        """Last days of the months of 2020."""
        lengths = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        for month, length in enumerate(lengths, start=1):
            d = CalendarDate(2020, month, 1)
            assert d.last_of(Unit.MONTH).to_iso_date() == f"2020-{month:02d}-{length}"

    def test_year(self) -> None:
        """The last day of a year is December 31."""
        assert CalendarDate(2020, 6, 12).last_of(Unit.YEAR).to_iso_date() == "2020-12-31"
        assert CalendarDate(2019, 1, 1).last_of(Unit.YEAR).to_iso_date() == "2019-12-31"

    def test_invalid_unit(self) -> None:
        """Anything but a Unit member raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            CalendarDate(2020, 6, 12).last_of(None)  # type: ignore[arg-type]

    def test_function_matches_method(self) -> None:
        """The module function and the method agree."""
        d = CalendarDate(2020, 6, 12)
        for unit in Unit:
            assert last_of(d, unit) == d.last_of(unit)


class TestWindows:
    """Properties shared by first_of and last_of."""

    def test_first_not_after_last(self) -> None:
        """first_of <= date <= last_of for every unit."""
        d = CalendarDate(2020, 2, 29)
        for unit in Unit:
            assert d.first_of(unit) <= d <= d.last_of(unit)

    def test_week_spans_seven_days(self) -> None:
        """A week window is six days from start to end."""
        d = CalendarDate(2020, 6, 10)
        assert d.last_of(Unit.WEEK) - d.first_of(Unit.WEEK) == 6
        assert d.first_of(Unit.WEEK).iso_weekday == 1
        assert d.last_of(Unit.WEEK).iso_weekday == 7

    def test_year_span(self) -> None:
        """A year window covers 365 or 366 days."""
        leap = CalendarDate(2020, 6, 1)
        common = CalendarDate(2019, 6, 1)
        assert leap.last_of(Unit.YEAR) - leap.first_of(Unit.YEAR) == 365
        assert common.last_of(Unit.YEAR) - common.first_of(Unit.YEAR) == 364


class TestUnit:
    """Tests for the Unit enumeration."""

    def test_members(self) -> None:
        """Unit is a closed set of four members."""
        assert [u.value for u in Unit] == ["day", "week", "month", "year"]

    def test_lookup_by_value(self) -> None:
        """Members can be looked up by their string value."""
        assert Unit("week") is Unit.WEEK

    def test_fixed_days(self) -> None:
        """DAY and WEEK have fixed lengths; MONTH and YEAR do not."""
        assert Unit.DAY.fixed_days() == 1
        assert Unit.WEEK.fixed_days() == 7
        assert Unit.MONTH.fixed_days() is None
        assert Unit.YEAR.fixed_days() is None
