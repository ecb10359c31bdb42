"""Current-date source for juliandate.

CalendarDate() with no arguments reads today's date through
current_calendar_date(). The source behind it is replaceable, so callers
and tests can pin "today" to a fixed date.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime
import logging
from contextlib import contextmanager
from typing import Callable, Iterator

ClockSource = Callable[[], tuple[int, int, int]]

_log = logging.getLogger(__name__)


def system_clock() -> tuple[int, int, int]:
    """Return today's (year, month, day) from the local wall clock."""
    today = datetime.date.today()
    return today.year, today.month, today.day


_source: ClockSource = system_clock


def current_calendar_date() -> tuple[int, int, int]:
    """Return today's (year, month, day) from the active clock source."""
    return _source()


def get_clock() -> ClockSource:
    """Return the active clock source."""
    return _source


def set_clock(source: ClockSource | None) -> ClockSource:
    """Install a clock source and return the one it replaces.

    Args:
        source: A callable returning (year, month, day), or None to
            restore the system clock.

    Returns:
        The previously active clock source.
    """
    global _source

    if source is not None and not callable(source):
        raise TypeError(f"clock source must be callable, got {type(source).__name__}")

    previous = _source
    _source = source if source is not None else system_clock
    _log.debug("clock source set to %r", _source)
    return previous


@contextmanager
def use_clock(source: ClockSource) -> Iterator[ClockSource]:
    """Install a clock source for the duration of a with-block.

    Examples:
        >>> with use_clock(lambda: (2020, 6, 12)):
        ...     current_calendar_date()
        (2020, 6, 12)
    """
    previous = set_clock(source)
    try:
        yield source
    finally:
        set_clock(previous)


__all__ = [
    "ClockSource",
    "system_clock",
    "current_calendar_date",
    "get_clock",
    "set_clock",
    "use_clock",
]
