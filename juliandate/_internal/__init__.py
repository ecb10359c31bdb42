"""Internal utilities for juliandate.

This module contains private implementation details:
    - Julian day number <-> calendar conversion (jdcal)
    - The current-date clock source
    - Validation helpers
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from juliandate._internal.calendar import calendar_to_julian, julian_to_calendar
from juliandate._internal.clock import current_calendar_date, set_clock, use_clock
from juliandate._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
)

__all__: list[str] = [
    "calendar_to_julian",
    "julian_to_calendar",
    "current_calendar_date",
    "set_clock",
    "use_clock",
    "validate_date",
    "validate_day",
    "validate_month",
]
