"""Core date type.

This module provides:
    - CalendarDate: Proleptic Gregorian date stored as a Julian day number
"""

from __future__ import annotations

from juliandate.core.date import CalendarDate

__all__: list[str] = [
    "CalendarDate",
]
