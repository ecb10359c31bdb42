"""Calendar units.

This module provides:
    - Unit: granularity for navigation and arithmetic (DAY, WEEK, MONTH, YEAR)
"""

from __future__ import annotations

from juliandate.units.unit import Unit

__all__: list[str] = [
    "Unit",
]
