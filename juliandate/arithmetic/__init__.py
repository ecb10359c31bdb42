"""Calendar navigation and arithmetic.

The functions in this module are the canonical implementations behind
the CalendarDate methods of the same names:

Navigation (from juliandate.arithmetic.ops):
    - first_of: First day of the enclosing day/week/month/year
    - last_of: Last day of the enclosing day/week/month/year

Arithmetic (from juliandate.arithmetic.ops):
    - add_unit: Add days, weeks, months or years without clamping
    - split_months: Split a month count into years and months
"""

from __future__ import annotations

from juliandate.arithmetic.ops import add_unit, first_of, last_of, split_months

__all__: list[str] = [
    "first_of",
    "last_of",
    "add_unit",
    "split_months",
]
