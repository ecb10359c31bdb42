"""Internal constants for juliandate.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import jdcal

# jdcal splits a Julian date into (MJD_0, mjd), where MJD_0 = 2400000.5 and
# the pair marks midnight. The chronological Julian day number of a civil
# date is the (noon-based) integer that follows.
MJD_0: float = jdcal.MJD_0
JDN_MJD_OFFSET: int = 2_400_001  # JDN = MJD + 2400001

# JDN of 2000-01-01, a Saturday
JDN_J2000: int = 2_451_545

# The proleptic Gregorian calendar repeats every 400 years, which is
# exactly 146097 days (a whole number of weeks). Conversions fold dates
# into the cycle starting at 2000-01-01, where jdcal is exact.
CYCLE_YEARS: int = 400
CYCLE_DAYS: int = 146_097
CYCLE_BASE_YEAR: int = 2000

# Month bounds
MIN_MONTH: int = 1
MAX_MONTH: int = 12
MONTHS_PER_YEAR: int = 12

# Every month has at least this many days; smaller days need no lookup
SAFE_DAY: int = 28

DAYS_PER_WEEK: int = 7


__all__ = [
    "MJD_0",
    "JDN_MJD_OFFSET",
    "JDN_J2000",
    "CYCLE_YEARS",
    "CYCLE_DAYS",
    "CYCLE_BASE_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MONTHS_PER_YEAR",
    "SAFE_DAY",
    "DAYS_PER_WEEK",
]
