"""Internal constants for chronoutils.

These constants define the tick resolution, the calendar limits and the
magic numbers used throughout the library. This module is not part of
the public API.
"""

from __future__ import annotations

# Tick resolution: one tick is 100 nanoseconds
NANOSECONDS_PER_TICK: int = 100
TICKS_PER_MICROSECOND: int = 10
TICKS_PER_MILLISECOND: int = 1_000 * TICKS_PER_MICROSECOND
TICKS_PER_SECOND: int = 1_000 * TICKS_PER_MILLISECOND  # 10_000_000
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 864_000_000_000

# Signed 64-bit tick range used by TimeSpan
MIN_TICKS: int = -(2**63)
MAX_TICKS: int = 2**63 - 1

# Calendar limits (proleptic Gregorian, no year zero)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Day counts of the Gregorian cycles
DAYS_PER_YEAR: int = 365
DAYS_PER_4_YEARS: int = 4 * DAYS_PER_YEAR + 1  # 1_461
DAYS_PER_100_YEARS: int = 25 * DAYS_PER_4_YEARS - 1  # 36_524
DAYS_PER_400_YEARS: int = 4 * DAYS_PER_100_YEARS + 1  # 146_097

# 0001-01-01 (epoch day 0) .. 9999-12-31 23:59:59.9999999
DAYS_TO_MAX_YEAR_END: int = 3_652_059
MAX_DATETIME_TICKS: int = DAYS_TO_MAX_YEAR_END * TICKS_PER_DAY - 1

# 1970-01-01 expressed in days and ticks since the epoch
DAYS_TO_UNIX_EPOCH: int = 719_162
UNIX_EPOCH_TICKS: int = DAYS_TO_UNIX_EPOCH * TICKS_PER_DAY

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# UTC offsets are limited to less than one day
MAX_OFFSET_TICKS: int = TICKS_PER_DAY - 1


__all__ = [
    "NANOSECONDS_PER_TICK",
    "TICKS_PER_MICROSECOND",
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "MIN_TICKS",
    "MAX_TICKS",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "DAYS_TO_MAX_YEAR_END",
    "MAX_DATETIME_TICKS",
    "DAYS_TO_UNIX_EPOCH",
    "UNIX_EPOCH_TICKS",
    "DAYS_IN_MONTH",
    "MAX_OFFSET_TICKS",
]
