"""Chronoutils: date, time and duration utilities with 100 ns resolution.

Chronoutils counts time in ticks of 100 nanoseconds on the proleptic
Gregorian calendar from 0001-01-01 to 9999-12-31.

Core Types:
    TimeSpan: Signed elapsed duration
    DateTime: Absolute instant with an optional presentation UTC offset
    Period: Calendar distance (years, months, days)

Units:
    DayOfWeek: Monday..Sunday
    DateTimeOutputFormat: Layouts for DateTime.to_string()
    TimeSpanOutputFormat: Layouts for TimeSpan.to_string()

Clocks:
    Clock, SystemClock, FixedClock: Sources for "now" and the local offset

Calendar Functions:
    is_leap_year, days_in_month, days_in_year, day_of_year,
    epoch_day_count, date_from_epoch_day_count

Exceptions:
    ChronoError: Base exception
    ConversionError: Validation or parsing failed
    OutOfRangeError: A component is out of range
    InvalidFormatError: Text matches no accepted grammar
    TickOverflowError: Arithmetic left the representable range

Example:
    >>> from chronoutils import DateTime, TimeSpan, Period
    >>> dt = DateTime.from_string("2012-02-29 15:34:20.033")
    >>> (dt + Period(years=1)).to_string()
    '2013-02-28 15:34:20.033'
    >>> (dt + TimeSpan.from_days(1)).day
    1
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronoutils.core.datetime import DateTime
from chronoutils.core.period import Period
from chronoutils.core.timespan import TimeSpan

# Units
from chronoutils.units.dayofweek import DayOfWeek
from chronoutils.units.outputformat import DateTimeOutputFormat, TimeSpanOutputFormat

# Clocks
from chronoutils.clock import Clock, FixedClock, SystemClock

# Calendar functions
from chronoutils._internal.calendar import (
    date_from_epoch_day_count,
    day_of_year,
    days_in_month,
    days_in_year,
    epoch_day_count,
    is_leap_year,
)

# Exceptions
from chronoutils.errors import (
    ChronoError,
    ConversionError,
    ConversionErrorKind,
    InvalidFormatError,
    OutOfRangeError,
    TickOverflowError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "Period",
    "TimeSpan",
    # Units
    "DayOfWeek",
    "DateTimeOutputFormat",
    "TimeSpanOutputFormat",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Calendar functions
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "epoch_day_count",
    "date_from_epoch_day_count",
    # Exceptions
    "ChronoError",
    "ConversionError",
    "ConversionErrorKind",
    "OutOfRangeError",
    "InvalidFormatError",
    "TickOverflowError",
]
