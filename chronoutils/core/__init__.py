"""Core value types.

This module provides the value types of chronoutils:
    - TimeSpan: Signed elapsed duration with 100 nanosecond resolution
    - DateTime: Absolute instant with an optional presentation UTC offset
    - Period: Calendar distance in years, months and days
"""

from __future__ import annotations

from chronoutils.core.datetime import DateTime
from chronoutils.core.period import Period
from chronoutils.core.timespan import TimeSpan

__all__: list[str] = [
    "DateTime",
    "Period",
    "TimeSpan",
]
