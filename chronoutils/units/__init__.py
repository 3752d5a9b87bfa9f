"""Calendar units and format selectors.

This module provides:
    - DayOfWeek: Monday..Sunday with fixed English names
    - DateTimeOutputFormat: layouts for DateTime.to_string()
    - TimeSpanOutputFormat: layouts for TimeSpan.to_string()
"""

from __future__ import annotations

from chronoutils.units.dayofweek import DayOfWeek
from chronoutils.units.outputformat import DateTimeOutputFormat, TimeSpanOutputFormat

__all__: list[str] = [
    "DayOfWeek",
    "DateTimeOutputFormat",
    "TimeSpanOutputFormat",
]
