"""Internal utilities for chronoutils.

This module contains private implementation details:
    - Constants: tick factors, epoch and calendar limits
    - Tick arithmetic: checked conversions between ticks and units
    - Calendar engine: leap years, month lengths, epoch day counts
    - Validation: the range checks shared by every constructor and parser

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronoutils._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_offset,
    validate_range,
    validate_sub_second,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_offset",
    "validate_range",
    "validate_sub_second",
    "validate_year",
]
