"""Calendar-aware arithmetic.

The operators on DateTime delegate Period arithmetic here:
    - add_period_to_datetime: Move a DateTime by a Period with day clamping
    - subtract_period_from_datetime: Move a DateTime back by a Period
    - period_between: Calendar distance between two DateTimes
"""

from __future__ import annotations

from chronoutils.arithmetic.period_ops import (
    add_period_to_datetime,
    period_between,
    subtract_period_from_datetime,
)

__all__: list[str] = [
    "add_period_to_datetime",
    "subtract_period_from_datetime",
    "period_between",
]
