"""Validation utilities for chronoutils.

Every constructor and parser funnels its calendar and time components
through the checks in this module, so an invalid value is rejected with
an OutOfRangeError before any tick count is composed.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from chronoutils._internal.constants import (
    MAX_OFFSET_TICKS,
    MAX_YEAR,
    MIN_YEAR,
    TICKS_PER_SECOND,
)
from chronoutils.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising OutOfRangeError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23), minute=(0, 59))
        ... def clock_face(hour: int, minute: int) -> str:
        ...     return f"{hour:02d}:{minute:02d}"

        >>> clock_face(61, 2)
        Traceback (most recent call last):
        ...
        OutOfRangeError: hour must be between 0 and 23, got 61
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        param_names = list(inspect.signature(func).parameters.keys())

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            # Build a dict of all argument values
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = all_args.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise OutOfRangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        OutOfRangeError: If year is 0 or outside MIN_YEAR to MAX_YEAR.
    """
    if year == 0:
        raise OutOfRangeError("year 0 does not exist in the Gregorian calendar")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        OutOfRangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise OutOfRangeError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        OutOfRangeError: If day is invalid for the month.
    """
    from chronoutils._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise OutOfRangeError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        OutOfRangeError: If the date is invalid.
    """
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_sub_second(sub_second_ticks: int) -> None:
    """Validate that a sub-second part is below one second.

    Raises:
        OutOfRangeError: If the value is negative or 1000 ms or more.
    """
    if sub_second_ticks < 0 or sub_second_ticks >= TICKS_PER_SECOND:
        raise OutOfRangeError(
            f"sub-second part must be between 0 and 999.9999 ms, "
            f"got {sub_second_ticks / 10_000} ms"
        )


def validate_offset(offset_ticks: int) -> None:
    """Validate that a UTC offset is shorter than one day.

    Raises:
        OutOfRangeError: If the offset is one day or more in either direction.
    """
    if abs(offset_ticks) > MAX_OFFSET_TICKS:
        raise OutOfRangeError(
            f"UTC offset must be less than 24 hours, got {offset_ticks} ticks"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_sub_second",
    "validate_offset",
]
