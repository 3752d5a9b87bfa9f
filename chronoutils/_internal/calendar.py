"""Calendar engine for chronoutils.

This module provides the pure functions mapping calendar dates of the
proleptic Gregorian calendar to and from epoch day counts, the number of
whole days since 0001-01-01 (epoch day 0). There is no year zero: the
day before 0001-01-01 is not representable.

This module is not part of the public API; the public names are
re-exported from the package root.
"""

from __future__ import annotations

from chronoutils._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_YEAR,
    DAYS_TO_MAX_YEAR_END,
    MAX_YEAR,
    MIN_YEAR,
)
from chronoutils.errors import OutOfRangeError
from chronoutils.units.dayofweek import DayOfWeek


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2012)
        True
        >>> is_leap_year(2013)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        OutOfRangeError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise OutOfRangeError(f"month must be between 1 and 12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        if year == 0:
            raise OutOfRangeError("year 0 does not exist in the Gregorian calendar")
        raise OutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year.

    Examples:
        >>> day_of_year(2012, 2, 29)
        60
        >>> day_of_year(2013, 12, 31)
        365
    """
    days_in_month(year, month)
    return _days_before_month(year, month) + day


def epoch_day_count(year: int, month: int, day: int) -> int:
    """Convert a calendar date into the number of days since 0001-01-01.

    The month and day are expected to be valid; use
    ``validation.validate_date`` to check untrusted input first.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The epoch day count (0 for 0001-01-01).

    Raises:
        OutOfRangeError: If year is 0 or otherwise outside 1-9999, or
            month is outside 1-12.

    Examples:
        >>> epoch_day_count(1, 1, 1)
        0
        >>> epoch_day_count(1970, 1, 1)
        719162
    """
    _check_year(year)
    y = year - 1
    days_before_year = y * DAYS_PER_YEAR + y // 4 - y // 100 + y // 400
    return days_before_year + day_of_year(year, month, day) - 1


def date_from_epoch_day_count(days: int) -> tuple[int, int, int]:
    """Convert a number of days since 0001-01-01 into (year, month, day).

    Args:
        days: The epoch day count.

    Returns:
        Tuple of (year, month, day).

    Raises:
        OutOfRangeError: If days lies before 0001-01-01 or after 9999-12-31.

    Examples:
        >>> date_from_epoch_day_count(0)
        (1, 1, 1)
        >>> date_from_epoch_day_count(734561)
        (2012, 2, 29)
    """
    if days < 0 or days >= DAYS_TO_MAX_YEAR_END:
        raise OutOfRangeError(f"epoch day count {days} is outside 0001-01-01..9999-12-31")

    n400, n = divmod(days, DAYS_PER_400_YEARS)

    # The last day of a 400 and of a 100 year cycle belongs to the
    # preceding leap year rather than starting a fourth cycle
    n100 = min(n // DAYS_PER_100_YEARS, 3)
    n -= n100 * DAYS_PER_100_YEARS

    n4, n = divmod(n, DAYS_PER_4_YEARS)

    n1 = min(n // DAYS_PER_YEAR, 3)
    n -= n1 * DAYS_PER_YEAR

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    month, day = _month_and_day(year, n + 1)
    return year, month, day


def _month_and_day(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day of the year into (month, day)."""
    month = 12
    while _days_before_month(year, month) >= doy:
        month -= 1
    return month, doy - _days_before_month(year, month)


def day_of_week(days: int) -> DayOfWeek:
    """Return the weekday of an epoch day count.

    0001-01-01 (epoch day 0) was a Monday in the proleptic Gregorian
    calendar.

    Examples:
        >>> day_of_week(epoch_day_count(2012, 2, 29))
        <DayOfWeek.WEDNESDAY: 2>
    """
    return DayOfWeek(days % 7)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "epoch_day_count",
    "date_from_epoch_day_count",
    "day_of_week",
]
