"""Calendar-aware arithmetic between DateTime and Period.

Adding a Period moves a DateTime by whole years, then whole months, then
days. A year or month step that lands on a day the target month does not
have clamps to the month's last day, so 2012-02-29 plus one year is
2013-02-28. ``period_between`` is the inverse: for the Period it returns,
``begin + period_between(begin, end)`` lands on the calendar date of
``end``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoutils._internal.calendar import days_in_month, epoch_day_count
from chronoutils._internal.constants import TICKS_PER_DAY
from chronoutils._internal.validation import validate_year
from chronoutils.errors import OutOfRangeError, TickOverflowError

if TYPE_CHECKING:
    from chronoutils.core.datetime import DateTime
    from chronoutils.core.period import Period


def _shift_months(
    year: int, month: int, day: int, years: int, months: int
) -> tuple[int, int, int]:
    """Move a date by whole years, then whole months, clamping the day.

    Raises:
        TickOverflowError: If the resulting year leaves 1-9999.
    """
    year += years
    try:
        validate_year(year)
    except OutOfRangeError as e:
        raise TickOverflowError(f"shifting by {years} years: {e}") from e
    day = min(day, days_in_month(year, month))

    year, month_index = divmod(year * 12 + month - 1 + months, 12)
    month = month_index + 1
    try:
        validate_year(year)
    except OutOfRangeError as e:
        raise TickOverflowError(f"shifting by {months} months: {e}") from e
    day = min(day, days_in_month(year, month))
    return year, month, day


def _split_months(total_months: int) -> tuple[int, int]:
    """Split a month count into (years, months) sharing its sign."""
    years, months = divmod(abs(total_months), 12)
    if total_months < 0:
        return -years, -months
    return years, months


def add_period_to_datetime(dt: DateTime, period: Period) -> DateTime:
    """Return ``dt`` moved by ``period`` on its own wall clock.

    The time of day and the presentation offset of ``dt`` are kept.

    Args:
        dt: The starting point.
        period: The calendar distance to move by.

    Returns:
        The shifted DateTime.

    Raises:
        TickOverflowError: If the result leaves 0001-01-01..9999-12-31.

    Examples:
        >>> from chronoutils import DateTime, Period
        >>> add_period_to_datetime(DateTime.from_date(2012, 2, 29), Period(years=1))
        DateTime.from_components(2013, 2, 28, 0, 0, 0, 0)
    """
    from chronoutils.core.datetime import DateTime

    year, month, day = _shift_months(
        dt.year, dt.month, dt.day, period.years, period.months
    )
    days = epoch_day_count(year, month, day) + period.days
    wall_ticks = days * TICKS_PER_DAY + dt.time_of_day.total_ticks
    return DateTime._from_wall_ticks(wall_ticks, dt.offset)


def subtract_period_from_datetime(dt: DateTime, period: Period) -> DateTime:
    """Return ``dt`` moved back by ``period``."""
    return add_period_to_datetime(dt, -period)


def period_between(begin: DateTime, end: DateTime) -> Period:
    """Return the calendar distance from ``begin`` to ``end``.

    ``end`` is first read on the wall clock of ``begin``'s offset. The
    result is the largest whole number of months that does not overshoot
    ``end`` (clamping the day like addition does), and the remaining days.
    Time of day does not take part: only calendar dates are compared. So
    ``begin + period_between(begin, end) == end`` only holds when both share
    a time of day; otherwise the sum lands on the date of ``end`` at the
    time of day of ``begin``.

    Args:
        begin: The starting point.
        end: The end point, may lie before ``begin``.

    Returns:
        A Period anchored at ``begin``.

    Examples:
        >>> from chronoutils import DateTime
        >>> p = period_between(DateTime.from_date(1994, 7, 18),
        ...                    DateTime.from_date(2017, 12, 2))
        >>> p.years, p.months, p.days
        (23, 4, 14)
    """
    from chronoutils.core.period import Period

    end = end.with_offset(begin.offset)
    begin_year, begin_month, begin_day = begin.year, begin.month, begin.day
    end_days = epoch_day_count(end.year, end.month, end.day)

    def anchor_days(total_months: int) -> int:
        years, months = _split_months(total_months)
        return epoch_day_count(
            *_shift_months(begin_year, begin_month, begin_day, years, months)
        )

    total_months = (end.year - begin_year) * 12 + (end.month - begin_month)
    anchor = anchor_days(total_months)
    if total_months > 0 and anchor > end_days:
        total_months -= 1
        anchor = anchor_days(total_months)
    elif total_months < 0 and anchor < end_days:
        total_months += 1
        anchor = anchor_days(total_months)

    years, months = _split_months(total_months)
    return Period(years, months, end_days - anchor, start=begin)


__all__ = [
    "add_period_to_datetime",
    "subtract_period_from_datetime",
    "period_between",
]
