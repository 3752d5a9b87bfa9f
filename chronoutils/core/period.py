"""Period class representing a calendar distance.

A Period counts whole years, months and days. Unlike a TimeSpan its
length in ticks depends on where it is applied: one month after
January 31st is shorter than one month after March 1st.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronoutils.core.datetime import DateTime


class Period:
    """A calendar distance of years, months and days.

    Periods are usually obtained from ``Period.between(begin, end)``, which
    also remembers ``begin`` as the period's start. The components share
    the sign of the distance. Equality and hashing only consider the
    (years, months, days) triple.

    Examples:
        >>> from chronoutils import DateTime
        >>> begin = DateTime.from_date_and_time(1994, 7, 18, 15, 30, 21)
        >>> end = DateTime.from_date(2017, 12, 2)
        >>> period = Period.between(begin, end)
        >>> period.years, period.months, period.days
        (23, 4, 14)
        >>> (begin + period).date == end
        True
    """

    __slots__ = ("_years", "_months", "_days", "_start")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        *,
        start: DateTime | None = None,
    ) -> None:
        """Create a Period.

        Args:
            years: Whole years.
            months: Whole months (not normalized into years).
            days: Whole days.
            start: The DateTime the period was measured from, if any.

        Raises:
            TypeError: If a component is not an integer.
        """
        for name, value in (("years", years), ("months", months), ("days", days)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        self._years: int = years
        self._months: int = months
        self._days: int = days
        self._start: DateTime | None = start

    @classmethod
    def between(cls, begin: DateTime, end: DateTime) -> Period:
        """Return the calendar distance from ``begin`` to ``end``.

        Only calendar dates are compared. Adding the result to ``begin``
        reaches the date of ``end`` but keeps the time of day of ``begin``,
        so the sum equals ``end`` only when both share a time of day.

        See ``chronoutils.arithmetic.period_ops.period_between``.
        """
        from chronoutils.arithmetic.period_ops import period_between

        return period_between(begin, end)

    # Properties

    @property
    def years(self) -> int:
        """Return the number of whole years."""
        return self._years

    @property
    def months(self) -> int:
        """Return the number of whole months beyond the years."""
        return self._months

    @property
    def days(self) -> int:
        """Return the number of days beyond the months."""
        return self._days

    @property
    def start(self) -> DateTime | None:
        """Return the DateTime the period was measured from, or None."""
        return self._start

    @property
    def total_months(self) -> int:
        """Return years and months as a month count."""
        return self._years * 12 + self._months

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return not (self._years or self._months or self._days)

    # Operators

    def __neg__(self) -> Period:
        return Period(-self._years, -self._months, -self._days)

    def __pos__(self) -> Period:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self._years, self._months, self._days) == (
            other._years,
            other._months,
            other._days,
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        """Return the text form, e.g. "23 y 4 m 14 d"."""
        return f"{self._years} y {self._months} m {self._days} d"

    def __bool__(self) -> bool:
        return not self.is_zero


__all__ = ["Period"]
