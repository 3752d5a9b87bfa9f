"""TimeSpan class representing an elapsed duration.

This module provides the TimeSpan class for representing signed
durations with a resolution of one tick (100 nanoseconds).
"""

from __future__ import annotations

from chronoutils._internal.constants import (
    MAX_TICKS,
    MIN_TICKS,
    NANOSECONDS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from chronoutils._internal.ticks import check_ticks, ticks_from_number, total
from chronoutils.units.outputformat import TimeSpanOutputFormat


class TimeSpan:
    """A signed elapsed duration with 100 nanosecond resolution.

    TimeSpan stores a single signed 64-bit tick count. Negative values are
    valid and format with a leading sign. The component accessors
    (days, hours, ..., nanoseconds) all share the sign of the whole
    duration, so ``-TimeSpan.from_minutes(90)`` has hours == -1 and
    minutes == -30.

    Attributes:
        total_ticks: The raw tick count.
        days: Whole days.
        hours: Hours within the day (-23..23).
        minutes: Minutes within the hour (-59..59).
        seconds: Seconds within the minute (-59..59).
        milliseconds: Milliseconds within the second (-999..999).
        microseconds: Microseconds within the millisecond (-999..999).
        nanoseconds: Nanoseconds within the microsecond, a multiple of 100.

    Examples:
        >>> span = TimeSpan.from_string("2:34:53:2.5")
        >>> span.days, span.hours, span.minutes, span.seconds, span.milliseconds
        (3, 10, 53, 2, 500)

        >>> (TimeSpan.from_hours(7) + TimeSpan.from_minutes(5.5)).to_string()
        '07:05:30'
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0) -> None:
        """Create a TimeSpan from a raw tick count.

        Args:
            ticks: Number of 100 nanosecond ticks (can be negative).

        Raises:
            TypeError: If ticks is not an integer.
            TickOverflowError: If ticks does not fit into 64 bits.
        """
        if isinstance(ticks, bool) or not isinstance(ticks, int):
            raise TypeError(f"ticks must be an integer, got {type(ticks).__name__}")
        self._ticks: int = check_ticks(ticks, what="TimeSpan")

    # Factories

    @classmethod
    def from_ticks(cls, ticks: int) -> TimeSpan:
        """Create a TimeSpan from a raw tick count."""
        return cls(ticks)

    @classmethod
    def from_days(cls, days: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of days.

        Args:
            days: Number of days (can be negative or fractional).

        Raises:
            TickOverflowError: If the result is not representable.

        Examples:
            >>> TimeSpan.from_days(1.5).total_hours
            36.0
        """
        return cls(ticks_from_number(days, TICKS_PER_DAY))

    @classmethod
    def from_hours(cls, hours: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of hours."""
        return cls(ticks_from_number(hours, TICKS_PER_HOUR))

    @classmethod
    def from_minutes(cls, minutes: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of minutes."""
        return cls(ticks_from_number(minutes, TICKS_PER_MINUTE))

    @classmethod
    def from_seconds(cls, seconds: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of seconds.

        Examples:
            >>> TimeSpan.from_seconds(-5.0).to_string(TimeSpanOutputFormat.WITH_MEASURES)
            '-5 s'
        """
        return cls(ticks_from_number(seconds, TICKS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of milliseconds."""
        return cls(ticks_from_number(milliseconds, TICKS_PER_MILLISECOND))

    @classmethod
    def from_microseconds(cls, microseconds: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of microseconds."""
        return cls(ticks_from_number(microseconds, TICKS_PER_MICROSECOND))

    @classmethod
    def infinity(cls) -> TimeSpan:
        """Return the longest representable positive TimeSpan."""
        return cls(MAX_TICKS)

    @classmethod
    def negative_infinity(cls) -> TimeSpan:
        """Return the longest representable negative TimeSpan."""
        return cls(MIN_TICKS)

    @classmethod
    def from_string(cls, text: str) -> TimeSpan:
        """Parse a TimeSpan from ``[-][[D:]H:]M:S[.fff]`` or bare seconds.

        Fewer colon-separated fields shift toward seconds, then minutes,
        then hours, then days. An empty string yields a zero TimeSpan.

        Raises:
            InvalidFormatError: If the text does not match the grammar.

        Examples:
            >>> TimeSpan.from_string("5:30") == TimeSpan.from_minutes(5.5)
            True
        """
        from chronoutils.format.timespan_text import parse_timespan

        return parse_timespan(text)

    # Components

    def _component(self, ticks_per_unit: int, modulo: int | None = None) -> int:
        magnitude = abs(self._ticks) // ticks_per_unit
        if modulo is not None:
            magnitude %= modulo
        return -magnitude if self._ticks < 0 else magnitude

    @property
    def total_ticks(self) -> int:
        """Return the raw tick count."""
        return self._ticks

    @property
    def days(self) -> int:
        """Return the whole days."""
        return self._component(TICKS_PER_DAY)

    @property
    def hours(self) -> int:
        """Return the hours within the day."""
        return self._component(TICKS_PER_HOUR, 24)

    @property
    def minutes(self) -> int:
        """Return the minutes within the hour."""
        return self._component(TICKS_PER_MINUTE, 60)

    @property
    def seconds(self) -> int:
        """Return the seconds within the minute."""
        return self._component(TICKS_PER_SECOND, 60)

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds within the second."""
        return self._component(TICKS_PER_MILLISECOND, 1000)

    @property
    def microseconds(self) -> int:
        """Return the microseconds within the millisecond."""
        return self._component(TICKS_PER_MICROSECOND, 1000)

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the microsecond.

        The value is always a multiple of 100, the tick resolution.
        """
        return self._component(1, TICKS_PER_MICROSECOND) * NANOSECONDS_PER_TICK

    # Totals

    @property
    def total_days(self) -> float:
        """Return the duration in (fractional) days."""
        return total(self._ticks, TICKS_PER_DAY)

    @property
    def total_hours(self) -> float:
        """Return the duration in (fractional) hours."""
        return total(self._ticks, TICKS_PER_HOUR)

    @property
    def total_minutes(self) -> float:
        """Return the duration in (fractional) minutes."""
        return total(self._ticks, TICKS_PER_MINUTE)

    @property
    def total_seconds(self) -> float:
        """Return the duration in (fractional) seconds.

        Examples:
            >>> TimeSpan.from_string("15.985077682").total_seconds
            15.9850776
        """
        return total(self._ticks, TICKS_PER_SECOND)

    @property
    def total_milliseconds(self) -> float:
        """Return the duration in (fractional) milliseconds."""
        return total(self._ticks, TICKS_PER_MILLISECOND)

    @property
    def total_microseconds(self) -> float:
        """Return the duration in (fractional) microseconds."""
        return total(self._ticks, TICKS_PER_MICROSECOND)

    # State

    @property
    def is_null(self) -> bool:
        """Return True for a zero-length TimeSpan."""
        return self._ticks == 0

    @property
    def is_negative(self) -> bool:
        """Return True if the duration is shorter than zero."""
        return self._ticks < 0

    @property
    def is_infinity(self) -> bool:
        """Return True if this is TimeSpan.infinity()."""
        return self._ticks == MAX_TICKS

    @property
    def is_negative_infinity(self) -> bool:
        """Return True if this is TimeSpan.negative_infinity()."""
        return self._ticks == MIN_TICKS

    # Formatting

    def to_string(
        self,
        format: TimeSpanOutputFormat = TimeSpanOutputFormat.NORMAL,
        full_seconds: bool = False,
    ) -> str:
        """Return the TimeSpan as text.

        Args:
            format: NORMAL ("07:05:30.5"), WITH_MEASURES
                ("3 d 10 h 53 min 2 s 500 ms") or TOTAL_SECONDS ("298382.5").
            full_seconds: Omit everything below one second.

        Returns:
            The formatted duration.
        """
        from chronoutils.format.timespan_text import format_timespan

        return format_timespan(self, format, full_seconds=full_seconds)

    # Arithmetic operators

    def __add__(self, other: object) -> TimeSpan:
        """Add two TimeSpans.

        Raises:
            TickOverflowError: If the sum is not representable.
        """
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._ticks + other._ticks)

    def __sub__(self, other: object) -> TimeSpan:
        """Subtract one TimeSpan from another."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._ticks - other._ticks)

    def __mul__(self, other: object) -> TimeSpan:
        """Scale the duration by an int or float factor.

        Float products are rounded to the nearest tick.

        Examples:
            >>> TimeSpan.from_seconds(30) * 3 == TimeSpan.from_seconds(90)
            True
        """
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return TimeSpan(ticks_from_number(other, self._ticks))

    def __rmul__(self, other: object) -> TimeSpan:
        """Support scalar * TimeSpan."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> TimeSpan | float:
        """Divide by a scalar (-> TimeSpan) or by a TimeSpan (-> float).

        Raises:
            ZeroDivisionError: If other is zero.

        Examples:
            >>> TimeSpan.from_hours(1) / TimeSpan.from_minutes(20)
            3.0
        """
        if isinstance(other, TimeSpan):
            if other._ticks == 0:
                raise ZeroDivisionError("division by zero TimeSpan")
            return self._ticks / other._ticks
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division by zero")
        if isinstance(other, int):
            quotient = abs(self._ticks) // abs(other)
            negative = (self._ticks < 0) != (other < 0)
            return TimeSpan(-quotient if negative else quotient)
        return TimeSpan(ticks_from_number(self._ticks / other, 1))

    def __floordiv__(self, other: object) -> TimeSpan | int:
        """Floor-divide by an int (-> TimeSpan) or by a TimeSpan (-> int)."""
        if isinstance(other, TimeSpan):
            if other._ticks == 0:
                raise ZeroDivisionError("integer division by zero TimeSpan")
            return self._ticks // other._ticks
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return TimeSpan(self._ticks // other)

    def __mod__(self, other: object) -> TimeSpan:
        """Return the remainder of dividing by another TimeSpan."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        if other._ticks == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return TimeSpan(self._ticks % other._ticks)

    def __neg__(self) -> TimeSpan:
        """Return the negation of this duration.

        Raises:
            TickOverflowError: For TimeSpan.negative_infinity(), whose
                negation does not fit into 64 bits.
        """
        return TimeSpan(-self._ticks)

    def __pos__(self) -> TimeSpan:
        """Return a copy of this duration (unary +)."""
        return TimeSpan(self._ticks)

    def __abs__(self) -> TimeSpan:
        """Return the absolute value of this duration."""
        return -self if self._ticks < 0 else +self

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Check equality with another TimeSpan."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        """Check inequality with another TimeSpan."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this duration is shorter than another."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        """Return a hash based on the tick count."""
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"TimeSpan(ticks={self._ticks})"

    def __str__(self) -> str:
        """Return the NORMAL text form, e.g. "07:05:30"."""
        return self.to_string()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._ticks != 0


__all__ = ["TimeSpan"]
