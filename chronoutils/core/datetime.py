"""DateTime class representing an absolute instant.

This module provides the DateTime class: a tick count since
0001-01-01T00:00:00 paired with an optional UTC offset that is kept for
presentation only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from chronoutils._internal.calendar import (
    date_from_epoch_day_count,
    day_of_week,
    day_of_year,
    days_in_month,
    epoch_day_count,
    is_leap_year,
)
from chronoutils._internal.constants import (
    MAX_DATETIME_TICKS,
    NANOSECONDS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
)
from chronoutils._internal.ticks import (
    check_ticks,
    ticks_from_number,
    ticks_from_unix_seconds,
    unix_seconds_from_ticks,
)
from chronoutils._internal.validation import (
    validate_date,
    validate_offset,
    validate_range,
    validate_sub_second,
)
from chronoutils.core.timespan import TimeSpan
from chronoutils.units.dayofweek import DayOfWeek
from chronoutils.units.outputformat import DateTimeOutputFormat

if TYPE_CHECKING:
    from chronoutils.clock import Clock
    from chronoutils.core.period import Period


@validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59))
def _time_of_day_ticks(
    hour: int,
    minute: int,
    second: int,
    sub_second_ticks: int = 0,
) -> int:
    """Compose the ticks since midnight of a validated time of day."""
    validate_sub_second(sub_second_ticks)
    return (
        hour * TICKS_PER_HOUR
        + minute * TICKS_PER_MINUTE
        + second * TICKS_PER_SECOND
        + sub_second_ticks
    )


class DateTime:
    """An absolute instant with 100 nanosecond resolution.

    DateTime stores the number of ticks since 0001-01-01T00:00:00 and,
    optionally, the UTC offset it was constructed or parsed with. The
    offset only decides how the instant is presented: the calendar
    accessors (year, hour, ...) read the wall clock at that offset, while
    equality, ordering and hashing compare the instant alone.

    A DateTime without offset is read as-is (UTC or an unspecified local
    time, at the caller's discretion).

    Attributes:
        total_ticks: Ticks of the instant since 0001-01-01.
        offset: The presentation UTC offset, or None.
        year, month, day, hour, minute, second: Wall clock components.
        millisecond, microsecond, nanosecond: Sub-second components.

    Examples:
        >>> dt = DateTime.from_date_and_time(2012, 2, 29, 15, 34, 20, 33.0)
        >>> dt.day_of_week
        <DayOfWeek.WEDNESDAY: 2>
        >>> dt.to_string(DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY)
        'Wed 2012-02-29 15:34:20.033'

        >>> dt = DateTime.from_iso_string("2016-08-29T21:32:31.125+02:00")
        >>> dt.hour, dt.to_utc().hour
        (21, 19)
        >>> dt.to_iso_string()
        '2016-08-29T21:32:31.125+02:00'
    """

    __slots__ = ("_ticks", "_offset")

    def __init__(self, ticks: int = 0, offset: TimeSpan | None = None) -> None:
        """Create a DateTime from a raw tick count.

        ``DateTime()`` is the null value 0001-01-01T00:00:00.

        Args:
            ticks: Ticks of the instant since 0001-01-01.
            offset: Optional presentation UTC offset.

        Raises:
            TypeError: If ticks is not an integer.
            TickOverflowError: If the instant or its wall clock reading lies
                outside 0001-01-01 .. 9999-12-31T23:59:59.9999999.
            OutOfRangeError: If the offset is 24 hours or more.
        """
        if isinstance(ticks, bool) or not isinstance(ticks, int):
            raise TypeError(f"ticks must be an integer, got {type(ticks).__name__}")
        check_ticks(ticks, 0, MAX_DATETIME_TICKS, "DateTime")
        if offset is not None:
            validate_offset(offset.total_ticks)
            check_ticks(ticks + offset.total_ticks, 0, MAX_DATETIME_TICKS, "local DateTime")
        self._ticks: int = ticks
        self._offset: TimeSpan | None = offset

    @classmethod
    def _from_wall_ticks(cls, wall_ticks: int, offset: TimeSpan | None) -> DateTime:
        """Create a DateTime from the wall clock ticks read at ``offset``."""
        check_ticks(wall_ticks, 0, MAX_DATETIME_TICKS, "DateTime")
        if offset is None:
            return cls(wall_ticks)
        return cls(wall_ticks - offset.total_ticks, offset)

    # Factories

    @classmethod
    def from_date(
        cls,
        year: int,
        month: int,
        day: int,
        *,
        offset: TimeSpan | None = None,
    ) -> DateTime:
        """Create a DateTime at midnight of the given date.

        Raises:
            OutOfRangeError: If the date is invalid (year 0, month 15, ...).

        Examples:
            >>> DateTime.from_date(2500, 2, 1).to_string()
            '2500-02-01 00:00:00'
        """
        return cls.from_components(year, month, day, offset=offset)

    @classmethod
    def from_time(
        cls,
        hour: int,
        minute: int = 0,
        second: int = 0,
        millisecond: int | float = 0,
    ) -> DateTime:
        """Create a DateTime holding only a time of day (on 0001-01-01)."""
        sub_second_ticks = ticks_from_number(millisecond, TICKS_PER_MILLISECOND)
        return cls(_time_of_day_ticks(hour, minute, second, sub_second_ticks))

    @classmethod
    def from_date_and_time(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int | float = 0,
        *,
        offset: TimeSpan | None = None,
    ) -> DateTime:
        """Create a DateTime from calendar and clock components.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: Milliseconds within the second, [0, 1000). Rounded
                to the nearest 100 ns.
            offset: Optional UTC offset the components are expressed in.

        Raises:
            OutOfRangeError: If any component is out of range.

        Examples:
            >>> DateTime.from_date_and_time(2013, 2, 29)
            Traceback (most recent call last):
            ...
            OutOfRangeError: day must be between 1 and 28 for 2013-02, got 29
        """
        sub_second_ticks = ticks_from_number(millisecond, TICKS_PER_MILLISECOND)
        return cls.from_components(
            year, month, day, hour, minute, second, sub_second_ticks, offset=offset
        )

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        sub_second_ticks: int = 0,
        *,
        offset: TimeSpan | None = None,
    ) -> DateTime:
        """Create a DateTime from components with an exact sub-second tick count.

        This is the exact counterpart of from_date_and_time() used by the
        parsers: the sub-second part is given in ticks instead of
        floating-point milliseconds.

        Raises:
            OutOfRangeError: If any component is out of range.
        """
        validate_date(year, month, day)
        time_ticks = _time_of_day_ticks(hour, minute, second, sub_second_ticks)
        wall_ticks = epoch_day_count(year, month, day) * TICKS_PER_DAY + time_ticks
        return cls._from_wall_ticks(wall_ticks, offset)

    @classmethod
    def from_timestamp(cls, timestamp: int | float, clock: Clock | None = None) -> DateTime:
        """Create a local DateTime from a Unix timestamp.

        The result carries the clock's current local UTC offset, a fixed
        snapshot that is not adjusted for the offset in effect at the
        timestamp itself. A zero timestamp yields the null DateTime.

        Args:
            timestamp: Seconds since 1970-01-01T00:00:00 UTC.
            clock: Clock queried for the local offset (system clock if None).
        """
        if timestamp == 0:
            return cls()
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return cls(ticks_from_unix_seconds(timestamp), clock.local_offset())

    @classmethod
    def from_timestamp_gmt(cls, timestamp: int | float) -> DateTime:
        """Create a DateTime (without offset) from a Unix timestamp.

        Examples:
            >>> DateTime.from_timestamp_gmt(1453840331).to_string(
            ...     DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY)
            'Tue 2016-01-26 20:32:11'
        """
        return cls(ticks_from_unix_seconds(timestamp))

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current local time (whole seconds) with its offset."""
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return cls(clock.utc_ticks(), clock.local_offset())

    @classmethod
    def exact_now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current local time from the most precise clock."""
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return cls(clock.exact_utc_ticks(), clock.local_offset())

    @classmethod
    def utc_now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current UTC time (whole seconds) without offset."""
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return cls(clock.utc_ticks())

    @classmethod
    def exact_utc_now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current UTC time from the most precise clock."""
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return cls(clock.exact_utc_ticks())

    @classmethod
    def unix_epoch_start(cls) -> DateTime:
        """Return 1970-01-01T00:00:00."""
        return cls(UNIX_EPOCH_TICKS)

    @classmethod
    def eternity(cls) -> DateTime:
        """Return the latest representable DateTime, 9999-12-31T23:59:59.9999999."""
        return cls(MAX_DATETIME_TICKS)

    @classmethod
    def from_string(cls, text: str) -> DateTime:
        """Parse ``YYYY-MM-DD[ HH:MM[:SS[.fff]]]``.

        An abbreviated or full weekday prefix and a trailing UTC offset
        are accepted as well, so every to_string() layout with a date
        parses back.

        Raises:
            InvalidFormatError: If the text does not match the grammar.
            OutOfRangeError: If a component is out of range.
        """
        from chronoutils.format.datetime_text import parse_datetime

        return parse_datetime(text)

    @classmethod
    def from_iso_string(cls, text: str) -> DateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fffffffff][Z|+HH:MM]``.

        The offset, when present, is kept for presentation; use
        ``parse_iso8601()`` to also learn whether one was present.

        Raises:
            InvalidFormatError: If the text does not match the grammar.
            OutOfRangeError: If a component is out of range.
        """
        from chronoutils.format.iso8601 import parse_iso8601

        return parse_iso8601(text)[0]

    # Instant and offset

    @property
    def total_ticks(self) -> int:
        """Return the ticks of the instant since 0001-01-01."""
        return self._ticks

    @property
    def offset(self) -> TimeSpan | None:
        """Return the presentation UTC offset, or None."""
        return self._offset

    @property
    def utc_offset(self) -> TimeSpan:
        """Return the presentation UTC offset (zero if none is set)."""
        return self._offset if self._offset is not None else TimeSpan()

    @property
    def is_local(self) -> bool:
        """Return True if the DateTime carries a UTC offset."""
        return self._offset is not None

    @property
    def _wall_ticks(self) -> int:
        if self._offset is None:
            return self._ticks
        return self._ticks + self._offset.total_ticks

    @property
    def is_null(self) -> bool:
        """Return True for the null DateTime (tick 0)."""
        return self._ticks == 0

    @property
    def is_eternity(self) -> bool:
        """Return True for DateTime.eternity()."""
        return self._ticks == MAX_DATETIME_TICKS

    # Properties - date components

    def _date(self) -> tuple[int, int, int]:
        return date_from_epoch_day_count(self._wall_ticks // TICKS_PER_DAY)

    @property
    def year(self) -> int:
        """Return the year component (1-9999)."""
        return self._date()[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._date()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._date()[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the weekday."""
        return day_of_week(self._wall_ticks // TICKS_PER_DAY)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day of the year."""
        return day_of_year(*self._date())

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year of this DateTime is a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in the month of this DateTime."""
        year, month, _ = self._date()
        return days_in_month(year, month)

    # Properties - time components

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._wall_ticks % TICKS_PER_DAY // TICKS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._wall_ticks % TICKS_PER_HOUR // TICKS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._wall_ticks % TICKS_PER_MINUTE // TICKS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second (0-999)."""
        return self._wall_ticks % TICKS_PER_SECOND // TICKS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond within the millisecond (0-999)."""
        return self._wall_ticks % TICKS_PER_MILLISECOND // TICKS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the microsecond (0-900, step 100)."""
        return self._wall_ticks % TICKS_PER_MICROSECOND * NANOSECONDS_PER_TICK

    @property
    def time_of_day(self) -> TimeSpan:
        """Return the time elapsed since midnight."""
        return TimeSpan(self._wall_ticks % TICKS_PER_DAY)

    @property
    def date(self) -> DateTime:
        """Return midnight of the same day, keeping the offset."""
        wall_ticks = self._wall_ticks
        return DateTime._from_wall_ticks(wall_ticks - wall_ticks % TICKS_PER_DAY, self._offset)

    def is_same_day(self, other: DateTime) -> bool:
        """Return True if both wall clock readings fall on the same date."""
        return self._wall_ticks // TICKS_PER_DAY == other._wall_ticks // TICKS_PER_DAY

    # Offset handling

    def to_utc(self) -> DateTime:
        """Return the same instant without presentation offset."""
        return DateTime(self._ticks)

    def with_offset(self, offset: TimeSpan | None) -> DateTime:
        """Return the same instant presented at another UTC offset.

        Examples:
            >>> dt = DateTime.from_iso_string("2016-08-29T21:32:31+02:00")
            >>> dt.with_offset(TimeSpan.from_hours(-4)).hour
            15
        """
        return DateTime(self._ticks, offset)

    def to_local(self, clock: Clock | None = None) -> DateTime:
        """Return the same instant presented at the clock's local offset."""
        from chronoutils.clock import default_clock

        clock = clock if clock is not None else default_clock()
        return self.with_offset(clock.local_offset())

    def to_timestamp(self) -> int:
        """Return the Unix timestamp in whole seconds."""
        return unix_seconds_from_ticks(self._ticks)

    # Formatting

    def to_string(
        self,
        format: DateTimeOutputFormat = DateTimeOutputFormat.DATE_AND_TIME,
        fraction: bool = True,
        include_offset: bool | None = None,
    ) -> str:
        """Return the wall clock reading as text.

        Args:
            format: Layout, e.g. DATE_AND_TIME ("2012-02-29 15:34:20.033")
                or DATE_TIME_AND_SHORT_WEEKDAY ("Wed 2012-02-29 15:34:20.033").
            fraction: Write the sub-second part when it is non-zero.
            include_offset: Append the UTC offset. By default it is written
                whenever the DateTime has one, so from_string() reads the
                text back to the same instant. Pass False for the bare
                wall clock reading.
        """
        from chronoutils.format.datetime_text import format_datetime

        return format_datetime(
            self, format, fraction=fraction, include_offset=include_offset
        )

    def to_iso_string(self, offset: TimeSpan | None = None) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS[.fffffff][Z|+HH:MM]``.

        Args:
            offset: Present the instant at this offset instead of the
                carried one. Without any offset no suffix is written.
        """
        from chronoutils.format.iso8601 import format_iso8601

        return format_iso8601(self, offset)

    # Arithmetic operators

    @overload
    def __add__(self, other: TimeSpan) -> DateTime: ...

    @overload
    def __add__(self, other: Period) -> DateTime: ...

    def __add__(self, other: object) -> DateTime:
        """Add a TimeSpan (pure tick addition) or a Period (calendar-aware).

        Raises:
            TickOverflowError: If the result leaves the representable range.

        Examples:
            >>> dt = DateTime.from_date_and_time(1999, 1, 5, 4, 16)
            >>> (dt + TimeSpan.from_days(2)).day
            7
        """
        from chronoutils.core.period import Period

        if isinstance(other, TimeSpan):
            return DateTime(self._ticks + other.total_ticks, self._offset)
        if isinstance(other, Period):
            from chronoutils.arithmetic.period_ops import add_period_to_datetime

            return add_period_to_datetime(self, other)
        return NotImplemented

    def __radd__(self, other: object) -> DateTime:
        """Support TimeSpan + DateTime and Period + DateTime."""
        return self.__add__(other)

    @overload
    def __sub__(self, other: TimeSpan) -> DateTime: ...

    @overload
    def __sub__(self, other: Period) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> TimeSpan: ...

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        """Subtract a TimeSpan or Period, or compute the span between instants.

        Examples:
            >>> a = DateTime.from_date(2000, 1, 2)
            >>> b = DateTime.from_date(2000, 1, 1)
            >>> (a - b).total_hours
            24.0
        """
        from chronoutils.core.period import Period

        if isinstance(other, DateTime):
            return TimeSpan(self._ticks - other._ticks)
        if isinstance(other, TimeSpan):
            return DateTime(self._ticks - other.total_ticks, self._offset)
        if isinstance(other, Period):
            from chronoutils.arithmetic.period_ops import subtract_period_from_datetime

            return subtract_period_from_datetime(self, other)
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Check whether two DateTimes denote the same instant.

        The presentation offset is not compared.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        """Return a hash of the instant."""
        return hash(self._ticks)

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        year, month, day = self._date()
        offset_part = ""
        if self._offset is not None:
            offset_part = f", offset={self._offset!r}"
        return (
            f"DateTime.from_components({year}, {month}, {day}, {self.hour}, "
            f"{self.minute}, {self.second}, {self._wall_ticks % TICKS_PER_SECOND}"
            f"{offset_part})"
        )

    def __str__(self) -> str:
        """Return the DATE_AND_TIME text form."""
        return self.to_string()

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
