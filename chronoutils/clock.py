"""Clock collaborators for chronoutils.

The value types never read the system clock on their own. Operations
such as ``DateTime.now()`` take a ``clock`` argument and query it for the
current tick count and the local UTC offset. ``SystemClock`` reads the
real wall clock; ``FixedClock`` returns preset values so tests can pin
"now" to a known instant.

All tick counts are measured in 100 nanosecond units since
0001-01-01T00:00:00 UTC.
"""

from __future__ import annotations

import logging
import time

from chronoutils._internal.constants import (
    NANOSECONDS_PER_TICK,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
)
from chronoutils.core.timespan import TimeSpan

logger = logging.getLogger(__name__)


class Clock:
    """Accessor for the current time.

    Subclasses implement ``utc_ticks``, ``exact_utc_ticks`` and
    ``local_offset``; the local variants are derived from those.
    Implementations return an independent snapshot per call and may be
    queried from several threads without coordination.
    """

    def utc_ticks(self) -> int:
        """Return the current UTC tick count from a coarse clock."""
        raise NotImplementedError("No clock implementation selected")

    def exact_utc_ticks(self) -> int:
        """Return the current UTC tick count from the most precise clock."""
        raise NotImplementedError("No clock implementation selected")

    def local_offset(self) -> TimeSpan:
        """Return the current offset of local time from UTC."""
        raise NotImplementedError("No clock implementation selected")

    def local_ticks(self) -> int:
        """Return the current local tick count from a coarse clock."""
        return self.utc_ticks() + self.local_offset().total_ticks

    def exact_local_ticks(self) -> int:
        """Return the current local tick count from the most precise clock."""
        return self.exact_utc_ticks() + self.local_offset().total_ticks


class SystemClock(Clock):
    """The operating system wall clock.

    The coarse clock has a resolution of one second; the exact clock uses
    ``time.time_ns()``. The local offset is a snapshot of the offset in
    effect right now, which is an approximation around daylight saving
    transitions.

    Examples:
        >>> clock = SystemClock()
        >>> abs(clock.utc_ticks() - clock.exact_utc_ticks()) < 2 * 10_000_000
        True
    """

    def utc_ticks(self) -> int:
        return UNIX_EPOCH_TICKS + int(time.time()) * TICKS_PER_SECOND

    def exact_utc_ticks(self) -> int:
        return UNIX_EPOCH_TICKS + time.time_ns() // NANOSECONDS_PER_TICK

    def local_offset(self) -> TimeSpan:
        offset_seconds = time.localtime().tm_gmtoff
        logger.debug("local UTC offset snapshot: %+d s", offset_seconds)
        return TimeSpan(offset_seconds * TICKS_PER_SECOND)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """A clock frozen at a given instant.

    Args:
        utc_ticks: The UTC tick count every query returns.
        offset: The local UTC offset (defaults to zero).

    Examples:
        >>> clock = FixedClock(UNIX_EPOCH_TICKS, TimeSpan.from_hours(2))
        >>> clock.local_ticks() - clock.utc_ticks()
        72000000000
    """

    __slots__ = ("_ticks", "_offset")

    def __init__(self, utc_ticks: int, offset: TimeSpan | None = None) -> None:
        self._ticks: int = utc_ticks
        self._offset: TimeSpan = offset if offset is not None else TimeSpan()

    def utc_ticks(self) -> int:
        return self._ticks

    def exact_utc_ticks(self) -> int:
        return self._ticks

    def local_offset(self) -> TimeSpan:
        return self._offset

    def __repr__(self) -> str:
        return f"FixedClock(utc_ticks={self._ticks}, offset={self._offset!r})"


def default_clock() -> Clock:
    """Return the clock used when no clock is passed explicitly."""
    return SystemClock()


__all__ = ["Clock", "SystemClock", "FixedClock", "default_clock"]
