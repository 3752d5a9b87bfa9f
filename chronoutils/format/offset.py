"""UTC offset suffix codec.

Offsets are written as ``Z`` for zero and ``+HH:MM`` / ``-HH:MM``
otherwise. The parser also accepts ``+HHMM`` and ``+HH``. A zero offset
in any spelling, ``+00:00`` and ``-00:00`` included, is written back as
``Z``.
"""

from __future__ import annotations

import re

from chronoutils._internal.constants import TICKS_PER_HOUR, TICKS_PER_MINUTE
from chronoutils.core.timespan import TimeSpan
from chronoutils.errors import InvalidFormatError, OutOfRangeError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")

OFFSET_REGEX = r"[Zz]|[+-]\d{2}(?::?\d{2})?"


def parse_offset(text: str) -> TimeSpan:
    """Parse an offset suffix.

    Args:
        text: ``Z``, ``+HH:MM``, ``+HHMM`` or ``+HH`` (any sign).

    Returns:
        The offset as a TimeSpan.

    Raises:
        InvalidFormatError: If the text is not an offset.
        OutOfRangeError: If hours exceed 23 or minutes exceed 59.

    Examples:
        >>> parse_offset("+02:00") == TimeSpan.from_hours(2)
        True
        >>> parse_offset("Z")
        TimeSpan(ticks=0)
    """
    if text in ("Z", "z"):
        return TimeSpan()

    match = _OFFSET_PATTERN.match(text)
    if match is None:
        raise InvalidFormatError(f"Invalid UTC offset: {text!r}")

    sign, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0
    if hours > 23:
        raise OutOfRangeError(f"offset hours must be between 0 and 23, got {hours}")
    if minutes > 59:
        raise OutOfRangeError(f"offset minutes must be between 0 and 59, got {minutes}")

    ticks = hours * TICKS_PER_HOUR + minutes * TICKS_PER_MINUTE
    return TimeSpan(-ticks if sign == "-" else ticks)


def format_offset(offset: TimeSpan) -> str:
    """Format an offset as ``Z`` or ``+HH:MM``.

    Seconds within the offset are not written.

    Examples:
        >>> format_offset(TimeSpan.from_hours(-5.5))
        '-05:30'
        >>> format_offset(TimeSpan())
        'Z'
    """
    ticks = offset.total_ticks
    if ticks == 0:
        return "Z"
    sign = "-" if ticks < 0 else "+"
    hours, rest = divmod(abs(ticks), TICKS_PER_HOUR)
    return f"{sign}{hours:02d}:{rest // TICKS_PER_MINUTE:02d}"


__all__ = ["OFFSET_REGEX", "parse_offset", "format_offset"]
