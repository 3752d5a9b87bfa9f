"""TimeSpan text codec.

Text form: an optional sign followed by up to four colon-separated
decimal fields read from the right as seconds, minutes, hours and days.
Each field may carry a fraction, so ``"5:30"`` is five and a half
minutes and ``"2:34:53:2.5"`` is 2 days, 34 hours, 53 minutes and 2.5
seconds. A bare number of seconds may use an exponent, as in ``"1e3"``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chronoutils._internal.constants import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from chronoutils._internal.ticks import (
    decimal_to_ticks,
    format_decimal_fraction,
    format_fraction,
    split_sub_second,
)
from chronoutils.errors import InvalidFormatError
from chronoutils.units.outputformat import TimeSpanOutputFormat

if TYPE_CHECKING:
    from chronoutils.core.timespan import TimeSpan

logger = logging.getLogger(__name__)

_FIELD_PATTERN = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")

# A lone seconds field may also carry an exponent, e.g. "1.5e-3"
_SECONDS_PATTERN = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

# Ticks per field, rightmost field first
_FIELD_FACTORS = (TICKS_PER_SECOND, TICKS_PER_MINUTE, TICKS_PER_HOUR, TICKS_PER_DAY)


def parse_timespan(text: str) -> TimeSpan:
    """Parse TimeSpan text.

    Args:
        text: e.g. ``"7:5:30"``, ``"-1:30"`` or ``"15.985077682"``.

    Returns:
        The parsed TimeSpan. An empty or blank string yields zero.

    Raises:
        InvalidFormatError: If a field is not a decimal number or there
            are more than four fields.
        TickOverflowError: If the total does not fit into a TimeSpan.

    Examples:
        >>> parse_timespan("7:5:30").to_string()
        '07:05:30'
        >>> parse_timespan("2:34a:53:32.5")
        Traceback (most recent call last):
        ...
        InvalidFormatError: Invalid time span field '34a' in '2:34a:53:32.5'
    """
    from chronoutils.core.timespan import TimeSpan

    body = text.strip()
    if not body:
        return TimeSpan()

    negative = body[0] == "-"
    if body[0] in "+-":
        body = body[1:]

    fields = body.split(":")
    if len(fields) > len(_FIELD_FACTORS):
        logger.debug("rejecting time span text %r", text)
        raise InvalidFormatError(
            f"Invalid time span {text!r}: at most {len(_FIELD_FACTORS)} fields allowed"
        )

    pattern = _SECONDS_PATTERN if len(fields) == 1 else _FIELD_PATTERN
    ticks = 0
    for field, factor in zip(reversed(fields), _FIELD_FACTORS):
        if not pattern.match(field):
            logger.debug("rejecting time span text %r", text)
            raise InvalidFormatError(f"Invalid time span field {field!r} in {text!r}")
        ticks += decimal_to_ticks(field, factor)

    return TimeSpan(-ticks if negative else ticks)


def _with_measures(ticks: int, full_seconds: bool) -> str:
    if ticks == 0:
        return "0 s"
    sign = "-" if ticks < 0 else ""
    magnitude = abs(ticks)

    if not full_seconds and magnitude < TICKS_PER_MILLISECOND:
        return f"{sign}{magnitude / TICKS_PER_MICROSECOND:.2g} µs"

    days, rest = divmod(magnitude, TICKS_PER_DAY)
    hours, rest = divmod(rest, TICKS_PER_HOUR)
    minutes, rest = divmod(rest, TICKS_PER_MINUTE)
    seconds, rest = divmod(rest, TICKS_PER_SECOND)
    units = [(days, "d"), (hours, "h"), (minutes, "min"), (seconds, "s")]
    if not full_seconds:
        milliseconds, microseconds, nanoseconds = split_sub_second(rest)
        units += [(milliseconds, "ms"), (microseconds, "µs"), (nanoseconds, "ns")]

    text = " ".join(f"{value} {unit}" for value, unit in units if value)
    if not text:
        return "0 s"
    return sign + text


def format_timespan(
    span: TimeSpan,
    format: TimeSpanOutputFormat = TimeSpanOutputFormat.NORMAL,
    *,
    full_seconds: bool = False,
) -> str:
    """Format a TimeSpan.

    Args:
        span: The TimeSpan to format.
        format: NORMAL, WITH_MEASURES or TOTAL_SECONDS.
        full_seconds: Omit everything below one second.

    Returns:
        The formatted text.

    Examples:
        >>> from chronoutils import TimeSpan
        >>> span = TimeSpan.from_string("15.985077682")
        >>> format_timespan(span)
        '00:00:15.9850776'
        >>> format_timespan(span, TimeSpanOutputFormat.WITH_MEASURES)
        '15 s 985 ms 77 µs 600 ns'
        >>> format_timespan(span, TimeSpanOutputFormat.TOTAL_SECONDS)
        '15.9850776'
    """
    ticks = span.total_ticks
    if format is TimeSpanOutputFormat.WITH_MEASURES:
        return _with_measures(ticks, full_seconds)

    sign = "-" if ticks < 0 else ""
    magnitude = abs(ticks)
    whole_seconds, sub_second = divmod(magnitude, TICKS_PER_SECOND)

    if format is TimeSpanOutputFormat.TOTAL_SECONDS:
        if full_seconds or not sub_second:
            return f"{sign if whole_seconds else ''}{whole_seconds}"
        return f"{sign}{whole_seconds}{format_decimal_fraction(sub_second)}"

    hours, rest = divmod(whole_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if not full_seconds:
        text += format_fraction(sub_second)
    return text


__all__ = ["parse_timespan", "format_timespan"]
