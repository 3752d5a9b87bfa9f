"""ISO 8601 DateTime codec.

Supported layout: ``YYYY-MM-DDTHH:MM:SS[.fffffffff][Z|+HH:MM]``. A date
alone and a time without seconds are accepted as well. Fraction digits
beyond the seventh (below one tick) are dropped.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chronoutils._internal.constants import TICKS_PER_SECOND
from chronoutils._internal.ticks import fraction_to_ticks
from chronoutils.core.timespan import TimeSpan
from chronoutils.errors import InvalidFormatError
from chronoutils.format.datetime_text import format_datetime
from chronoutils.format.offset import OFFSET_REGEX, parse_offset
from chronoutils.units.outputformat import DateTimeOutputFormat

if TYPE_CHECKING:
    from chronoutils.core.datetime import DateTime

logger = logging.getLogger(__name__)

_ISO_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"(?:[Tt](\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d+))?)?"
    rf"({OFFSET_REGEX})?)?$"
)


def parse_iso8601(text: str) -> tuple[DateTime, bool]:
    """Parse ISO 8601 text.

    Args:
        text: e.g. ``"2016-08-29T21:32:31.125+02:00"``.

    Returns:
        Tuple of (DateTime, has_offset). When the text carries an offset
        the DateTime keeps it for presentation, so its accessors read the
        wall clock written in the text.

    Raises:
        InvalidFormatError: If the text does not match the layout.
        OutOfRangeError: If a component is out of range.

    Examples:
        >>> dt, has_offset = parse_iso8601("2017-08-23T19:40:15.985077682+02:00")
        >>> has_offset, dt.second, dt.millisecond, dt.microsecond, dt.nanosecond
        (True, 15, 985, 77, 600)
    """
    from chronoutils.core.datetime import DateTime

    match = _ISO_PATTERN.match(text.strip())
    if match is None:
        logger.debug("rejecting ISO 8601 text %r", text)
        raise InvalidFormatError(f"Invalid ISO 8601 format: {text!r}")

    year, month, day, hour, minute, second, fraction, offset_text = match.groups()
    offset = parse_offset(offset_text) if offset_text else None
    result = DateTime.from_components(
        int(year),
        int(month),
        int(day),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        fraction_to_ticks(fraction or "", TICKS_PER_SECOND),
        offset=offset,
    )
    return result, offset is not None


def format_iso8601(dt: DateTime, offset: TimeSpan | None = None) -> str:
    """Format a DateTime as ISO 8601.

    Args:
        dt: The DateTime to format.
        offset: Present the instant at this offset instead of the one
            ``dt`` carries. Without any offset no suffix is written.

    Returns:
        ISO 8601 text with a fraction only when it is non-zero.

    Examples:
        >>> from chronoutils import DateTime
        >>> format_iso8601(DateTime.from_date_and_time(2016, 8, 29, 19, 32, 31, 125),
        ...                TimeSpan.from_hours(2))
        '2016-08-29T21:32:31.125+02:00'
    """
    if offset is not None:
        dt = dt.with_offset(offset)
    return format_datetime(dt, DateTimeOutputFormat.ISO, include_offset=True)


__all__ = ["parse_iso8601", "format_iso8601"]
