"""Generic DateTime text codec.

The generic layout is ``YYYY-MM-DD HH:MM:SS[.fffffff]``, optionally
preceded by a weekday name and followed by a UTC offset. The parser
accepts everything ``format_datetime`` writes for layouts with a date,
plus a ``T`` separator and a time without seconds.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chronoutils._internal.constants import TICKS_PER_SECOND
from chronoutils._internal.ticks import (
    format_decimal_fraction,
    format_fraction,
    fraction_to_ticks,
)
from chronoutils.errors import InvalidFormatError
from chronoutils.format.offset import OFFSET_REGEX, format_offset, parse_offset
from chronoutils.units.dayofweek import DayOfWeek
from chronoutils.units.outputformat import DateTimeOutputFormat

if TYPE_CHECKING:
    from chronoutils.core.datetime import DateTime

logger = logging.getLogger(__name__)

_DATETIME_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]+)\s+)?"
    r"(?P<year>\d{1,4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ Tt](?P<hour>\d{1,2}):(?P<minute>\d{1,2})"
    r"(?::(?P<second>\d{1,2})(?:\.(?P<fraction>\d+))?)?"
    rf"\s*(?P<offset>{OFFSET_REGEX})?)?$"
)


def parse_datetime(text: str) -> DateTime:
    """Parse generic DateTime text.

    Args:
        text: e.g. ``"2012-02-29 15:34:20.033"`` or
            ``"Wed 2012-02-29 15:34:20.033+02:00"``.

    Returns:
        The parsed DateTime. It carries an offset only if the text had one.

    Raises:
        InvalidFormatError: If the text does not match, or the weekday
            prefix is unknown or does not match the date.
        OutOfRangeError: If a component is out of range.

    Examples:
        >>> parse_datetime("2012-02-29 15:34:20.033").millisecond
        33
        >>> parse_datetime("#")
        Traceback (most recent call last):
        ...
        InvalidFormatError: Invalid date and time: '#'
    """
    from chronoutils.core.datetime import DateTime

    match = _DATETIME_PATTERN.match(text.strip())
    if match is None:
        logger.debug("rejecting date and time text %r", text)
        raise InvalidFormatError(f"Invalid date and time: {text!r}")

    groups = match.groupdict()
    offset = parse_offset(groups["offset"]) if groups["offset"] else None
    result = DateTime.from_components(
        int(groups["year"]),
        int(groups["month"]),
        int(groups["day"]),
        int(groups["hour"] or 0),
        int(groups["minute"] or 0),
        int(groups["second"] or 0),
        fraction_to_ticks(groups["fraction"] or "", TICKS_PER_SECOND),
        offset=offset,
    )

    if groups["weekday"]:
        try:
            weekday = DayOfWeek.from_name(groups["weekday"])
        except ValueError as e:
            raise InvalidFormatError(f"Invalid weekday in {text!r}") from e
        if weekday is not result.day_of_week:
            raise InvalidFormatError(
                f"{weekday.full_name} does not match the date in {text!r}"
            )
    return result


def format_datetime(
    dt: DateTime,
    format: DateTimeOutputFormat = DateTimeOutputFormat.DATE_AND_TIME,
    *,
    fraction: bool = True,
    include_offset: bool | None = None,
) -> str:
    """Format the wall clock reading of a DateTime.

    Args:
        dt: The DateTime to format.
        format: The layout.
        fraction: Write the sub-second part when it is non-zero.
        include_offset: Append the offset suffix when the layout has a time
            part. ``None`` appends it whenever ``dt`` has an offset, so the
            text parses back to the same instant. ``False`` writes the bare
            wall clock reading.

    Returns:
        The formatted text.

    Examples:
        >>> from chronoutils import DateTime
        >>> dt = DateTime.from_date_and_time(2012, 2, 29, 15, 34, 20, 33.0)
        >>> format_datetime(dt, DateTimeOutputFormat.DATE_TIME_AND_WEEKDAY)
        'Wednesday 2012-02-29 15:34:20.033'
        >>> format_datetime(dt, DateTimeOutputFormat.TIME_ONLY, fraction=False)
        '15:34:20'
    """
    parts = []
    if format.has_weekday:
        abbreviated = format is DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY
        parts.append(dt.day_of_week.to_string(abbreviated=abbreviated))
    if format.has_date:
        parts.append(f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}")
    if format.has_time:
        time_text = f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        sub_second = dt.time_of_day.total_ticks % TICKS_PER_SECOND
        if fraction and format is DateTimeOutputFormat.ISO:
            time_text += format_decimal_fraction(sub_second)
        elif fraction:
            time_text += format_fraction(sub_second)
        if include_offset is not False and dt.is_local:
            time_text += format_offset(dt.utc_offset)
        parts.append(time_text)

    separator = "T" if format is DateTimeOutputFormat.ISO else " "
    return separator.join(parts)


__all__ = ["parse_datetime", "format_datetime"]
