"""Text codecs for DateTime and TimeSpan.

Functions:
    parse_datetime: Parse generic text such as "Wed 2012-02-29 15:34:20.033".
    format_datetime: Format a DateTime in one of the DateTimeOutputFormat layouts.
    parse_iso8601: Parse ISO 8601 text, reporting whether it had an offset.
    format_iso8601: Format a DateTime as ISO 8601.
    parse_timespan: Parse "[-][[D:]H:]M:S[.f]" text.
    format_timespan: Format a TimeSpan in one of the TimeSpanOutputFormat layouts.
    parse_offset, format_offset: UTC offset suffix ("Z", "+02:00").

Examples:
    >>> from chronoutils.format import parse_iso8601, format_iso8601
    >>> dt, has_offset = parse_iso8601("2016-08-29T21:32:31.125+02:00")
    >>> format_iso8601(dt)
    '2016-08-29T21:32:31.125+02:00'
"""

from __future__ import annotations

from chronoutils.format.datetime_text import format_datetime, parse_datetime
from chronoutils.format.iso8601 import format_iso8601, parse_iso8601
from chronoutils.format.offset import format_offset, parse_offset
from chronoutils.format.timespan_text import format_timespan, parse_timespan

__all__: list[str] = [
    # Generic text
    "parse_datetime",
    "format_datetime",
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    # Time spans
    "parse_timespan",
    "format_timespan",
    # Offsets
    "parse_offset",
    "format_offset",
]
