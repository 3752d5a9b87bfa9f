"""Output format selectors for the text codecs."""

from __future__ import annotations

from enum import Enum


class DateTimeOutputFormat(Enum):
    """Layout used by DateTime.to_string().

    Examples:
        DATE_AND_TIME                "2012-02-29 15:34:20.033"
        DATE_ONLY                    "2012-02-29"
        TIME_ONLY                    "15:34:20.033"
        DATE_TIME_AND_WEEKDAY        "Wednesday 2012-02-29 15:34:20.033"
        DATE_TIME_AND_SHORT_WEEKDAY  "Wed 2012-02-29 15:34:20.033"
        ISO                          "2012-02-29T15:34:20.033"
    """

    DATE_AND_TIME = "date_and_time"
    DATE_ONLY = "date_only"
    TIME_ONLY = "time_only"
    DATE_TIME_AND_WEEKDAY = "date_time_and_weekday"
    DATE_TIME_AND_SHORT_WEEKDAY = "date_time_and_short_weekday"
    ISO = "iso"

    @property
    def has_date(self) -> bool:
        """Return True if the layout writes the calendar date."""
        return self is not DateTimeOutputFormat.TIME_ONLY

    @property
    def has_time(self) -> bool:
        """Return True if the layout writes the time of day."""
        return self is not DateTimeOutputFormat.DATE_ONLY

    @property
    def has_weekday(self) -> bool:
        """Return True if the layout starts with a weekday name."""
        return self in (
            DateTimeOutputFormat.DATE_TIME_AND_WEEKDAY,
            DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY,
        )


class TimeSpanOutputFormat(Enum):
    """Layout used by TimeSpan.to_string().

    Examples:
        NORMAL         "82:53:02.500"
        WITH_MEASURES  "3 d 10 h 53 min 2 s 500 ms"
        TOTAL_SECONDS  "298382.5"
    """

    NORMAL = "normal"
    WITH_MEASURES = "with_measures"
    TOTAL_SECONDS = "total_seconds"


__all__ = ["DateTimeOutputFormat", "TimeSpanOutputFormat"]
