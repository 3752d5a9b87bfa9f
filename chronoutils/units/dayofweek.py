"""DayOfWeek enumeration.

This module provides the DayOfWeek enum together with the fixed English
weekday names used by the text formats.
"""

from __future__ import annotations

from enum import Enum


class DayOfWeek(Enum):
    """Day of the week, Monday first.

    The values count from Monday = 0, which is also the weekday of the
    epoch day 0001-01-01 in the proleptic Gregorian calendar.

    Examples:
        >>> DayOfWeek.WEDNESDAY.abbreviation
        'Wed'
        >>> DayOfWeek.from_name("friday")
        <DayOfWeek.FRIDAY: 4>
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        """Return the English name, e.g. "Wednesday"."""
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        """Return the three-letter English abbreviation, e.g. "Wed"."""
        return self.full_name[:3]

    def to_string(self, abbreviated: bool = False) -> str:
        """Return the name used by the weekday output formats."""
        return self.abbreviation if abbreviated else self.full_name

    @classmethod
    def from_name(cls, name: str) -> DayOfWeek:
        """Look up a weekday by its full or abbreviated English name.

        The lookup ignores case.

        Raises:
            ValueError: If name is not a weekday name.
        """
        folded = name.lower()
        for day in cls:
            if folded in (day.full_name.lower(), day.abbreviation.lower()):
                return day
        raise ValueError(f"unknown weekday name: {name!r}")


__all__ = ["DayOfWeek"]
