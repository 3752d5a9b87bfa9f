"""chronoutils exception hierarchy.

All chronoutils-specific exceptions inherit from ChronoError. Every
validation and parsing failure is a ConversionError; its ``kind`` tells
out-of-range components apart from text that matches no grammar.
"""

from __future__ import annotations

from enum import Enum


class ConversionErrorKind(Enum):
    """Reason attached to a ConversionError."""

    OUT_OF_RANGE = "out of range"
    INVALID_FORMAT = "invalid format"


class ChronoError(Exception):
    """Base exception for all chronoutils errors."""

    pass


class ConversionError(ChronoError):
    """A value could not be converted into a DateTime, TimeSpan or Period.

    Raised eagerly at construction or parse time, so no partially
    constructed value is ever observable.

    Attributes:
        kind: Why the conversion failed.
    """

    default_kind: ConversionErrorKind = ConversionErrorKind.INVALID_FORMAT

    def __init__(
        self,
        message: str,
        kind: ConversionErrorKind | None = None,
    ) -> None:
        super().__init__(message)
        self.kind: ConversionErrorKind = kind if kind is not None else self.default_kind

    @property
    def message(self) -> str:
        """Return the human-readable message."""
        return str(self.args[0]) if self.args else ""


class OutOfRangeError(ConversionError):
    """A numeric component violates a calendar or time constraint.

    Examples:
        - Month value outside 1-12
        - Day value beyond the length of the month (Feb 29 in 2013)
        - Hour outside 0-23, minute or second outside 0-59
        - Sub-second part of 1000 ms or more
        - Year 0 (there is no year zero in this calendar)
    """

    default_kind = ConversionErrorKind.OUT_OF_RANGE


class InvalidFormatError(ConversionError):
    """Text does not match any accepted grammar for the target type.

    Examples:
        - "#" given to DateTime.from_string()
        - "2:34a:53:32.5" given to TimeSpan.from_string()
        - An extra colon-separated field
    """

    default_kind = ConversionErrorKind.INVALID_FORMAT


class TickOverflowError(OutOfRangeError):
    """Arithmetic or conversion left the representable tick range.

    Examples:
        - Adding a TimeSpan that moves a DateTime past 9999-12-31
        - TimeSpan.from_days(1e20)
    """

    pass


__all__ = [
    "ConversionErrorKind",
    "ChronoError",
    "ConversionError",
    "OutOfRangeError",
    "InvalidFormatError",
    "TickOverflowError",
]
