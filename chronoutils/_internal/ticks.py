"""Tick arithmetic for chronoutils.

A tick is 100 nanoseconds. Every value type stores a plain integer tick
count; this module holds the checked conversions between tick counts and
the units callers think in. Conversions from floats round to the nearest
tick. Decimal text is converted exactly and digits finer than one tick
are dropped.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from chronoutils._internal.constants import (
    MAX_TICKS,
    MIN_TICKS,
    NANOSECONDS_PER_TICK,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
)
from chronoutils.errors import TickOverflowError


def check_ticks(
    ticks: int,
    low: int = MIN_TICKS,
    high: int = MAX_TICKS,
    what: str = "tick count",
) -> int:
    """Return ticks unchanged if it lies within [low, high].

    Args:
        ticks: The tick count to check.
        low: Smallest allowed value (inclusive).
        high: Largest allowed value (inclusive).
        what: Name of the value for the error message.

    Raises:
        TickOverflowError: If ticks is outside the range.
    """
    if ticks < low or ticks > high:
        raise TickOverflowError(
            f"{what} {ticks} is outside the representable range [{low}, {high}]"
        )
    return ticks


def ticks_from_number(value: int | float, factor: int) -> int:
    """Scale a number of units to ticks.

    Integers are scaled exactly. Floats are scaled and rounded to the
    nearest tick, so binary representation error does not cost a tick.

    Args:
        value: Number of units (e.g. 5.5 minutes).
        factor: Ticks per unit (e.g. TICKS_PER_MINUTE).

    Returns:
        The tick count.

    Raises:
        TickOverflowError: If value is not finite or the result does not
            fit into a signed 64-bit tick count.

    Examples:
        >>> ticks_from_number(5.5, TICKS_PER_SECOND)
        55000000
        >>> ticks_from_number(1.005, TICKS_PER_SECOND)
        10050000
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected int or float, got {type(value).__name__}")
    if isinstance(value, int):
        return check_ticks(value * factor)
    if not math.isfinite(value):
        raise TickOverflowError(f"cannot convert {value} to ticks")
    scaled = value * factor
    if scaled < MIN_TICKS or scaled > MAX_TICKS:
        raise TickOverflowError(
            f"{value} x {factor} ticks is outside the representable range"
        )
    return check_ticks(round(scaled))


def total(ticks: int, factor: int) -> float:
    """Return ticks expressed as a (fractional) number of units."""
    return ticks / factor


def fraction_to_ticks(digits: str, factor: int = TICKS_PER_SECOND) -> int:
    """Convert the digits after a decimal point into ticks.

    Digits below one tick are dropped.

    Args:
        digits: The decimal digits following the point, e.g. "985077682".
        factor: Ticks per whole unit the fraction belongs to.

    Returns:
        The tick count of the fraction.

    Examples:
        >>> fraction_to_ticks("985077682")
        9850776
        >>> fraction_to_ticks("5", TICKS_PER_MINUTE)
        300000000
    """
    if not digits:
        return 0
    return int(digits) * factor // 10 ** len(digits)


def decimal_to_ticks(text: str, factor: int) -> int:
    """Convert an unsigned decimal like "34", "2.5" or "1.5e-3" into ticks.

    The conversion is exact; digits below one tick are dropped. The caller
    is responsible for having matched the text against
    ``\\d*(\\.\\d*)?([eE][+-]?\\d+)?``.

    Raises:
        TickOverflowError: If the exponent pushes the value past the
            representable range.

    Examples:
        >>> decimal_to_ticks("2.5", TICKS_PER_SECOND)
        25000000
        >>> decimal_to_ticks("1.5e-3", TICKS_PER_SECOND)
        15000
    """
    mantissa, _, exponent = text.lower().partition("e")
    whole, _, digits = mantissa.partition(".")
    if not exponent:
        return int(whole or "0") * factor + fraction_to_ticks(digits, factor)

    value = int((whole or "0") + digits) * factor
    scale = int(exponent) - len(digits)
    if scale >= 0:
        if value and scale > len(str(MAX_TICKS)):
            raise TickOverflowError(f"{text} does not fit into a tick count")
        return value * 10**scale
    return value // 10**-scale


def split_sub_second(sub_second_ticks: int) -> tuple[int, int, int]:
    """Split ticks within a second into (milliseconds, microseconds, nanoseconds).

    Examples:
        >>> split_sub_second(9850776)
        (985, 77, 600)
    """
    milliseconds, rest = divmod(sub_second_ticks, TICKS_PER_MILLISECOND)
    microseconds, ticks = divmod(rest, TICKS_PER_MICROSECOND)
    return milliseconds, microseconds, ticks * NANOSECONDS_PER_TICK


def format_fraction(sub_second_ticks: int) -> str:
    """Format ticks within a second as a decimal fraction.

    The millisecond group is always three digits, the microsecond group is
    only written when it or the last tick digit is non-zero, and the last
    digit only when it is non-zero.

    Args:
        sub_second_ticks: Ticks within the second, in [0, TICKS_PER_SECOND).

    Returns:
        An empty string for whole seconds, else the fraction including the
        leading point.

    Examples:
        >>> format_fraction(0)
        ''
        >>> format_fraction(330000)
        '.033'
        >>> format_fraction(9850776)
        '.9850776'
    """
    milliseconds, microseconds, nanoseconds = split_sub_second(sub_second_ticks)
    if not (milliseconds or microseconds or nanoseconds):
        return ""
    result = f".{milliseconds:03d}"
    if microseconds or nanoseconds:
        result += f"{microseconds:03d}"
        if nanoseconds:
            result += str(nanoseconds // NANOSECONDS_PER_TICK)
    return result


def format_decimal_fraction(sub_second_ticks: int) -> str:
    """Format ticks within a second as the shortest exact decimal fraction.

    Up to seven digits are written and trailing zeros are stripped, so
    the text parses back to the same tick count.

    Examples:
        >>> format_decimal_fraction(0)
        ''
        >>> format_decimal_fraction(1000000)
        '.1'
        >>> format_decimal_fraction(9850776)
        '.9850776'
    """
    if not sub_second_ticks:
        return ""
    return f".{sub_second_ticks:07d}".rstrip("0")


def ticks_from_unix_seconds(seconds: int | float) -> int:
    """Convert Unix seconds into ticks since 0001-01-01."""
    return UNIX_EPOCH_TICKS + ticks_from_number(seconds, TICKS_PER_SECOND)


def unix_seconds_from_ticks(ticks: int) -> int:
    """Convert ticks since 0001-01-01 into whole Unix seconds (floor)."""
    return (ticks - UNIX_EPOCH_TICKS) // TICKS_PER_SECOND


__all__ = [
    "check_ticks",
    "ticks_from_number",
    "total",
    "fraction_to_ticks",
    "decimal_to_ticks",
    "split_sub_second",
    "format_fraction",
    "format_decimal_fraction",
    "ticks_from_unix_seconds",
    "unix_seconds_from_ticks",
]
