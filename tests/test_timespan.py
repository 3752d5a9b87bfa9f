"""Tests for the TimeSpan class.

This module tests construction, component accessors, arithmetic and the
text forms of signed tick durations.
"""

import pytest

from chronoutils import (
    InvalidFormatError,
    TickOverflowError,
    TimeSpan,
    TimeSpanOutputFormat,
)
from chronoutils._internal.constants import MAX_TICKS, MIN_TICKS, TICKS_PER_SECOND


# =============================================================================
# Construction Tests
# =============================================================================


class TestTimeSpanConstruction:
    """Tests for TimeSpan construction."""

    def test_default_is_zero(self):
        """Test default construction creates a null span."""
        span = TimeSpan()
        assert span.total_ticks == 0
        assert span.is_null
        assert not span

    def test_from_ticks(self):
        """Test construction from a raw tick count."""
        assert TimeSpan.from_ticks(-42).total_ticks == -42

    def test_unit_factories(self):
        """Test every unit factory scales to ticks."""
        assert TimeSpan.from_days(1).total_ticks == 864_000_000_000
        assert TimeSpan.from_hours(1).total_ticks == 36_000_000_000
        assert TimeSpan.from_minutes(1).total_ticks == 600_000_000
        assert TimeSpan.from_seconds(1).total_ticks == 10_000_000
        assert TimeSpan.from_milliseconds(1).total_ticks == 10_000
        assert TimeSpan.from_microseconds(1).total_ticks == 10

    def test_fractional_factories(self):
        """Test fractional values are converted."""
        assert TimeSpan.from_minutes(5.5) == TimeSpan.from_seconds(330)
        assert TimeSpan.from_days(1.5).total_hours == 36.0

    def test_float_rounds_to_nearest_tick(self):
        """Test float arguments round to the nearest tick."""
        assert TimeSpan.from_microseconds(0.14).total_ticks == 1
        assert TimeSpan.from_microseconds(0.16).total_ticks == 2
        assert TimeSpan.from_microseconds(-0.14).total_ticks == -1
        assert TimeSpan.from_microseconds(-0.16).total_ticks == -2

    def test_float_representation_error_costs_no_tick(self):
        """Test a float just below an exact decimal keeps the decimal value."""
        assert TimeSpan.from_seconds(1.005).total_ticks == 10_050_000
        assert TimeSpan.from_milliseconds(0.3).total_ticks == 3000
        assert TimeSpan.from_seconds(1.005) == TimeSpan.from_string("1.005")
        assert (TimeSpan.from_seconds(1) * 1.005).total_ticks == 10_050_000

    def test_rejects_non_integer_ticks(self):
        """Test the raw constructor only takes integers."""
        with pytest.raises(TypeError):
            TimeSpan(1.5)
        with pytest.raises(TypeError):
            TimeSpan(True)

    def test_factory_overflow(self):
        """Test unrepresentable factory input raises TickOverflowError."""
        with pytest.raises(TickOverflowError):
            TimeSpan.from_days(1e20)
        with pytest.raises(TickOverflowError):
            TimeSpan.from_seconds(float("nan"))
        with pytest.raises(TickOverflowError):
            TimeSpan(MAX_TICKS + 1)

    def test_infinity(self):
        """Test the infinity sentinels."""
        assert TimeSpan.infinity().total_ticks == MAX_TICKS
        assert TimeSpan.negative_infinity().total_ticks == MIN_TICKS
        assert TimeSpan.infinity().is_infinity
        assert TimeSpan.negative_infinity().is_negative_infinity
        assert not TimeSpan().is_infinity


# =============================================================================
# Component Tests
# =============================================================================


class TestTimeSpanComponents:
    """Tests for component and total accessors."""

    def test_components_from_text(self):
        """Test components of 2 days, 34 hours, 53 minutes and 2.5 seconds."""
        span = TimeSpan.from_string("2:34:53:2.5")
        assert span.days == 3
        assert span.hours == 10
        assert span.minutes == 53
        assert span.seconds == 2
        assert span.milliseconds == 500
        assert span.microseconds == 0
        assert span.nanoseconds == 0

    def test_sub_millisecond_components(self):
        """Test microseconds and nanoseconds of a nine-digit fraction."""
        span = TimeSpan.from_string("15.985077682")
        assert span.total_ticks == 159_850_776
        assert span.seconds == 15
        assert span.milliseconds == 985
        assert span.microseconds == 77
        assert span.nanoseconds == 600
        assert span.total_seconds == pytest.approx(15.9850776)

    def test_negative_components_share_sign(self):
        """Test components of a negative span are all non-positive."""
        span = -TimeSpan.from_minutes(90)
        assert span.hours == -1
        assert span.minutes == -30
        assert span.is_negative

    def test_totals(self):
        """Test the fractional totals."""
        span = TimeSpan.from_hours(36)
        assert span.total_days == 1.5
        assert span.total_hours == 36.0
        assert span.total_minutes == 2160.0
        assert span.total_milliseconds == 129_600_000.0
        assert TimeSpan.from_milliseconds(0.5).total_microseconds == 500.0


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestTimeSpanArithmetic:
    """Tests for TimeSpan operators."""

    def test_add_and_subtract(self):
        """Test addition and subtraction."""
        a = TimeSpan.from_hours(7)
        b = TimeSpan.from_minutes(5.5)
        assert (a + b).to_string() == "07:05:30"
        assert (b - a).total_ticks == -(a - b).total_ticks

    def test_add_overflow(self):
        """Test addition past the 64 bit range raises."""
        with pytest.raises(TickOverflowError):
            TimeSpan.infinity() + TimeSpan(1)

    def test_negate_negative_infinity_overflows(self):
        """Test negative infinity has no positive counterpart."""
        with pytest.raises(TickOverflowError):
            -TimeSpan.negative_infinity()

    def test_multiply(self):
        """Test scaling by integers and floats."""
        assert TimeSpan.from_seconds(30) * 3 == TimeSpan.from_seconds(90)
        assert 2 * TimeSpan.from_hours(1) == TimeSpan.from_hours(2)
        assert TimeSpan.from_hours(1) * 0.5 == TimeSpan.from_minutes(30)

    def test_divide_by_scalar(self):
        """Test division by a scalar returns a TimeSpan."""
        assert TimeSpan.from_hours(3) / 2 == TimeSpan.from_minutes(90)
        assert TimeSpan(-7) / 2 == TimeSpan(-3)
        assert TimeSpan.from_hours(1) / 0.5 == TimeSpan.from_hours(2)

    def test_divide_by_timespan(self):
        """Test division by a TimeSpan returns a ratio."""
        assert TimeSpan.from_hours(1) / TimeSpan.from_minutes(20) == 3.0

    def test_floor_divide_and_modulo(self):
        """Test floor division and remainder."""
        assert TimeSpan.from_hours(3) // TimeSpan.from_hours(2) == 1
        assert TimeSpan.from_hours(3) % TimeSpan.from_hours(2) == TimeSpan.from_hours(1)
        assert TimeSpan.from_hours(3) // 3 == TimeSpan.from_hours(1)

    def test_division_by_zero(self):
        """Test division by zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            TimeSpan.from_hours(1) / 0
        with pytest.raises(ZeroDivisionError):
            TimeSpan.from_hours(1) / TimeSpan()

    def test_abs(self):
        """Test absolute value."""
        assert abs(TimeSpan.from_seconds(-5)) == TimeSpan.from_seconds(5)

    def test_unsupported_operand(self):
        """Test mixing with unrelated types raises TypeError."""
        with pytest.raises(TypeError):
            TimeSpan.from_seconds(1) + 1


# =============================================================================
# Comparison and Hashing Tests
# =============================================================================


class TestTimeSpanComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self):
        """Test spans order by tick count."""
        assert TimeSpan.from_seconds(-1) < TimeSpan() < TimeSpan.from_seconds(1)
        assert TimeSpan.from_minutes(1) >= TimeSpan.from_seconds(60)

    def test_equality_with_other_type(self):
        """Test a TimeSpan never equals a plain number."""
        assert TimeSpan(0) != 0

    def test_hash_set(self):
        """Test equal spans collapse in a set."""
        spans = {TimeSpan.from_days(5), TimeSpan.from_days(5), TimeSpan.from_days(10)}
        assert len(spans) == 2

    def test_repr(self):
        """Test repr shows the tick count."""
        assert repr(TimeSpan(TICKS_PER_SECOND)) == "TimeSpan(ticks=10000000)"


# =============================================================================
# Text Tests
# =============================================================================


class TestTimeSpanText:
    """Tests for TimeSpan.from_string() and TimeSpan.to_string()."""

    def test_parse_forms(self):
        """Test every field count."""
        assert TimeSpan.from_string("") == TimeSpan()
        assert TimeSpan.from_string("5.0") == TimeSpan.from_seconds(5)
        assert TimeSpan.from_string("5:30") == TimeSpan.from_minutes(5.5)
        assert TimeSpan.from_string("7:5:30") == (
            TimeSpan.from_hours(7) + TimeSpan.from_minutes(5.5)
        )

    def test_parse_sign(self):
        """Test a leading sign applies to the whole span."""
        assert TimeSpan.from_string("-1:30") == -TimeSpan.from_seconds(90)
        assert TimeSpan.from_string("+1:30") == TimeSpan.from_seconds(90)

    @pytest.mark.parametrize(
        "text",
        [
            "2:34a:53:32.5",
            "2012-02-29 15:34:34:20.033",
            "1:2:3:4:5",
            "abc",
            "-",
            "1:1e3",
            "e3",
            "1e",
        ],
    )
    def test_parse_invalid(self, text):
        """Test malformed input raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            TimeSpan.from_string(text)

    def test_parse_exponent(self):
        """Test a bare number of seconds may carry an exponent."""
        assert TimeSpan.from_string("1e3") == TimeSpan.from_seconds(1000)
        assert TimeSpan.from_string("1.5e-3") == TimeSpan.from_milliseconds(1.5)
        assert TimeSpan.from_string("-2.5E1") == TimeSpan.from_seconds(-25)
        assert TimeSpan.from_string("1e-8") == TimeSpan()

    def test_parse_exponent_overflow(self):
        """Test an exponent past the tick range raises TickOverflowError."""
        with pytest.raises(TickOverflowError):
            TimeSpan.from_string("1e300")
        with pytest.raises(TickOverflowError):
            TimeSpan.from_string("1e12")

    def test_normal_format(self):
        """Test NORMAL layout with total hours."""
        span = TimeSpan.from_string("2:34:53:2.5")
        assert span.to_string() == "82:53:02.500"
        assert span.to_string(full_seconds=True) == "82:53:02"
        assert str(-TimeSpan.from_seconds(90)) == "-00:01:30"

    def test_with_measures_format(self):
        """Test WITH_MEASURES layout."""
        measures = TimeSpanOutputFormat.WITH_MEASURES
        span = TimeSpan.from_string("2:34:53:2.5")
        assert span.to_string(measures) == "3 d 10 h 53 min 2 s 500 ms"
        assert span.to_string(measures, full_seconds=True) == "3 d 10 h 53 min 2 s"
        assert TimeSpan.from_seconds(-5.0).to_string(measures) == "-5 s"
        assert TimeSpan().to_string(measures) == "0 s"

    def test_with_measures_below_one_millisecond(self):
        """Test spans under a millisecond are written in microseconds."""
        measures = TimeSpanOutputFormat.WITH_MEASURES
        assert TimeSpan.from_milliseconds(0.5).to_string(measures) == "5e+02 µs"
        assert TimeSpan.from_microseconds(3).to_string(measures) == "3 µs"

    def test_total_seconds_format(self):
        """Test TOTAL_SECONDS layout."""
        total = TimeSpanOutputFormat.TOTAL_SECONDS
        span = TimeSpan.from_string("2:34:53:2.5")
        assert span.to_string(total) == "298382.5"
        assert span.to_string(total, full_seconds=True) == "298382"
        assert TimeSpan.from_seconds(-1.25).to_string(total) == "-1.25"

    def test_nine_digit_fraction_formats(self):
        """Test a nine-digit fraction keeps seven digits in every layout."""
        span = TimeSpan.from_string("15.985077682")
        assert span.to_string() == "00:00:15.9850776"
        assert (
            span.to_string(TimeSpanOutputFormat.WITH_MEASURES)
            == "15 s 985 ms 77 µs 600 ns"
        )
        assert span.to_string(TimeSpanOutputFormat.TOTAL_SECONDS) == "15.9850776"

    def test_round_trip(self):
        """Test NORMAL text parses back to the same span."""
        for span in (
            TimeSpan.from_string("2:34:53:2.5"),
            TimeSpan.from_string("15.985077682"),
            -TimeSpan.from_minutes(90),
        ):
            assert TimeSpan.from_string(span.to_string()) == span
