"""Tests for the DateTime class.

This module tests DateTime construction, component accessors, offsets,
arithmetic, comparison and the clock-driven factories.
"""

import pytest

from chronoutils import (
    DateTime,
    DateTimeOutputFormat,
    DayOfWeek,
    OutOfRangeError,
    Period,
    TickOverflowError,
    TimeSpan,
)
from chronoutils._internal.constants import MAX_DATETIME_TICKS, UNIX_EPOCH_TICKS


@pytest.fixture
def leap_day():
    """2012-02-29 15:34:20.033 without offset."""
    return DateTime.from_date_and_time(2012, 2, 29, 15, 34, 20, 33.0)


# =============================================================================
# Construction Tests
# =============================================================================


class TestDateTimeConstruction:
    """Tests for DateTime construction."""

    def test_default_is_null(self):
        """Test default construction is 0001-01-01T00:00:00."""
        dt = DateTime()
        assert dt.is_null
        assert (dt.year, dt.month, dt.day) == (1, 1, 1)
        assert dt.day_of_week is DayOfWeek.MONDAY
        assert not dt.is_local

    def test_from_date_and_time(self, leap_day):
        """Test components of a leap day instant."""
        assert leap_day.year == 2012
        assert leap_day.month == 2
        assert leap_day.day == 29
        assert leap_day.hour == 15
        assert leap_day.minute == 34
        assert leap_day.second == 20
        assert leap_day.millisecond == 33
        assert leap_day.microsecond == 0
        assert leap_day.nanosecond == 0

    def test_calendar_accessors(self, leap_day):
        """Test weekday, day of year and leap year accessors."""
        assert leap_day.day_of_week is DayOfWeek.WEDNESDAY
        assert leap_day.day_of_year == 60
        assert leap_day.is_leap_year
        assert leap_day.days_in_month == 29

    def test_from_date(self):
        """Test from_date() is midnight."""
        dt = DateTime.from_date(2500, 2, 1)
        assert dt.time_of_day == TimeSpan()
        assert dt.to_string() == "2500-02-01 00:00:00"

    def test_from_time(self):
        """Test from_time() lies on 0001-01-01."""
        dt = DateTime.from_time(15, 34, 20, 33)
        assert (dt.year, dt.month, dt.day) == (1, 1, 1)
        assert dt.time_of_day == TimeSpan.from_string("15:34:20.033")

    def test_from_components_exact_ticks(self):
        """Test the exact sub-second tick constructor."""
        dt = DateTime.from_components(2017, 8, 23, 19, 40, 15, 9_850_776)
        assert dt.millisecond == 985
        assert dt.microsecond == 77
        assert dt.nanosecond == 600

    @pytest.mark.parametrize(
        "components",
        [
            (0, 1, 1),
            (2012, 15, 1),
            (2013, 2, 29),
            (2012, 4, 31),
            (2012, 2, 29, 15, 61),
            (2012, 2, 29, 15, 34, 61),
            (2012, 2, 29, 61),
            (2012, 2, 29, 15, 34, 20, 2000),
            (2012, 2, 29, 15, 34, 20, -1),
            (10000, 1, 1),
        ],
    )
    def test_invalid_components(self, components):
        """Test each invalid component raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            DateTime.from_date_and_time(*components)

    def test_year_zero_message(self):
        """Test year 0 is reported as not existing."""
        with pytest.raises(OutOfRangeError, match="year 0"):
            DateTime.from_date(0, 1, 1)

    def test_raw_ticks_range(self):
        """Test raw ticks outside the calendar range raise."""
        with pytest.raises(TickOverflowError):
            DateTime(-1)
        with pytest.raises(TickOverflowError):
            DateTime(MAX_DATETIME_TICKS + 1)
        with pytest.raises(TypeError):
            DateTime(1.0)

    def test_offset_range(self):
        """Test offsets of a day or more are rejected."""
        with pytest.raises(OutOfRangeError):
            DateTime(UNIX_EPOCH_TICKS, TimeSpan.from_hours(24))

    def test_offset_pushing_wall_clock_out_of_range(self):
        """Test an offset may not move the wall clock before 0001-01-01."""
        with pytest.raises(TickOverflowError):
            DateTime(0, TimeSpan.from_hours(-1))

    def test_eternity(self):
        """Test the latest representable instant."""
        dt = DateTime.eternity()
        assert dt.is_eternity
        assert dt.to_string() == "9999-12-31 23:59:59.9999999"


# =============================================================================
# Timestamp Tests
# =============================================================================


class TestDateTimeTimestamps:
    """Tests for Unix timestamp conversion."""

    def test_from_timestamp_gmt(self):
        """Test a known timestamp."""
        dt = DateTime.from_timestamp_gmt(1453840331)
        assert (
            dt.to_string(DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY)
            == "Tue 2016-01-26 20:32:11"
        )
        assert dt.to_timestamp() == 1453840331

    def test_zero_timestamp_is_null(self):
        """Test timestamp 0 yields the null DateTime."""
        assert DateTime.from_timestamp(0) == DateTime()

    def test_unix_epoch_start(self):
        """Test the Unix epoch."""
        epoch = DateTime.unix_epoch_start()
        assert epoch.to_string() == "1970-01-01 00:00:00"
        assert epoch.to_timestamp() == 0
        assert DateTime.from_timestamp_gmt(0) == epoch

    def test_from_timestamp_uses_clock_offset(self, cest_clock):
        """Test the local factory attaches the clock's offset."""
        dt = DateTime.from_timestamp(1453840331, clock=cest_clock)
        assert dt.is_local
        assert dt.hour == 22
        assert dt == DateTime.from_timestamp_gmt(1453840331)

    def test_fractional_and_negative_timestamps(self):
        """Test fractional timestamps and instants before 1970."""
        assert DateTime.from_timestamp_gmt(1.5).millisecond == 500
        before = DateTime.from_timestamp_gmt(-1)
        assert before.to_string() == "1969-12-31 23:59:59"
        assert before.to_timestamp() == -1


# =============================================================================
# Offset Tests
# =============================================================================


class TestDateTimeOffsets:
    """Tests for presentation offsets."""

    def test_accessors_read_wall_clock(self):
        """Test components are read at the carried offset."""
        dt = DateTime.from_iso_string("2016-08-29T21:32:31.125+02:00")
        assert dt.hour == 21
        assert dt.offset == TimeSpan.from_hours(2)
        assert dt.utc_offset == TimeSpan.from_hours(2)
        assert dt.to_utc().hour == 19
        assert not dt.to_utc().is_local

    def test_equality_ignores_offset(self):
        """Test the same instant at different offsets is equal."""
        local = DateTime.from_iso_string("2016-08-29T21:32:31.125+02:00")
        utc = DateTime.from_date_and_time(2016, 8, 29, 19, 32, 31, 125)
        assert local == utc
        assert hash(local) == hash(utc)
        assert len({local, utc}) == 1

    def test_with_offset(self):
        """Test re-presenting an instant at another offset."""
        dt = DateTime.from_iso_string("2016-08-29T21:32:31+02:00")
        shifted = dt.with_offset(TimeSpan.from_hours(-4))
        assert shifted.hour == 15
        assert shifted == dt

    def test_to_local(self, cest_clock):
        """Test to_local() uses the clock's offset."""
        dt = DateTime.from_timestamp_gmt(1453840331)
        assert dt.to_local(cest_clock).hour == 22

    def test_utc_offset_defaults_to_zero(self, leap_day):
        """Test a DateTime without offset reports a zero utc_offset."""
        assert leap_day.offset is None
        assert leap_day.utc_offset == TimeSpan()

    def test_date_keeps_offset(self):
        """Test date is local midnight."""
        dt = DateTime.from_iso_string("2016-08-29T01:00:00+02:00")
        midnight = dt.date
        assert midnight.is_local
        assert (midnight.day, midnight.hour) == (29, 0)
        assert midnight.to_utc().day == 28

    def test_is_same_day(self, leap_day):
        """Test wall clock dates are compared."""
        assert leap_day.is_same_day(DateTime.from_date(2012, 2, 29))
        assert not leap_day.is_same_day(DateTime.from_date(2012, 3, 1))


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestDateTimeArithmetic:
    """Tests for DateTime operators."""

    def test_add_timespan(self):
        """Test adding days across month and year ends."""
        dt = DateTime.from_date_and_time(1999, 1, 5, 4, 16)
        assert (dt + TimeSpan.from_days(2)).day == 7
        later = dt + TimeSpan.from_days(365)
        assert (later.year, later.month, later.day) == (2000, 1, 5)
        assert (later.hour, later.minute) == (4, 16)

    def test_timespan_plus_datetime(self):
        """Test TimeSpan + DateTime is commutative."""
        dt = DateTime.from_date(1999, 1, 5)
        assert TimeSpan.from_days(2) + dt == dt + TimeSpan.from_days(2)

    def test_subtract_timespan(self):
        """Test subtracting across a year end."""
        dt = DateTime.from_date(1999, 1, 5)
        earlier = dt - TimeSpan.from_days(5)
        assert earlier.to_string() == "1998-12-31 00:00:00"

    def test_difference(self):
        """Test DateTime - DateTime is a TimeSpan."""
        a = DateTime.from_date(2000, 1, 2)
        b = DateTime.from_date(2000, 1, 1)
        assert a - b == TimeSpan.from_days(1)
        assert b - a == TimeSpan.from_days(-1)

    def test_add_keeps_offset(self):
        """Test tick arithmetic keeps the presentation offset."""
        dt = DateTime.from_iso_string("2016-08-29T21:00:00+02:00")
        assert (dt + TimeSpan.from_hours(1)).offset == TimeSpan.from_hours(2)

    def test_add_period(self):
        """Test calendar arithmetic with day clamping."""
        dt = DateTime.from_date(2012, 2, 29)
        assert dt + Period(years=1) == DateTime.from_date(2013, 2, 28)
        assert dt - Period(months=1) == DateTime.from_date(2012, 1, 29)
        assert Period(days=1) + dt == DateTime.from_date(2012, 3, 1)

    def test_overflow(self):
        """Test leaving the calendar range raises TickOverflowError."""
        with pytest.raises(TickOverflowError):
            DateTime.eternity() + TimeSpan(1)
        with pytest.raises(TickOverflowError):
            DateTime() - TimeSpan(1)

    def test_unsupported_operand(self):
        """Test adding an int raises TypeError."""
        with pytest.raises(TypeError):
            DateTime() + 1


# =============================================================================
# Comparison Tests
# =============================================================================


class TestDateTimeComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self):
        """Test instants order chronologically."""
        a = DateTime.from_date(2012, 2, 29)
        b = DateTime.from_date(2012, 3, 1)
        assert a < b
        assert b > a
        assert a <= a
        assert max(a, b) is b

    def test_hash_set(self):
        """Test equal instants collapse in a set."""
        dates = {
            DateTime.from_date(2500, 2, 1),
            DateTime.from_date(2500, 2, 1),
            DateTime.from_date(2500, 2, 2),
        }
        assert len(dates) == 2

    def test_repr(self):
        """Test repr names the components."""
        assert (
            repr(DateTime.from_date(2013, 2, 28))
            == "DateTime.from_components(2013, 2, 28, 0, 0, 0, 0)"
        )


# =============================================================================
# Clock Tests
# =============================================================================


class TestDateTimeNow:
    """Tests for the clock-driven factories."""

    def test_now_is_local(self, cest_clock):
        """Test now() carries the clock's local offset."""
        now = DateTime.now(cest_clock)
        assert now.is_local
        assert now.hour == 22
        assert now.millisecond == 500

    def test_utc_now(self, cest_clock):
        """Test utc_now() has no offset."""
        now = DateTime.utc_now(cest_clock)
        assert not now.is_local
        assert now.hour == 20

    def test_exact_variants(self, cest_clock):
        """Test exact factories read the exact clock."""
        assert DateTime.exact_now(cest_clock) == DateTime.now(cest_clock)
        assert DateTime.exact_utc_now(cest_clock).millisecond == 500

    def test_system_clocks_agree(self):
        """Test the coarse and exact system clocks are within two seconds."""
        exact = DateTime.exact_utc_now()
        coarse = DateTime.utc_now()
        assert abs(exact - coarse) < TimeSpan.from_seconds(2)
