"""Tests for the clock collaborators."""

import logging

import pytest

from chronoutils import Clock, DateTime, FixedClock, SystemClock, TimeSpan
from chronoutils._internal.constants import TICKS_PER_DAY, UNIX_EPOCH_TICKS
from chronoutils.clock import default_clock


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_preset_values(self):
        """Test every query returns the frozen instant."""
        clock = FixedClock(UNIX_EPOCH_TICKS, TimeSpan.from_hours(2))
        assert clock.utc_ticks() == UNIX_EPOCH_TICKS
        assert clock.exact_utc_ticks() == UNIX_EPOCH_TICKS
        assert clock.local_offset() == TimeSpan.from_hours(2)
        assert clock.local_ticks() - clock.utc_ticks() == TimeSpan.from_hours(2).total_ticks
        assert clock.exact_local_ticks() == clock.local_ticks()

    def test_default_offset_is_zero(self):
        """Test a FixedClock without offset is at UTC."""
        clock = FixedClock(UNIX_EPOCH_TICKS)
        assert clock.local_offset() == TimeSpan()
        assert DateTime.now(clock) == DateTime.unix_epoch_start()

    def test_repr(self):
        """Test repr shows ticks and offset."""
        assert repr(FixedClock(5)) == "FixedClock(utc_ticks=5, offset=TimeSpan(ticks=0))"


class TestSystemClock:
    """Tests for SystemClock."""

    def test_coarse_clock_has_whole_seconds(self):
        """Test the coarse clock has a resolution of one second."""
        assert SystemClock().utc_ticks() % 10_000_000 == 0

    def test_coarse_and_exact_agree(self):
        """Test both clocks are within two seconds of each other."""
        clock = SystemClock()
        assert abs(clock.exact_utc_ticks() - clock.utc_ticks()) < 2 * 10_000_000

    def test_local_offset_is_below_one_day(self):
        """Test the local offset is a sane TimeSpan."""
        offset = SystemClock().local_offset()
        assert isinstance(offset, TimeSpan)
        assert abs(offset.total_ticks) < TICKS_PER_DAY

    def test_local_offset_is_logged(self, caplog):
        """Test the offset snapshot is logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="chronoutils.clock")
        SystemClock().local_offset()
        assert "local UTC offset" in caplog.text

    def test_default_clock(self):
        """Test the default clock is the system clock."""
        assert isinstance(default_clock(), SystemClock)


class TestClockBase:
    """Tests for the abstract Clock."""

    def test_unimplemented(self):
        """Test the base class has no time source."""
        clock = Clock()
        with pytest.raises(NotImplementedError):
            clock.utc_ticks()
        with pytest.raises(NotImplementedError):
            clock.exact_utc_ticks()
        with pytest.raises(NotImplementedError):
            clock.local_offset()
