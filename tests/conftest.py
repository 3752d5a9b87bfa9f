"""Pytest configuration and fixtures for chronoutils tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronoutils can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronoutils import DateTime, FixedClock, TimeSpan  # noqa: E402


@pytest.fixture
def utc_clock() -> FixedClock:
    """A clock frozen at 2016-01-26T20:32:11 UTC with a zero local offset."""
    return FixedClock(DateTime.from_timestamp_gmt(1453840331).total_ticks)


@pytest.fixture
def cest_clock() -> FixedClock:
    """A clock frozen at 2016-01-26T20:32:11.5 UTC in a +02:00 zone."""
    instant = DateTime.from_timestamp_gmt(1453840331) + TimeSpan.from_milliseconds(500)
    return FixedClock(instant.total_ticks, TimeSpan.from_hours(2))
