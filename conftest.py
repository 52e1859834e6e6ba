from __future__ import annotations

from datetime import datetime

import pytest

from src.sunday_attendance.sunday_attendance.common.datetime_utils import FixedClock


@pytest.fixture
def sunday_now() -> datetime:
    # Sene 29, 2017
    return datetime(2025, 7, 6, 10, 7, 0)


@pytest.fixture
def monday_now() -> datetime:
    # Sene 30, 2017
    return datetime(2025, 7, 7, 10, 7, 0)


@pytest.fixture
def sunday_clock(sunday_now) -> FixedClock:
    return FixedClock(sunday_now)


@pytest.fixture
def monday_clock(monday_now) -> FixedClock:
    return FixedClock(monday_now)
