from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.sunday_attendance.sunday_attendance.common.datetime_utils import (
    FixedClock,
    SystemClock,
    build_clock,
    day_of_week,
    is_sunday,
    parse_iso_datetime,
)
from src.sunday_attendance.sunday_attendance.core.exceptions import InvalidDate


def test_week_starts_on_sunday():
    assert day_of_week(date(2025, 7, 6)) == 0
    assert day_of_week(date(2025, 7, 7)) == 1
    assert day_of_week(date(2025, 7, 12)) == 6
    assert is_sunday(date(2025, 7, 6))
    assert not is_sunday(date(2025, 7, 7))


def test_build_clock_pins_configured_instant():
    clock = build_clock(fixed_now="2025-07-07T10:07:00+03:00", timezone="Africa/Addis_Ababa")

    assert isinstance(clock, FixedClock)
    assert clock.now().hour == 10
    assert clock.now().date() == date(2025, 7, 7)


def test_build_clock_defaults_to_system_time():
    clock = build_clock()

    assert isinstance(clock, SystemClock)
    assert isinstance(clock.now(), datetime)


def test_build_clock_rejects_bad_instant():
    with pytest.raises(InvalidDate):
        build_clock(fixed_now="next sunday")


def test_utc_z_suffix_is_accepted():
    assert parse_iso_datetime("2025-07-06T07:00:00Z") == datetime(2025, 7, 6, 7, tzinfo=timezone.utc)

    clock = build_clock(fixed_now="2025-07-06T07:00:00Z", timezone="Africa/Addis_Ababa")

    assert clock.now().hour == 10
    assert is_sunday(clock.now().date())
