from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.sunday_attendance.sunday_attendance.calendar.ethiopian import (
    MONTH_NAMES,
    EthiopianDate,
    days_in_month,
    ethiopian_to_gregorian,
    gregorian_to_ethiopian,
    is_ethiopian_leap_year,
    to_label,
)
from src.sunday_attendance.sunday_attendance.core.exceptions import InvalidDate

# First day of every month of 2017 E.C. (Meskerem 1 = 11 Sep 2024)
MONTH_STARTS_2017 = [
    (date(2024, 9, 11), 1),
    (date(2024, 10, 11), 2),
    (date(2024, 11, 10), 3),
    (date(2024, 12, 10), 4),
    (date(2025, 1, 9), 5),
    (date(2025, 2, 8), 6),
    (date(2025, 3, 10), 7),
    (date(2025, 4, 9), 8),
    (date(2025, 5, 9), 9),
    (date(2025, 6, 8), 10),
    (date(2025, 7, 8), 11),
    (date(2025, 8, 7), 12),
    (date(2025, 9, 6), 13),
]


@pytest.mark.parametrize("gregorian,month", MONTH_STARTS_2017)
def test_month_boundaries_2017(gregorian, month):
    eth = gregorian_to_ethiopian(gregorian)
    assert eth == EthiopianDate(2017, month, 1)
    assert ethiopian_to_gregorian(2017, month, 1) == gregorian

    previous = gregorian_to_ethiopian(gregorian - timedelta(days=1))
    if month == 1:
        assert previous == EthiopianDate(2016, 13, 5)
    else:
        assert previous == EthiopianDate(2017, month - 1, 30)


def test_label_for_reference_timestamp():
    assert to_label(datetime(2025, 7, 7, 10, 7)) == "Sene 30, 2017"


def test_label_accepts_iso_string_and_date():
    assert to_label("2025-07-06T10:00:00") == "Sene 29, 2017"
    assert to_label(date(2025, 9, 11)) == "Meskerem 1, 2018"


def test_leap_year_has_sixth_pagume():
    assert is_ethiopian_leap_year(2015)
    assert days_in_month(2015, 13) == 6
    assert gregorian_to_ethiopian(date(2023, 9, 11)) == EthiopianDate(2015, 13, 6)
    # New year moves to 12 September before a Gregorian leap year
    assert gregorian_to_ethiopian(date(2023, 9, 12)) == EthiopianDate(2016, 1, 1)
    assert ethiopian_to_gregorian(2015, 13, 6) == date(2023, 9, 11)


def test_non_leap_year_rejects_sixth_pagume():
    assert not is_ethiopian_leap_year(2017)
    with pytest.raises(InvalidDate):
        ethiopian_to_gregorian(2017, 13, 6)


def test_year_offset_is_seven_or_eight_years():
    start = date(2024, 1, 1)
    for offset in range(0, 366, 5):
        g = start + timedelta(days=offset)
        eth = gregorian_to_ethiopian(g)
        assert g.year - eth.year in (7, 8)
        assert (g.year - eth.year == 8) == (g < date(2024, 9, 11))
        assert 1 <= eth.month <= 13
        assert 1 <= eth.day <= days_in_month(eth.year, eth.month)


def test_aware_datetime_is_converted_to_school_timezone():
    # 22:30 UTC on Saturday is already Sunday in Addis Ababa (UTC+3)
    late_saturday = datetime(2025, 7, 5, 22, 30, tzinfo=timezone.utc)
    assert to_label(late_saturday) == "Sene 28, 2017"
    assert to_label(late_saturday, timezone="Africa/Addis_Ababa") == "Sene 29, 2017"


@pytest.mark.parametrize("value", ["not a date", "2025-13-45", None, 20250707])
def test_invalid_input_raises(value):
    with pytest.raises(InvalidDate):
        gregorian_to_ethiopian(value)


def test_month_names_cover_thirteen_months():
    assert len(MONTH_NAMES) == 13
    assert EthiopianDate(2017, 10, 30).month_name == "Sene"


@pytest.mark.parametrize("year", [10**7, 10**30])
def test_year_beyond_supported_range_raises(year):
    with pytest.raises(InvalidDate, match="out of range"):
        ethiopian_to_gregorian(year, 1, 1)
