"""Gregorian <-> Ethiopian calendar conversion.

The Ethiopian year has 12 months of 30 days followed by Pagume, which has
5 days (6 in a leap year). Conversion goes through the Julian Day Number
using the Amete Mihret epoch; a leap year is one where ``year % 4 == 3``,
which puts Meskerem 1 on 12 September in the Gregorian year before a
Gregorian leap year and on 11 September otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import InvalidDate
from ..common.datetime_utils import parse_iso_datetime

AMETE_MIHRET_EPOCH = 1723856
# date.toordinal() + offset == Julian Day Number
JDN_ORDINAL_OFFSET = 1721425

MONTH_NAMES = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miyazia",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

DateLike = Union[date, datetime, str]


@dataclass(frozen=True)
class EthiopianDate:
    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def label(self) -> str:
        return f"{self.month_name} {self.day}, {self.year}"

    def __str__(self) -> str:
        return self.label()


def is_ethiopian_leap_year(year: int) -> bool:
    return year % 4 == 3


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 13:
        raise InvalidDate(f"Invalid Ethiopian month: {month}")
    if month < 13:
        return 30
    return 6 if is_ethiopian_leap_year(year) else 5


def _as_date(value: DateLike, timezone: Optional[str]) -> date:
    if isinstance(value, str):
        value = parse_iso_datetime(value)

    if isinstance(value, datetime):
        if timezone and value.tzinfo is not None:
            try:
                value = value.astimezone(ZoneInfo(timezone))
            except ZoneInfoNotFoundError as e:
                raise InvalidDate(f"Unknown timezone: {timezone!r}") from e
        return value.date()

    if isinstance(value, date):
        return value

    raise InvalidDate(f"Invalid date: {value!r}")


def gregorian_to_ethiopian(value: DateLike, *, timezone: Optional[str] = None) -> EthiopianDate:
    """Convert a Gregorian date, date-time or ISO string to an Ethiopian date."""
    jdn = _as_date(value, timezone).toordinal() + JDN_ORDINAL_OFFSET

    cycles, r = divmod(jdn - AMETE_MIHRET_EPOCH, 1461)
    n = r % 365 + 365 * (r // 1460)
    year = 4 * cycles + r // 365 - r // 1460
    return EthiopianDate(year=year, month=n // 30 + 1, day=n % 30 + 1)


def ethiopian_to_gregorian(year: int, month: int, day: int) -> date:
    if year < 1:
        raise InvalidDate(f"Invalid Ethiopian year: {year}")
    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        raise InvalidDate(f"Invalid day {day} for {MONTH_NAMES[month - 1]} {year}")

    jdn = (
        AMETE_MIHRET_EPOCH
        + 365
        + 365 * (year - 1)
        + year // 4
        + 30 * month
        + day
        - 31
    )
    try:
        return date.fromordinal(jdn - JDN_ORDINAL_OFFSET)
    except (ValueError, OverflowError) as e:
        raise InvalidDate(f"Ethiopian year out of range: {year}") from e


def to_label(value: DateLike, *, timezone: Optional[str] = None) -> str:
    """Human-readable label, e.g. ``"Sene 30, 2017"``."""
    return gregorian_to_ethiopian(value, timezone=timezone).label()
