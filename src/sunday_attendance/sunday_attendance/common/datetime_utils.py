from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Protocol
from zoneinfo import ZoneInfo

from ..core.constants import SUNDAY
from ..core.exceptions import InvalidDate


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time string."""
    try:
        text = value.strip()
        # fromisoformat only accepts a "Z" suffix from 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except (AttributeError, ValueError) as e:
        raise InvalidDate(f"Invalid date: {value!r}") from e


def day_of_week(value: date) -> int:
    """Day index in a week starting on Sunday (Sunday=0 .. Saturday=6)."""
    return value.isoweekday() % 7


def is_sunday(value: date) -> bool:
    return day_of_week(value) == SUNDAY


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


@dataclass(frozen=True)
class SystemClock:
    """Current local time, optionally in a named timezone."""

    timezone: Optional[str] = None

    def now(self) -> datetime:
        if self.timezone:
            return datetime.now(ZoneInfo(self.timezone))
        return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant (demo deployments and tests)."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant


def build_clock(*, timezone: Optional[str] = None, fixed_now: Optional[str] = None) -> Clock:
    if fixed_now:
        instant = parse_iso_datetime(fixed_now)
        if timezone and instant.tzinfo is not None:
            instant = instant.astimezone(ZoneInfo(timezone))
        return FixedClock(instant)
    return SystemClock(timezone or None)
