"""
Clock and calendar abstraction.

Scheduling works in epoch milliseconds; streaks and daily XP work in local
calendar dates. Both come from a Clock so tests can pin time and timezone.
"""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


MS_PER_DAY = 86_400_000


def days_to_ms(days: float) -> int:
    """Convert a (possibly fractional) number of days to whole milliseconds."""
    return math.floor(days * MS_PER_DAY)


class Clock(ABC):
    """Source of the current time and local calendar date."""

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware datetime in the clock's zone."""
        pass

    def now_ms(self) -> int:
        """Current time as epoch milliseconds."""
        return int(self.now().timestamp() * 1000)

    def today(self) -> date:
        """Current calendar date in the clock's zone."""
        return self.now().date()


class SystemClock(Clock):
    """
    Wall clock in an explicit timezone.

    With no zone given, TRAINER_TIMEZONE is used, then the host's local zone.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        if tz is None:
            tz_name = os.getenv("TRAINER_TIMEZONE")
            tz = ZoneInfo(tz_name) if tz_name else None
        self.tz = tz

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now(timezone.utc).astimezone()
        return datetime.now(self.tz)


class FixedClock(Clock):
    """Manually advanced clock for tests and simulations."""

    def __init__(self, current: datetime):
        if current.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware datetime")
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, days: float = 0, hours: float = 0, minutes: float = 0) -> None:
        self.current = self.current + timedelta(days=days, hours=hours, minutes=minutes)
