"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


class Location(str, Enum):
    """The two sensor placements a reading can come from."""

    indoor = "Indoor"
    outdoor = "Outdoor"


@dataclass(frozen=True, slots=True)
class Reading:
    """A single validated temperature and humidity sample."""

    timestamp: datetime
    location: Location
    temperature_c: float
    relative_humidity_pct: int


@dataclass(frozen=True, slots=True)
class DailyValue:
    """One summary value for a calendar day.

    The meaning of ``value`` depends on the analysis that produced it: mean
    temperature, mean humidity, mold-risk percentage or mean absolute
    indoor/outdoor difference.
    """

    day: date
    value: float


@dataclass(frozen=True, slots=True)
class PairedSample:
    """Indoor and outdoor temperature sharing the exact same timestamp."""

    timestamp: datetime
    indoor_temp: float
    outdoor_temp: float


@dataclass(frozen=True, slots=True)
class DailyDoorOpen:
    """Estimated time the balcony door stood open on a given day."""

    day: date
    open_duration: timedelta

    @property
    def open_minutes(self) -> float:
        return self.open_duration.total_seconds() / 60.0

    def __str__(self) -> str:
        total_minutes = int(self.open_duration.total_seconds() // 60)
        hours, minutes = divmod(total_minutes, 60)
        return f"{self.day:%Y-%m-%d}: {hours:02d}h {minutes:02d}m"
