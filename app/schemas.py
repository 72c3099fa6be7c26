"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models.records import Location


class SeedStatus(str, Enum):
    """Outcome of an attempt to seed the reading store from the source CSV."""

    seeded = "seeded"
    skipped = "skipped"
    missing_source = "missing_source"
    empty = "empty"


class RowError(BaseModel):
    """Details about a CSV row that was dropped during validation."""

    row_number: int = Field(..., ge=1)
    reason: str


class SeedResult(BaseModel):
    """Summary of a seeding run."""

    status: SeedStatus
    source: str
    accepted_count: int = Field(default=0, ge=0)
    rejected_count: int = Field(default=0, ge=0)
    errors: List[RowError] = Field(default_factory=list)


class ReadingSummary(BaseModel):
    """Size and extent of the reading snapshot served by the API."""

    total: int = Field(..., ge=0)
    per_location: Dict[Location, int] = Field(default_factory=dict)
    first_day: Optional[date] = None
    last_day: Optional[date] = None


class MeanTemperatureResponse(BaseModel):
    """Mean temperature for one day and location; ``mean`` is null without data."""

    day: date
    location: Location
    mean: Optional[float] = None


class DailyValueOut(BaseModel):
    day: date
    value: float


class DoorOpenOut(BaseModel):
    day: date
    open_minutes: float = Field(..., ge=0)
    display: str = Field(..., description="Duration formatted as 'YYYY-MM-DD: HHh MMm'.")


class SeasonOnsetResponse(BaseModel):
    """First day of meteorological autumn and winter, if found."""

    autumn: Optional[date] = None
    winter: Optional[date] = None
