"""HTTP route definitions for the service."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, TypeVar

from fastapi import APIRouter, Depends, Query, status

from app.schemas import (
    DailyValueOut,
    DoorOpenOut,
    MeanTemperatureResponse,
    ReadingSummary,
    SeasonOnsetResponse,
    SeedResult,
)
from models.records import DailyValue, Location
from services.climate import ClimateService, build_default_service

router = APIRouter()

T = TypeVar("T")


def get_service() -> ClimateService:
    return build_default_service()


def _limit(items: Sequence[T], limit: Optional[int]) -> List[T]:
    return list(items if limit is None else items[:limit])


def _daily_values(items: Sequence[DailyValue], limit: Optional[int]) -> List[DailyValueOut]:
    return [DailyValueOut(day=item.day, value=item.value) for item in _limit(items, limit)]


@router.post(
    "/seed",
    response_model=SeedResult,
    summary="Load the source CSV into the store if the store is empty.",
)
async def seed(service: ClimateService = Depends(get_service)) -> SeedResult:
    return service.ensure_seeded()


@router.get(
    "/readings/summary",
    response_model=ReadingSummary,
    summary="Reading counts per location and the covered date range.",
)
async def readings_summary(service: ClimateService = Depends(get_service)) -> ReadingSummary:
    return service.summary()


@router.get(
    "/temperature/{day}",
    response_model=MeanTemperatureResponse,
    summary="Mean temperature for one day at one location.",
)
async def mean_temperature(
    day: date,
    location: Location = Query(...),
    service: ClimateService = Depends(get_service),
) -> MeanTemperatureResponse:
    mean = service.mean_temperature(day, location)
    return MeanTemperatureResponse(day=day, location=location, mean=mean)


@router.get(
    "/rankings/temperature",
    response_model=List[DailyValueOut],
    summary="Days ordered by mean temperature.",
)
async def rank_temperature(
    location: Location = Query(...),
    descending: bool = Query(True, description="Warmest first."),
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many days."),
    service: ClimateService = Depends(get_service),
) -> List[DailyValueOut]:
    return _daily_values(service.ranked_by_mean_temperature(location, descending), limit)


@router.get(
    "/rankings/humidity",
    response_model=List[DailyValueOut],
    summary="Days ordered by mean relative humidity.",
)
async def rank_humidity(
    location: Location = Query(...),
    descending: bool = Query(False, description="Most humid first."),
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many days."),
    service: ClimateService = Depends(get_service),
) -> List[DailyValueOut]:
    return _daily_values(service.ranked_by_mean_humidity(location, descending), limit)


@router.get(
    "/rankings/mold-risk",
    response_model=List[DailyValueOut],
    summary="Days ordered by share of samples in the mold risk zone.",
)
async def rank_mold_risk(
    location: Location = Query(...),
    ascending: bool = Query(True, description="Lowest risk first."),
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many days."),
    service: ClimateService = Depends(get_service),
) -> List[DailyValueOut]:
    return _daily_values(service.ranked_by_mold_risk(location, ascending), limit)


@router.get(
    "/rankings/divergence",
    response_model=List[DailyValueOut],
    summary="Days ordered by mean absolute indoor/outdoor temperature difference.",
)
async def rank_divergence(
    descending: bool = Query(True, description="Largest difference first."),
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many days."),
    service: ClimateService = Depends(get_service),
) -> List[DailyValueOut]:
    return _daily_values(service.ranked_by_indoor_outdoor_divergence(descending), limit)


@router.get(
    "/rankings/door-open",
    response_model=List[DoorOpenOut],
    summary="Days ordered by estimated balcony door open time, longest first.",
)
async def rank_door_open(
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many days."),
    service: ClimateService = Depends(get_service),
) -> List[DoorOpenOut]:
    return [
        DoorOpenOut(day=item.day, open_minutes=item.open_minutes, display=str(item))
        for item in _limit(service.ranked_by_door_open_duration(), limit)
    ]


@router.get(
    "/seasons",
    response_model=SeasonOnsetResponse,
    summary="Onset of meteorological autumn and winter from outdoor data.",
)
async def season_onsets(service: ClimateService = Depends(get_service)) -> SeasonOnsetResponse:
    return SeasonOnsetResponse(autumn=service.autumn_onset(), winter=service.winter_onset())


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
