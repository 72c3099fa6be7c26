"""Analysis surface over an explicit collection of readings.

Every function takes the readings it works on and keeps no state between
calls, so the same snapshot can be shared by any number of callers.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from models.records import DailyDoorOpen, DailyValue, Location, Reading
from services import door, pairing, seasons
from services.aggregator import DailyAggregator, rank


def mean_temperature(
    readings: Iterable[Reading], day: date, location: Location
) -> Optional[float]:
    return DailyAggregator().mean_temperature_for_day(readings, day, location)


def ranked_by_mean_temperature(
    readings: Iterable[Reading],
    location: Location,
    descending: bool = True,
    precision: Optional[int] = None,
) -> List[DailyValue]:
    daily = DailyAggregator(precision=precision).mean_temperature(readings, location)
    return rank(daily, descending)


def ranked_by_mean_humidity(
    readings: Iterable[Reading], location: Location, descending: bool = False
) -> List[DailyValue]:
    return rank(DailyAggregator().mean_humidity(readings, location), descending)


def ranked_by_mold_risk(
    readings: Iterable[Reading], location: Location, ascending: bool = True
) -> List[DailyValue]:
    return rank(DailyAggregator().mold_risk(readings, location), not ascending)


def ranked_by_indoor_outdoor_divergence(
    readings: Iterable[Reading], descending: bool = True
) -> List[DailyValue]:
    samples = pairing.pair_readings(readings)
    return rank(pairing.daily_mean_divergence(samples), descending)


def ranked_by_door_open_duration(readings: Iterable[Reading]) -> List[DailyDoorOpen]:
    results = door.estimate_open_durations(pairing.pair_readings(readings))
    return sorted(results, key=lambda item: item.open_duration, reverse=True)


def autumn_onset(readings: Iterable[Reading]) -> Optional[date]:
    return seasons.autumn_onset(readings)


def winter_onset(readings: Iterable[Reading]) -> Optional[date]:
    return seasons.winter_onset(readings)
