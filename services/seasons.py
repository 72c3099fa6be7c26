"""Meteorological season onset detection from outdoor daily means."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Iterable, List, Optional, Sequence

from models.records import DailyValue, Location, Reading
from services.aggregator import group_by_day

logger = logging.getLogger(__name__)

RUN_LENGTH_DAYS = 5
AUTUMN_THRESHOLD_C = 10.0
WINTER_THRESHOLD_C = 0.0
AUTUMN_EARLIEST_MONTH = 8

DayPredicate = Callable[[DailyValue], bool]


def daily_outdoor_means(readings: Iterable[Reading]) -> List[DailyValue]:
    """Mean outdoor temperature per day, ascending by date."""
    means = [
        DailyValue(day=day, value=sum(r.temperature_c for r in group) / len(group))
        for day, group in group_by_day(readings, Location.outdoor).items()
    ]
    means.sort(key=lambda item: item.day)
    return means


def is_consecutive(window: Sequence[DailyValue]) -> bool:
    start = window[0].day
    return all(
        item.day == start + timedelta(days=offset) for offset, item in enumerate(window)
    )


def find_first_run(
    days: Sequence[DailyValue],
    predicate: DayPredicate,
    length: int = RUN_LENGTH_DAYS,
) -> Optional[date]:
    """Return the first day of the earliest qualifying run of ``length`` days.

    A window qualifies when its days follow each other without a calendar gap
    and every day satisfies ``predicate``. A window that fails either check is
    discarded and the scan moves on to the next start index.
    """
    for start in range(len(days) - length + 1):
        window = days[start : start + length]
        if is_consecutive(window) and all(predicate(item) for item in window):
            return window[0].day
    return None


def autumn_onset(readings: Iterable[Reading]) -> Optional[date]:
    """First day of five consecutive days with mean below 10 °C, from 1 August."""
    days = daily_outdoor_means(readings)
    if not days:
        return None
    floor = date(days[0].day.year, AUTUMN_EARLIEST_MONTH, 1)
    candidates = [item for item in days if item.day >= floor]
    onset = find_first_run(candidates, lambda item: item.value < AUTUMN_THRESHOLD_C)
    logger.debug("Autumn onset scan finished", extra={"day_count": len(candidates)})
    return onset


def winter_onset(readings: Iterable[Reading]) -> Optional[date]:
    """First day of five consecutive days with mean at or below 0 °C."""
    days = daily_outdoor_means(readings)
    onset = find_first_run(days, lambda item: item.value <= WINTER_THRESHOLD_C)
    logger.debug("Winter onset scan finished", extra={"day_count": len(days)})
    return onset
