"""Per-day aggregation logic for temperature and humidity readings."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from models.records import DailyValue, Location, Reading
from services.mold_risk import in_risk_zone


def group_by_day(
    readings: Iterable[Reading], location: Optional[Location] = None
) -> Dict[date, List[Reading]]:
    """Bucket readings by calendar day, keeping first-seen day order."""
    groups: Dict[date, List[Reading]] = defaultdict(list)
    for reading in readings:
        if location is not None and reading.location is not location:
            continue
        groups[reading.timestamp.date()].append(reading)
    return dict(groups)


def rank(values: Iterable[DailyValue], descending: bool) -> List[DailyValue]:
    """Sort daily values by value; equal values keep their grouping order."""
    return sorted(values, key=lambda item: item.value, reverse=descending)


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


class DailyAggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def __init__(self, precision: Optional[int] = None) -> None:
        self.precision = precision

    def mean_temperature_for_day(
        self, readings: Iterable[Reading], day: date, location: Location
    ) -> Optional[float]:
        temperatures = [
            reading.temperature_c
            for reading in readings
            if reading.location is location and reading.timestamp.date() == day
        ]
        return _mean(temperatures)

    def mean_temperature(
        self, readings: Iterable[Reading], location: Location
    ) -> List[DailyValue]:
        daily = self._summarize(
            readings, location, lambda group: _mean([r.temperature_c for r in group])
        )
        if self.precision is None:
            return daily
        return [DailyValue(item.day, round(item.value, self.precision)) for item in daily]

    def mean_humidity(
        self, readings: Iterable[Reading], location: Location
    ) -> List[DailyValue]:
        return self._summarize(
            readings,
            location,
            lambda group: _mean([float(r.relative_humidity_pct) for r in group]),
        )

    def mold_risk(self, readings: Iterable[Reading], location: Location) -> List[DailyValue]:
        """Percentage of each day's samples at or above the critical humidity."""

        def risk_share(group: Sequence[Reading]) -> Optional[float]:
            if not group:
                return None
            at_risk = sum(
                1
                for r in group
                if in_risk_zone(r.temperature_c, r.relative_humidity_pct)
            )
            return at_risk * 100.0 / len(group)

        return self._summarize(readings, location, risk_share)

    @staticmethod
    def _summarize(
        readings: Iterable[Reading],
        location: Location,
        reducer: Callable[[Sequence[Reading]], Optional[float]],
    ) -> List[DailyValue]:
        summary: List[DailyValue] = []
        for day, group in group_by_day(readings, location).items():
            value = reducer(group)
            if value is not None:
                summary.append(DailyValue(day=day, value=value))
        return summary
