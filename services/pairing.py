"""Exact-timestamp join of the indoor and outdoor series."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from typing import Dict, Iterable, List

from models.records import DailyValue, Location, PairedSample, Reading


def pair_readings(readings: Iterable[Reading]) -> List[PairedSample]:
    """Join indoor and outdoor readings that share the identical timestamp.

    There is no interpolation or nearest-match fallback; timestamps present in
    only one series are dropped. Output is ordered by timestamp.
    """
    readings = list(readings)
    outdoor_by_timestamp: Dict[datetime, float] = {}
    for reading in readings:
        if reading.location is Location.outdoor:
            outdoor_by_timestamp.setdefault(reading.timestamp, reading.temperature_c)

    paired = [
        PairedSample(
            timestamp=reading.timestamp,
            indoor_temp=reading.temperature_c,
            outdoor_temp=outdoor_by_timestamp[reading.timestamp],
        )
        for reading in readings
        if reading.location is Location.indoor
        and reading.timestamp in outdoor_by_timestamp
    ]
    paired.sort(key=lambda sample: sample.timestamp)
    return paired


def group_pairs_by_day(samples: Iterable[PairedSample]) -> Dict[date, List[PairedSample]]:
    groups: Dict[date, List[PairedSample]] = defaultdict(list)
    for sample in samples:
        groups[sample.timestamp.date()].append(sample)
    return dict(groups)


def daily_mean_divergence(samples: Iterable[PairedSample]) -> List[DailyValue]:
    """Mean of |indoor - outdoor| per day over the paired samples."""
    return [
        DailyValue(
            day=day,
            value=sum(abs(s.indoor_temp - s.outdoor_temp) for s in group) / len(group),
        )
        for day, group in group_pairs_by_day(samples).items()
    ]
