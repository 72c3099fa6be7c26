from __future__ import annotations

from datetime import date, datetime

import pytest

from models.records import Location, PairedSample, Reading
from services.pairing import daily_mean_divergence, pair_readings


def _reading(stamp: str, location: Location, temp: float) -> Reading:
    return Reading(
        timestamp=datetime.strptime(stamp, "%Y-%m-%d %H:%M"),
        location=location,
        temperature_c=temp,
        relative_humidity_pct=50,
    )


def test_pair_readings_keeps_only_shared_timestamps() -> None:
    readings = [
        _reading("2016-10-01 10:01", Location.outdoor, 6.0),
        _reading("2016-10-01 10:00", Location.indoor, 22.0),
        _reading("2016-10-01 10:00", Location.outdoor, 5.0),
        _reading("2016-10-01 10:01", Location.indoor, 21.0),
        _reading("2016-10-01 10:02", Location.indoor, 21.5),
        _reading("2016-10-01 10:03", Location.outdoor, 4.0),
    ]

    paired = pair_readings(readings)

    assert paired == [
        PairedSample(datetime(2016, 10, 1, 10, 0), 22.0, 5.0),
        PairedSample(datetime(2016, 10, 1, 10, 1), 21.0, 6.0),
    ]


def test_pair_readings_without_overlap_is_empty() -> None:
    readings = [
        _reading("2016-10-01 10:00", Location.indoor, 22.0),
        _reading("2016-10-01 10:01", Location.outdoor, 5.0),
    ]

    assert pair_readings(readings) == []
    assert daily_mean_divergence([]) == []


def test_daily_mean_divergence_averages_absolute_difference() -> None:
    readings = [
        _reading("2016-10-01 10:00", Location.indoor, 22.0),
        _reading("2016-10-01 10:00", Location.outdoor, 12.0),
        _reading("2016-10-01 11:00", Location.indoor, 20.0),
        _reading("2016-10-01 11:00", Location.outdoor, 24.0),
        _reading("2016-10-02 10:00", Location.indoor, 21.0),
        _reading("2016-10-02 10:00", Location.outdoor, 20.0),
    ]

    daily = daily_mean_divergence(pair_readings(readings))

    assert [(item.day, item.value) for item in daily] == [
        (date(2016, 10, 1), pytest.approx(7.0)),
        (date(2016, 10, 2), pytest.approx(1.0)),
    ]


def test_identical_series_have_no_divergence() -> None:
    readings = []
    for minute in range(3):
        stamp = f"2016-10-0{minute + 1} 10:0{minute}"
        readings.append(_reading(stamp, Location.indoor, 10.0 + minute))
        readings.append(_reading(stamp, Location.outdoor, 10.0 + minute))

    daily = daily_mean_divergence(pair_readings(readings))

    assert len(daily) == 3
    assert all(item.value == 0.0 for item in daily)
