from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Sequence

from models.records import DailyValue, Location, Reading
from services.seasons import (
    autumn_onset,
    daily_outdoor_means,
    find_first_run,
    is_consecutive,
    winter_onset,
)


def _outdoor_days(start: date, means: Sequence[float | None]) -> list[Reading]:
    """One outdoor reading per day at noon; ``None`` leaves a calendar gap."""
    readings = []
    for offset, mean in enumerate(means):
        if mean is None:
            continue
        day = start + timedelta(days=offset)
        readings.append(
            Reading(
                timestamp=datetime(day.year, day.month, day.day, 12, 0),
                location=Location.outdoor,
                temperature_c=mean,
                relative_humidity_pct=70,
            )
        )
    return readings


def test_daily_outdoor_means_ignore_indoor_and_sort_by_day() -> None:
    readings = _outdoor_days(date(2016, 10, 2), [4.0]) + _outdoor_days(date(2016, 10, 1), [8.0])
    readings.append(
        Reading(datetime(2016, 10, 1, 13, 0), Location.outdoor, 6.0, 70)
    )
    readings.append(
        Reading(datetime(2016, 10, 1, 13, 0), Location.indoor, 22.0, 40)
    )

    means = daily_outdoor_means(readings)

    assert means == [DailyValue(date(2016, 10, 1), 7.0), DailyValue(date(2016, 10, 2), 4.0)]


def test_autumn_onset_is_first_day_of_earliest_run() -> None:
    readings = _outdoor_days(date(2016, 8, 1), [12, 9, 8, 7, 6, 9])

    assert autumn_onset(readings) == date(2016, 8, 2)


def test_autumn_onset_restarts_after_warm_day() -> None:
    readings = _outdoor_days(date(2016, 8, 1), [12, 9, 8, 11, 6, 5, 4, 3, 2])

    assert autumn_onset(readings) == date(2016, 8, 5)


def test_autumn_onset_ignores_days_before_august() -> None:
    readings = _outdoor_days(date(2016, 7, 25), [5, 5, 5, 5, 5, 5, 5, 12, 8, 8, 8, 8, 8])

    assert autumn_onset(readings) == date(2016, 8, 2)


def test_calendar_gap_invalidates_window() -> None:
    readings = _outdoor_days(date(2016, 9, 1), [5, 5, None, 5, 5, 5, 5, 5])

    assert autumn_onset(readings) == date(2016, 9, 4)


def test_gap_in_only_candidate_window_means_not_found() -> None:
    readings = _outdoor_days(date(2016, 9, 1), [5, 5, None, 5, 5, 5])

    assert autumn_onset(readings) is None


def test_winter_requires_at_or_below_zero() -> None:
    readings = _outdoor_days(date(2016, 12, 1), [0.5, 0.0, -1.0, -3.0, 0.0, -0.5, 2.0])

    assert winter_onset(readings) == date(2016, 12, 2)


def test_fewer_than_five_days_is_not_found() -> None:
    readings = _outdoor_days(date(2016, 12, 1), [-5, -5, -5, -5])

    assert winter_onset(readings) is None
    assert autumn_onset([]) is None
    assert winter_onset([]) is None


def test_find_first_run_returns_run_start_with_consecutive_days() -> None:
    start = date(2017, 1, 1)
    days = [DailyValue(start + timedelta(days=i), float(v)) for i, v in enumerate([3, -1, -1, -1, -1, -1])]

    onset = find_first_run(days, lambda item: item.value <= 0)

    assert onset == date(2017, 1, 2)
    window = days[1:6]
    assert is_consecutive(window)
