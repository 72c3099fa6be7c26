from __future__ import annotations

from datetime import date, datetime, timedelta

from models.records import Location, Reading
from services import analysis


def _day_readings(day: date, indoor: float, outdoor: float, humidity: int = 50) -> list[Reading]:
    stamp = datetime(day.year, day.month, day.day, 12, 0)
    return [
        Reading(stamp, Location.indoor, indoor, humidity),
        Reading(stamp, Location.outdoor, outdoor, humidity),
    ]


def _dataset() -> list[Reading]:
    start = date(2016, 12, 1)
    readings: list[Reading] = []
    for offset, outdoor in enumerate([3.0, -1.0, -2.0, -0.5, -4.0, 0.0, 1.5]):
        readings += _day_readings(start + timedelta(days=offset), 21.0 + offset * 0.1, outdoor)
    return readings


def test_temperature_ranking_is_ordered_in_both_directions() -> None:
    readings = _dataset()

    descending = analysis.ranked_by_mean_temperature(readings, Location.outdoor, descending=True)
    ascending = analysis.ranked_by_mean_temperature(readings, Location.outdoor, descending=False)

    assert descending[0].value >= descending[-1].value
    assert descending[0].day == date(2016, 12, 1)
    assert ascending[0].day == date(2016, 12, 5)
    assert len(descending) == len(ascending) == 7


def test_temperature_ranking_precision() -> None:
    readings = _day_readings(date(2016, 12, 1), 21.0, 1.0) + [
        Reading(datetime(2016, 12, 1, 13, 0), Location.outdoor, 1.0, 50),
        Reading(datetime(2016, 12, 1, 14, 0), Location.outdoor, 2.0, 50),
    ]

    ranked = analysis.ranked_by_mean_temperature(readings, Location.outdoor, precision=2)

    assert ranked[0].value == 1.33


def test_mean_temperature_surface() -> None:
    readings = _dataset()

    assert analysis.mean_temperature(readings, date(2016, 12, 2), Location.outdoor) == -1.0
    assert analysis.mean_temperature(readings, date(2017, 1, 1), Location.outdoor) is None


def test_winter_onset_surface() -> None:
    assert analysis.winter_onset(_dataset()) == date(2016, 12, 2)
    assert analysis.autumn_onset(_dataset()) == date(2016, 12, 1)


def test_mold_risk_ranking_directions() -> None:
    readings = _day_readings(date(2016, 12, 1), 20.0, 0.0, humidity=99) + _day_readings(
        date(2016, 12, 2), 20.0, 0.0, humidity=30
    )

    lowest_first = analysis.ranked_by_mold_risk(readings, Location.indoor, ascending=True)
    highest_first = analysis.ranked_by_mold_risk(readings, Location.indoor, ascending=False)

    assert [item.value for item in lowest_first] == [0.0, 100.0]
    assert [item.value for item in highest_first] == [100.0, 0.0]


def test_door_ranking_sorted_by_duration_descending() -> None:
    calm = _day_readings(date(2016, 12, 1), 21.0, 3.0)
    calm += [
        Reading(datetime(2016, 12, 1, 12, 1), Location.indoor, 21.0, 50),
        Reading(datetime(2016, 12, 1, 12, 1), Location.outdoor, 3.0, 50),
    ]
    busy = _day_readings(date(2016, 12, 2), 22.0, 5.0)
    busy += [
        Reading(datetime(2016, 12, 2, 12, 1), Location.indoor, 21.5, 50),
        Reading(datetime(2016, 12, 2, 12, 1), Location.outdoor, 5.5, 50),
    ]

    ranked = analysis.ranked_by_door_open_duration(calm + busy)

    assert [item.day for item in ranked] == [date(2016, 12, 2), date(2016, 12, 1)]
    assert ranked[0].open_duration == timedelta(minutes=1)
    assert ranked[1].open_duration == timedelta(0)
