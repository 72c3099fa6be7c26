"""Balcony door open-time estimation from opposing indoor/outdoor trends.

Opening the door makes the indoor temperature drop while the outdoor sensor,
usually mounted near the door, warms up. Each day's paired samples are walked
in time order through a two-state automaton:

* ``closed -> open`` when indoor falls by at least 0.3 °C and outdoor rises by
  at least 0.3 °C over one step. The step's elapsed time counts as open.
* while ``open`` every step's elapsed time counts as open.
* ``open -> closed`` when indoor rises by at least 0.2 °C and outdoor falls by
  at least 0.2 °C over one step.

Elapsed time per step is capped at five minutes so gaps in the data are not
counted as open time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterable, List, Sequence

from models.records import DailyDoorOpen, PairedSample
from services.pairing import group_pairs_by_day

OPEN_INDOOR_DROP_C = 0.3
OPEN_OUTDOOR_RISE_C = 0.3
CLOSE_INDOOR_RISE_C = 0.2
CLOSE_OUTDOOR_DROP_C = 0.2
MAX_STEP_MINUTES = 5.0


class DoorState(str, Enum):
    closed = "closed"
    open = "open"


@dataclass(frozen=True)
class Step:
    """Change between two consecutive paired samples."""

    minutes: float
    indoor_delta: float
    outdoor_delta: float

    @classmethod
    def between(cls, previous: PairedSample, current: PairedSample) -> "Step":
        elapsed = (current.timestamp - previous.timestamp).total_seconds() / 60.0
        return cls(
            minutes=max(0.0, min(MAX_STEP_MINUTES, elapsed)),
            indoor_delta=current.indoor_temp - previous.indoor_temp,
            outdoor_delta=current.outdoor_temp - previous.outdoor_temp,
        )


def opens_door(step: Step) -> bool:
    return (
        step.indoor_delta <= -OPEN_INDOOR_DROP_C
        and step.outdoor_delta >= OPEN_OUTDOOR_RISE_C
    )


def closes_door(step: Step) -> bool:
    return (
        step.indoor_delta >= CLOSE_INDOOR_RISE_C
        and step.outdoor_delta <= -CLOSE_OUTDOOR_DROP_C
    )


def advance(state: DoorState, step: Step) -> tuple[DoorState, float]:
    """Apply one step; return the next state and the minutes counted as open."""
    if state is DoorState.closed:
        if opens_door(step):
            return DoorState.open, step.minutes
        return DoorState.closed, 0.0
    if closes_door(step):
        return DoorState.closed, step.minutes
    return DoorState.open, step.minutes


def open_minutes_for_day(samples: Sequence[PairedSample]) -> float:
    ordered = sorted(samples, key=lambda sample: sample.timestamp)
    state = DoorState.closed
    total = 0.0
    for previous, current in zip(ordered, ordered[1:]):
        state, minutes = advance(state, Step.between(previous, current))
        total += minutes
    return total


def estimate_open_durations(samples: Iterable[PairedSample]) -> List[DailyDoorOpen]:
    """One result per day that has paired samples, in day order.

    Days with a single paired sample get a zero duration.
    """
    return [
        DailyDoorOpen(day=day, open_duration=timedelta(minutes=open_minutes_for_day(group)))
        for day, group in sorted(group_pairs_by_day(samples).items())
    ]
