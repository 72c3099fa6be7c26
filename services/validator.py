"""Parsing and validation of raw temperature/humidity CSV rows."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Set, Tuple

from app.schemas import RowError
from models.records import Location, Reading

logger = logging.getLogger(__name__)

MIN_PLAUSIBLE_TEMP_C = -50.0
MAX_PLAUSIBLE_TEMP_C = 60.0
MIN_HUMIDITY_PCT = 0
MAX_HUMIDITY_PCT = 100

# Humidity is read as a signed 32-bit integer; wider values are rejected.
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# Accepted timestamp shapes, tried in order: "yyyy-MM-dd H:mm", "yyyy-MM-dd HH:mm",
# "yyyy-MM-dd H:mm:ss", "yyyy-MM-dd HH:mm:ss".
_TIMESTAMP_PATTERNS = (
    re.compile(r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2}) (?P<hour>[0-9]):(?P<minute>[0-9]{2})"),
    re.compile(r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2}) (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"),
    re.compile(
        r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2}) (?P<hour>[0-9]):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    ),
    re.compile(
        r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2}) (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    ),
)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNICODE_MINUS = "−"
_LOCATIONS = {location.value: location for location in Location}
_EXPECTED_COLUMNS = 4
_SEPARATOR = ","


@dataclass
class IngestionReport:
    """Readings that survived validation plus the rows that were dropped."""

    readings: List[Reading] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.readings)

    @property
    def rejected_count(self) -> int:
        return len(self.errors)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Return the timestamp for the first whitelisted pattern matching ``value``."""
    candidate = value.strip()
    for pattern in _TIMESTAMP_PATTERNS:
        match = pattern.fullmatch(candidate)
        if match is None:
            continue
        try:
            day = datetime.strptime(match.group("date"), "%Y-%m-%d")
            return day.replace(
                hour=int(match.group("hour")),
                minute=int(match.group("minute")),
                second=int(match.groupdict().get("second") or 0),
            )
        except ValueError:
            return None
    return None


def parse_location(value: str) -> Optional[Location]:
    return _LOCATIONS.get(value.strip())


def parse_temperature(value: str) -> Optional[float]:
    candidate = value.strip().replace(_UNICODE_MINUS, "-").replace(" ", "")
    if not _DECIMAL_PATTERN.fullmatch(candidate):
        return None
    return float(candidate)


def parse_humidity(value: str) -> Optional[int]:
    candidate = value.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        return None
    number = int(candidate)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def clamp_humidity(value: int) -> int:
    return max(MIN_HUMIDITY_PCT, min(MAX_HUMIDITY_PCT, value))


def is_plausible_temperature(value: float) -> bool:
    return MIN_PLAUSIBLE_TEMP_C <= value <= MAX_PLAUSIBLE_TEMP_C


class ReadingValidator:
    """Turns raw CSV rows into typed, deduplicated readings.

    The first row is a header and is skipped, as are blank lines. Rows that
    cannot be used are recorded as :class:`RowError` entries and never abort
    the run. Humidity outside 0-100 is clamped, while temperature outside
    -50..60 drops the row.
    When a (timestamp, location) pair repeats, the first accepted row wins.
    """

    def validate(self, rows: Iterable[str]) -> IngestionReport:
        report = IngestionReport()
        seen: Set[Tuple[datetime, Location]] = set()

        # Each line is split on its own so a bad line cannot spill into the next.
        for row_number, line in enumerate(rows, start=1):
            if row_number == 1:
                continue
            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            reading_or_reason = self._parse_row(line.split(_SEPARATOR))
            if isinstance(reading_or_reason, str):
                self._reject(report, row_number, reading_or_reason)
                continue

            reading = reading_or_reason
            key = (reading.timestamp, reading.location)
            if key in seen:
                self._reject(report, row_number, "duplicate reading")
                continue
            seen.add(key)
            report.readings.append(reading)

        logger.info(
            "Validated raw rows",
            extra={
                "reading_count": report.accepted_count,
                "rejected_count": report.rejected_count,
            },
        )
        return report

    @staticmethod
    def _parse_row(parts: List[str]) -> Reading | str:
        if len(parts) < _EXPECTED_COLUMNS:
            return "malformed row"

        timestamp = parse_timestamp(parts[0])
        if timestamp is None:
            return "invalid timestamp"

        location = parse_location(parts[1])
        if location is None:
            return "unknown location"

        temperature = parse_temperature(parts[2])
        if temperature is None:
            return "invalid temperature"
        if not is_plausible_temperature(temperature):
            return "implausible temperature"

        humidity = parse_humidity(parts[3])
        if humidity is None:
            return "invalid humidity"

        return Reading(
            timestamp=timestamp,
            location=location,
            temperature_c=temperature,
            relative_humidity_pct=clamp_humidity(humidity),
        )

    @staticmethod
    def _reject(report: IngestionReport, row_number: int, reason: str) -> None:
        report.errors.append(RowError(row_number=row_number, reason=reason))
        logger.debug(
            "Dropped CSV row",
            extra={"row_number": row_number, "reason": reason},
        )
