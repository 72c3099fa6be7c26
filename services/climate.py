"""Seeding orchestration and snapshot-backed analysis access."""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import List, Optional, Tuple

from app.schemas import ReadingSummary, SeedResult, SeedStatus
from datastore.reading_store import ReadingStore, build_default_store
from models.records import DailyDoorOpen, DailyValue, Location, Reading
from services import analysis
from services.validator import ReadingValidator
from settings import get_settings

logger = logging.getLogger(__name__)


class ClimateService:
    """Coordinates the reading store, one-time seeding and analysis calls."""

    def __init__(
        self,
        store: ReadingStore,
        source_path: Path,
        validator: Optional[ReadingValidator] = None,
        precision: Optional[int] = None,
    ) -> None:
        self.store = store
        self.source_path = source_path
        self.precision = precision
        self.validator = validator or ReadingValidator()
        self._snapshot: Optional[Tuple[Reading, ...]] = None
        self._lock = Lock()

    def ensure_seeded(self) -> SeedResult:
        """Load the source CSV into the store, but only while the store is empty."""
        with self._lock:
            result = self._seed()
            self._snapshot = None
        logger.info(
            "Seeding finished",
            extra={
                "status": result.status.value,
                "source": result.source,
                "reading_count": result.accepted_count,
                "rejected_count": result.rejected_count,
            },
        )
        return result

    def readings(self) -> Tuple[Reading, ...]:
        """Immutable snapshot of the store, read once and shared by all analyses."""
        with self._lock:
            if self._snapshot is None:
                self._snapshot = tuple(self.store.scan())
            return self._snapshot

    def summary(self) -> ReadingSummary:
        readings = self.readings()
        per_location = {location: 0 for location in Location}
        for reading in readings:
            per_location[reading.location] += 1
        days = sorted({reading.timestamp.date() for reading in readings})
        return ReadingSummary(
            total=len(readings),
            per_location=per_location,
            first_day=days[0] if days else None,
            last_day=days[-1] if days else None,
        )

    def mean_temperature(self, day: date, location: Location) -> Optional[float]:
        return analysis.mean_temperature(self.readings(), day, location)

    def ranked_by_mean_temperature(
        self, location: Location, descending: bool = True
    ) -> List[DailyValue]:
        return analysis.ranked_by_mean_temperature(
            self.readings(), location, descending, precision=self.precision
        )

    def ranked_by_mean_humidity(
        self, location: Location, descending: bool = False
    ) -> List[DailyValue]:
        return analysis.ranked_by_mean_humidity(self.readings(), location, descending)

    def ranked_by_mold_risk(self, location: Location, ascending: bool = True) -> List[DailyValue]:
        return analysis.ranked_by_mold_risk(self.readings(), location, ascending)

    def ranked_by_indoor_outdoor_divergence(self, descending: bool = True) -> List[DailyValue]:
        return analysis.ranked_by_indoor_outdoor_divergence(self.readings(), descending)

    def ranked_by_door_open_duration(self) -> List[DailyDoorOpen]:
        return analysis.ranked_by_door_open_duration(self.readings())

    def autumn_onset(self) -> Optional[date]:
        return analysis.autumn_onset(self.readings())

    def winter_onset(self) -> Optional[date]:
        return analysis.winter_onset(self.readings())

    def _seed(self) -> SeedResult:
        source = str(self.source_path)
        if not self.store.is_empty():
            return SeedResult(status=SeedStatus.skipped, source=source)

        if not self.source_path.is_file():
            logger.warning("Source CSV not found", extra={"source": source})
            return SeedResult(status=SeedStatus.missing_source, source=source)

        with self.source_path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
            report = self.validator.validate(handle)

        if report.accepted_count:
            self.store.put_items(report.readings)
            status = SeedStatus.seeded
        else:
            status = SeedStatus.empty

        return SeedResult(
            status=status,
            source=source,
            accepted_count=report.accepted_count,
            rejected_count=report.rejected_count,
            errors=report.errors,
        )


@lru_cache
def build_default_service(source_path: Optional[str] = None) -> ClimateService:
    """Factory that wires the service with the configured store and source CSV."""
    settings = get_settings()
    path = Path(source_path or settings.source_csv_path)
    return ClimateService(
        store=build_default_store(),
        source_path=path,
        precision=settings.display_precision,
    )
