from __future__ import annotations
import json
import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from models.records import Location, Reading
from settings import get_settings

logger = logging.getLogger(__name__)

_READINGS_ADAPTER = TypeAdapter(List[Reading])

ReadingKey = Tuple[datetime, Location]


class ReadingStore:
    """Table of validated readings keyed by (timestamp, location)."""

    def __init__(self, name: str, persistence_path: Optional[Path] = None) -> None:
        self.name = name
        self._items: Dict[ReadingKey, Reading] = {}
        self.persistence_path = persistence_path
        self._lock = Lock()
        if persistence_path:
            persistence_path.parent.mkdir(parents=True, exist_ok=True)
            self._load_from_disk()

    def put_items(self, readings: Iterable[Reading]) -> int:
        """Insert or replace readings; returns the number written."""
        written = 0
        with self._lock:
            for reading in readings:
                self._items[(reading.timestamp, reading.location)] = reading
                written += 1
            self._persist()
        logger.info(
            "Stored readings",
            extra={"store": self.name, "reading_count": written},
        )
        return written

    def scan(self) -> list[Reading]:
        """Return every stored reading in insertion order."""

        with self._lock:
            return list(self._items.values())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def is_empty(self) -> bool:
        return self.count() == 0

    def _persist(self) -> None:
        if not self.persistence_path:
            return
        payload = _READINGS_ADAPTER.dump_python(list(self._items.values()), mode="json")
        self.persistence_path.write_text(json.dumps(payload, indent=2))

    def _load_from_disk(self) -> None:
        if not self.persistence_path or not self.persistence_path.exists():
            return

        try:
            raw = self.persistence_path.read_text() or "[]"
            readings = _READINGS_ADAPTER.validate_json(raw)
        except (OSError, ValidationError):
            logger.warning(
                "Ignoring unreadable reading store file",
                extra={"store": self.name, "source": str(self.persistence_path)},
            )
            readings = []

        for reading in readings:
            self._items[(reading.timestamp, reading.location)] = reading


@lru_cache
def build_default_store(
    name: Optional[str] = None,
    path: Optional[str] = None,
) -> ReadingStore:
    settings = get_settings()
    store_name = settings.store_name if name is None else name
    store_path = settings.store_persistence_path if path is None else path
    persistence = Path(store_path) if store_path else None
    return ReadingStore(name=store_name, persistence_path=persistence)
