from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_SOURCE_CSV_ENV = "CLIMATE_SOURCE_CSV"
_STORE_NAME_ENV = "CLIMATE_STORE_NAME"
_STORE_PATH_ENV = "CLIMATE_STORE_PATH"
_PRECISION_ENV = "CLIMATE_DISPLAY_PRECISION"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    source_csv_path: str
    store_name: str
    store_persistence_path: Optional[str]
    display_precision: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_precision(default: int) -> int:
    value = os.getenv(_PRECISION_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        source_csv_path=_read_str_env(_SOURCE_CSV_ENV, "./data/TempFuktData.csv"),
        store_name=_read_str_env(_STORE_NAME_ENV, "readings"),
        store_persistence_path=_read_optional_env(_STORE_PATH_ENV, "./tmp/readings.json"),
        display_precision=_read_precision(1),
        log_level=_read_log_level("INFO"),
    )
