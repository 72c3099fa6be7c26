from __future__ import annotations

from pathlib import Path
from typing import Iterable

from datastore.reading_store import build_default_store
from services.climate import build_default_service
from settings import get_settings


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    store_path = tmp_path / "readings.json"
    csv_path = tmp_path / "source.csv"

    monkeypatch.setenv("CLIMATE_SOURCE_CSV", str(csv_path))
    monkeypatch.setenv("CLIMATE_STORE_NAME", "custom-store")
    monkeypatch.setenv("CLIMATE_STORE_PATH", str(store_path))
    monkeypatch.setenv("CLIMATE_DISPLAY_PRECISION", "2")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    caches = (get_settings, build_default_store, build_default_service)
    _clear_caches(caches)

    try:
        settings = get_settings()
        store = build_default_store()
        service = build_default_service()

        assert settings.display_precision == 2
        assert settings.log_level == "DEBUG"
        assert store.name == "custom-store"
        assert store.persistence_path == store_path
        assert service.source_path == Path(csv_path)
        assert service.store is store
        assert service.precision == 2
    finally:
        _clear_caches(caches)


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_DISPLAY_PRECISION", "-3")
    monkeypatch.setenv("CLIMATE_STORE_NAME", "   ")
    monkeypatch.setenv("CLIMATE_STORE_PATH", "")
    get_settings.cache_clear()

    try:
        settings = get_settings()

        assert settings.display_precision == 1
        assert settings.store_name == "readings"
        assert settings.store_persistence_path is None
    finally:
        get_settings.cache_clear()
