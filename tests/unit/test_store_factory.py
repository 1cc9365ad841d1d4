import logging

import pytest

from studio.storage import DatabaseStore, MemoryStore, create_store
from studio.utils.settings import StudioSettings, get_settings, refresh_settings_cache


def test_memory_backend():
    store = create_store(StudioSettings(storage_backend="memory"))
    assert isinstance(store, MemoryStore)


def test_database_backend_creates_schema():
    store = create_store(StudioSettings(storage_backend="database", database_url="sqlite+pysqlite:///:memory:"))
    try:
        assert isinstance(store, DatabaseStore)
        assert store.get_contacts() == []
    finally:
        store.close()


def test_unknown_backend_rejected():
    with pytest.raises(ValueError, match="redis"):
        create_store(StudioSettings(storage_backend="redis"))


def test_defaults_to_environment_settings(monkeypatch):
    monkeypatch.setenv("STUDIO_STORAGE_BACKEND", "memory")
    refresh_settings_cache()
    assert get_settings().storage_backend == "memory"
    assert isinstance(create_store(), MemoryStore)


def test_logs_selected_backend(caplog):
    caplog.set_level(logging.INFO, logger="studio.storage.factory")
    create_store(StudioSettings(storage_backend="memory"))
    assert any("backend=memory" in r.getMessage() for r in caplog.records)
