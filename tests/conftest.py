import pytest
from fastapi.testclient import TestClient

from studio.api.main import create_app
from studio.storage import DatabaseStore, MemoryStore
from studio.utils.settings import StudioSettings, refresh_settings_cache

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"

_SETTINGS_ENV = [
    "STUDIO_STORAGE_BACKEND",
    "STUDIO_AUTO_CREATE_SCHEMA",
    "STUDIO_SEED_PORTFOLIO",
    "STUDIO_CORS_ORIGINS",
    "DATABASE_URL",
    "LOG_LEVEL",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
]


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep the developer's environment from leaking into settings."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def db_store():
    store = DatabaseStore.from_url(SQLITE_MEMORY_URL, create_tables=True)
    try:
        yield store
    finally:
        store.close()


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Run a test once against each content store variant."""
    if request.param == "memory":
        s = MemoryStore()
    else:
        s = DatabaseStore.from_url(SQLITE_MEMORY_URL, create_tables=True)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client(store):
    app = create_app(store=store, settings=StudioSettings())
    return TestClient(app)


@pytest.fixture
def memory_client(memory_store):
    app = create_app(store=memory_store, settings=StudioSettings())
    return TestClient(app)
