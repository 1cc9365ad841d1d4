import pytest

from studio.utils.settings import StudioSettings, get_settings, refresh_settings_cache


def test_defaults_without_environment():
    settings = get_settings()
    assert settings == StudioSettings()
    assert settings.storage_backend == "memory"
    assert settings.database_url == "sqlite:///./studio.db"
    assert settings.auto_create_schema is True
    assert settings.seed_portfolio is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STUDIO_STORAGE_BACKEND", " Database ")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/studio")
    monkeypatch.setenv("STUDIO_SEED_PORTFOLIO", "yes")
    monkeypatch.setenv("STUDIO_AUTO_CREATE_SCHEMA", "off")
    monkeypatch.setenv("STUDIO_CORS_ORIGINS", "https://antbros.example, ,http://localhost:5173")
    refresh_settings_cache()

    s = get_settings()
    assert s.storage_backend == "database"
    assert s.database_url == "postgresql://u:p@db:5432/studio"
    assert s.seed_portfolio is True
    assert s.auto_create_schema is False
    assert s.cors_origins == ("https://antbros.example", "http://localhost:5173")


def test_database_url_from_postgres_components(monkeypatch):
    for name, value in {
        "POSTGRES_USER": "studio",
        "POSTGRES_PASSWORD": "pw",
        "POSTGRES_HOST": "db",
        "POSTGRES_PORT": "5432",
        "POSTGRES_DB": "site",
    }.items():
        monkeypatch.setenv(name, value)
    refresh_settings_cache()
    assert get_settings().database_url == "postgresql://studio:pw@db:5432/site"


def test_partial_postgres_components_fall_back_to_sqlite(monkeypatch):
    monkeypatch.setenv("POSTGRES_USER", "studio")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    refresh_settings_cache()
    assert get_settings().database_url.startswith("sqlite")


@pytest.mark.parametrize("raw_value", ["maybe", "junk", "2"])
def test_invalid_bool_falls_back_to_default(monkeypatch, raw_value):
    monkeypatch.setenv("STUDIO_AUTO_CREATE_SCHEMA", raw_value)
    monkeypatch.setenv("STUDIO_SEED_PORTFOLIO", raw_value)
    refresh_settings_cache()
    s = get_settings()
    assert s.auto_create_schema is True
    assert s.seed_portfolio is False


def test_refresh_settings_cache_forces_reload(monkeypatch):
    monkeypatch.setenv("STUDIO_STORAGE_BACKEND", "database")
    refresh_settings_cache()
    assert get_settings().storage_backend == "database"

    # Update env without clearing cache – still should read stale value
    monkeypatch.setenv("STUDIO_STORAGE_BACKEND", "memory")
    assert get_settings().storage_backend == "database"

    refresh_settings_cache()
    assert get_settings().storage_backend == "memory"


def test_log_level_is_not_a_settings_field(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    refresh_settings_cache()
    assert not hasattr(get_settings(), "log_level")
