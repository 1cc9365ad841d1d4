"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


STORAGE_BACKENDS: Tuple[str, ...] = ("memory", "database")

_DEFAULT_DATABASE_URL = "sqlite:///./studio.db"
_DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


@dataclass(frozen=True)
class StudioSettings:
    storage_backend: str = "memory"
    database_url: str = _DEFAULT_DATABASE_URL
    auto_create_schema: bool = True
    seed_portfolio: bool = False
    cors_origins: Tuple[str, ...] = tuple(_DEFAULT_CORS_ORIGINS.split(","))


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _get_database_url() -> str:
    # An explicit DATABASE_URL wins; otherwise assemble one from POSTGRES_*
    # components when all are present, else use a local SQLite file.
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    parts = {
        name: os.getenv(name)
        for name in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")
    }
    if all(parts.values()):
        return "postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}".format(**parts)
    return _DEFAULT_DATABASE_URL


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@lru_cache(maxsize=None)
def get_settings() -> StudioSettings:
    """Return the cached settings read from the environment."""
    return StudioSettings(
        storage_backend=os.getenv("STUDIO_STORAGE_BACKEND", "memory").strip().lower(),
        database_url=_get_database_url(),
        auto_create_schema=_normalize_bool(os.getenv("STUDIO_AUTO_CREATE_SCHEMA"), default=True),
        seed_portfolio=_normalize_bool(os.getenv("STUDIO_SEED_PORTFOLIO"), default=False),
        cors_origins=_split_csv(os.getenv("STUDIO_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
