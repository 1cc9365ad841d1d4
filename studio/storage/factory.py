"""Select and build the content store configured for this process."""
from __future__ import annotations

import logging
from typing import Optional

from studio.storage.base import ContentStore
from studio.storage.database import DatabaseStore
from studio.storage.memory import MemoryStore
from studio.utils.settings import STORAGE_BACKENDS, StudioSettings, get_settings

logger = logging.getLogger(__name__)


def create_store(settings: Optional[StudioSettings] = None) -> ContentStore:
    """Build a store for ``settings.storage_backend``.

    Raises ``ValueError`` for an unknown backend name so misconfiguration
    fails at startup rather than on the first request.
    """
    settings = settings or get_settings()
    backend = settings.storage_backend
    if backend == "memory":
        store: ContentStore = MemoryStore()
    elif backend == "database":
        store = DatabaseStore.from_url(settings.database_url, create_tables=settings.auto_create_schema)
    else:
        raise ValueError(
            f"Unknown storage backend '{backend}'. Expected one of: {', '.join(STORAGE_BACKENDS)}"
        )
    logger.info("content_store_ready: backend=%s", store.backend_name)
    return store
