"""
Database engine and session management.

Builds SQLAlchemy engines and session factories from a URL. Nothing here is
created at import time: the persistent content store owns its engine and
the application entry point owns the store.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:"):
        # In-memory SQLite with StaticPool so the schema persists across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


def build_engine(url: str) -> Engine:
    """Create an engine for ``url`` with dialect-appropriate pool settings."""
    engine = create_engine(url, **_engine_kwargs(url))
    logger.debug("engine_created: dialect=%s", engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def create_schema(engine: Engine) -> None:
    """Create all studio tables that do not exist yet."""
    from studio.db import models  # local import keeps engine helpers model-agnostic

    models.Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Yield a session and always close it."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
