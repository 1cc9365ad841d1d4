"""
Relational content store.

Delegates every operation to the per-entity repositories, one short-lived
SQLAlchemy session per call. ORM rows are converted to Pydantic read schemas
before the session closes, so callers never hold live ORM instances.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from studio.db import schemas
from studio.db.database import build_engine, build_session_factory, create_schema, session_scope
from studio.db.repositories import bookings as repo_bookings
from studio.db.repositories import contacts as repo_contacts
from studio.db.repositories import portfolio as repo_portfolio
from studio.db.repositories import users as repo_users
from studio.storage.base import ContentStore

logger = logging.getLogger(__name__)

# Integer primary keys are signed 64-bit; anything outside cannot match a row.
_ROW_IDS = range(-(2**63), 2**63)


class DatabaseStore(ContentStore):
    backend_name = "database"

    def __init__(self, engine: Engine, session_factory: Optional[sessionmaker] = None):
        self.engine = engine
        self._session_factory = session_factory or build_session_factory(engine)

    @classmethod
    def from_url(cls, url: str, *, create_tables: bool = False) -> "DatabaseStore":
        engine = build_engine(url)
        if create_tables:
            create_schema(engine)
        return cls(engine)

    # Users
    def get_user(self, user_id: int) -> Optional[schemas.User]:
        if user_id not in _ROW_IDS:
            return None
        with session_scope(self._session_factory) as db:
            row = repo_users.get_user(db, user_id)
            return schemas.User.model_validate(row) if row is not None else None

    def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        with session_scope(self._session_factory) as db:
            row = repo_users.get_user_by_username(db, username)
            return schemas.User.model_validate(row) if row is not None else None

    def create_user(self, user: schemas.UserCreate) -> schemas.User:
        with session_scope(self._session_factory) as db:
            row = repo_users.create_user(db, user)
            logger.info("user_created id=%s", row.id)
            return schemas.User.model_validate(row)

    # Contacts
    def create_contact(self, contact: schemas.ContactCreate) -> schemas.Contact:
        with session_scope(self._session_factory) as db:
            row = repo_contacts.create_contact(db, contact)
            logger.info("contact_created id=%s", row.id)
            return schemas.Contact.model_validate(row)

    def get_contacts(self) -> List[schemas.Contact]:
        with session_scope(self._session_factory) as db:
            return [schemas.Contact.model_validate(r) for r in repo_contacts.get_contacts(db)]

    # Bookings
    def create_booking(self, booking: schemas.BookingCreate) -> schemas.Booking:
        with session_scope(self._session_factory) as db:
            row = repo_bookings.create_booking(db, booking)
            logger.info("booking_created id=%s service=%s", row.id, row.service)
            return schemas.Booking.model_validate(row)

    def get_bookings(self) -> List[schemas.Booking]:
        with session_scope(self._session_factory) as db:
            return [schemas.Booking.model_validate(r) for r in repo_bookings.get_bookings(db)]

    # Portfolio
    def get_portfolio_items(self) -> List[schemas.PortfolioItem]:
        with session_scope(self._session_factory) as db:
            return [schemas.PortfolioItem.model_validate(r) for r in repo_portfolio.get_portfolio_items(db)]

    def create_portfolio_item(self, item: schemas.PortfolioItemCreate) -> schemas.PortfolioItem:
        with session_scope(self._session_factory) as db:
            row = repo_portfolio.create_portfolio_item(db, item)
            logger.info("portfolio_item_created id=%s category=%s", row.id, row.category)
            return schemas.PortfolioItem.model_validate(row)

    def update_portfolio_item(
        self, item_id: int, item: schemas.PortfolioItemUpdate
    ) -> Optional[schemas.PortfolioItem]:
        if item_id not in _ROW_IDS:
            return None
        with session_scope(self._session_factory) as db:
            row = repo_portfolio.update_portfolio_item(db, item_id, item)
            if row is None:
                return None
            logger.info("portfolio_item_updated id=%s fields=%s", item_id, sorted(item.changes()))
            return schemas.PortfolioItem.model_validate(row)

    def delete_portfolio_item(self, item_id: int) -> None:
        if item_id not in _ROW_IDS:
            return
        with session_scope(self._session_factory) as db:
            if repo_portfolio.delete_portfolio_item(db, item_id):
                logger.info("portfolio_item_deleted id=%s", item_id)

    def close(self) -> None:
        self.engine.dispose()
