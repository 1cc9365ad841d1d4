"""
In-memory content store.

Records live in per-kind dicts keyed by id for the lifetime of the process;
ids come from per-kind counters starting at 1. Dict insertion order gives
list operations their insertion ordering.
"""
from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from studio.db import schemas
from studio.db.models import now_utc
from studio.storage.base import ContentStore

logger = logging.getLogger(__name__)


class MemoryStore(ContentStore):
    backend_name = "memory"

    def __init__(self) -> None:
        self._users: Dict[int, schemas.User] = {}
        self._contacts: Dict[int, schemas.Contact] = {}
        self._bookings: Dict[int, schemas.Booking] = {}
        self._portfolio: Dict[int, schemas.PortfolioItem] = {}
        self._user_ids = itertools.count(1)
        self._contact_ids = itertools.count(1)
        self._booking_ids = itertools.count(1)
        self._portfolio_ids = itertools.count(1)

    # Users
    def get_user(self, user_id: int) -> Optional[schemas.User]:
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy()
        return None

    def create_user(self, user: schemas.UserCreate) -> schemas.User:
        record = schemas.User(id=next(self._user_ids), **user.model_dump())
        self._users[record.id] = record
        logger.info("user_created id=%s", record.id)
        return record.model_copy()

    # Contacts
    def create_contact(self, contact: schemas.ContactCreate) -> schemas.Contact:
        record = schemas.Contact(id=next(self._contact_ids), created_at=now_utc(), **contact.model_dump())
        self._contacts[record.id] = record
        logger.info("contact_created id=%s", record.id)
        return record.model_copy()

    def get_contacts(self) -> List[schemas.Contact]:
        return [c.model_copy() for c in self._contacts.values()]

    # Bookings
    def create_booking(self, booking: schemas.BookingCreate) -> schemas.Booking:
        record = schemas.Booking(id=next(self._booking_ids), created_at=now_utc(), **booking.model_dump())
        self._bookings[record.id] = record
        logger.info("booking_created id=%s service=%s", record.id, record.service)
        return record.model_copy()

    def get_bookings(self) -> List[schemas.Booking]:
        return [b.model_copy() for b in self._bookings.values()]

    # Portfolio
    def get_portfolio_items(self) -> List[schemas.PortfolioItem]:
        return [p.model_copy() for p in self._portfolio.values()]

    def create_portfolio_item(self, item: schemas.PortfolioItemCreate) -> schemas.PortfolioItem:
        record = schemas.PortfolioItem(id=next(self._portfolio_ids), **item.model_dump())
        self._portfolio[record.id] = record
        logger.info("portfolio_item_created id=%s category=%s", record.id, record.category)
        return record.model_copy()

    def update_portfolio_item(
        self, item_id: int, item: schemas.PortfolioItemUpdate
    ) -> Optional[schemas.PortfolioItem]:
        current = self._portfolio.get(item_id)
        if current is None:
            return None
        changes = item.changes()
        updated = current.model_copy(update=changes)
        self._portfolio[item_id] = updated
        logger.info("portfolio_item_updated id=%s fields=%s", item_id, sorted(changes))
        return updated.model_copy()

    def delete_portfolio_item(self, item_id: int) -> None:
        if self._portfolio.pop(item_id, None) is not None:
            logger.info("portfolio_item_deleted id=%s", item_id)
