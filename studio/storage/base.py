"""
Content store interface.

One contract for users, contact messages, bookings and portfolio items.
Lookups return ``None`` on a miss instead of raising. Records handed back are
detached copies; mutating them never changes what the store holds.
"""
from __future__ import annotations

import abc
from typing import List, Optional

from studio.db import schemas


class ContentStore(abc.ABC):
    """CRUD over the four studio record kinds."""

    backend_name: str = "abstract"

    # Users
    @abc.abstractmethod
    def get_user(self, user_id: int) -> Optional[schemas.User]:
        ...

    @abc.abstractmethod
    def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        ...

    @abc.abstractmethod
    def create_user(self, user: schemas.UserCreate) -> schemas.User:
        """Insert a user. Does not check for an existing username."""

    # Contacts
    @abc.abstractmethod
    def create_contact(self, contact: schemas.ContactCreate) -> schemas.Contact:
        ...

    @abc.abstractmethod
    def get_contacts(self) -> List[schemas.Contact]:
        ...

    # Bookings
    @abc.abstractmethod
    def create_booking(self, booking: schemas.BookingCreate) -> schemas.Booking:
        ...

    @abc.abstractmethod
    def get_bookings(self) -> List[schemas.Booking]:
        ...

    # Portfolio
    @abc.abstractmethod
    def get_portfolio_items(self) -> List[schemas.PortfolioItem]:
        ...

    @abc.abstractmethod
    def create_portfolio_item(self, item: schemas.PortfolioItemCreate) -> schemas.PortfolioItem:
        ...

    @abc.abstractmethod
    def update_portfolio_item(
        self, item_id: int, item: schemas.PortfolioItemUpdate
    ) -> Optional[schemas.PortfolioItem]:
        """Merge the supplied fields into an existing item.

        Returns ``None`` when ``item_id`` does not exist.
        """

    @abc.abstractmethod
    def delete_portfolio_item(self, item_id: int) -> None:
        """Remove an item. Deleting a missing id is a no-op."""

    def close(self) -> None:
        """Release backend resources."""
