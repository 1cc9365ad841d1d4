"""
Pydantic schemas for the studio records.

Create/update schemas validate caller input; read schemas are the
detached copies handed out by the content store.
"""

from .base import CamelModel, UtcDatetime
from .users import UserBase, UserCreate, User, UserPublic
from .contacts import ContactBase, ContactCreate, Contact
from .bookings import BOOKING_SERVICES, BookingBase, BookingCreate, Booking, BookingService
from .portfolio import (
    PortfolioItemBase,
    PortfolioItemCreate,
    PortfolioItemUpdate,
    PortfolioItem,
)

__all__ = [
    "CamelModel",
    "UtcDatetime",
    # Users
    "UserBase",
    "UserCreate",
    "User",
    "UserPublic",
    # Contacts
    "ContactBase",
    "ContactCreate",
    "Contact",
    # Bookings
    "BOOKING_SERVICES",
    "BookingBase",
    "BookingCreate",
    "Booking",
    "BookingService",
    # Portfolio
    "PortfolioItemBase",
    "PortfolioItemCreate",
    "PortfolioItemUpdate",
    "PortfolioItem",
]
