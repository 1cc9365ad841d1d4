"""
SQLAlchemy models for the studio content tables.

Exposes `Base`, `now_utc`, and one ORM class per stored entity.
"""

from .base import Base, now_utc  # re-export

from .users import User
from .contacts import Contact
from .bookings import Booking
from .portfolio import PortfolioItem

__all__ = [
    # base
    "Base",
    "now_utc",
    # entities
    "User",
    "Contact",
    "Booking",
    "PortfolioItem",
]
