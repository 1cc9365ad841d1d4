"""Content store: one interface, in-memory and relational variants."""

from .base import ContentStore
from .memory import MemoryStore
from .database import DatabaseStore
from .factory import create_store
from .seed import DEFAULT_PORTFOLIO, seed_default_portfolio

__all__ = [
    "ContentStore",
    "MemoryStore",
    "DatabaseStore",
    "create_store",
    "DEFAULT_PORTFOLIO",
    "seed_default_portfolio",
]
