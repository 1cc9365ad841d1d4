"""Default portfolio entries shown before an admin curates their own."""
from __future__ import annotations

import logging
from typing import List

from studio.db import schemas
from studio.storage.base import ContentStore

logger = logging.getLogger(__name__)

_UNSPLASH_PARAMS = (
    "ixlib=rb-4.0.3&ixid=MnwxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8"
    "&auto=format&fit=crop&w=800&h=600"
)


def _unsplash(photo_id: str) -> str:
    return f"https://images.unsplash.com/{photo_id}?{_UNSPLASH_PARAMS}"


DEFAULT_PORTFOLIO: List[schemas.PortfolioItemCreate] = [
    schemas.PortfolioItemCreate(
        title="Studio Equipment",
        description="Professional-grade equipment for tech photography",
        image=_unsplash("photo-1606983340126-99ab4feaa64a"),
        category="equipment",
    ),
    schemas.PortfolioItemCreate(
        title="Tech Innovation",
        description="Capturing cutting-edge technology and innovation",
        image=_unsplash("photo-1518709268805-4e9042af2176"),
        category="technology",
    ),
    schemas.PortfolioItemCreate(
        title="Team Collaboration",
        description="Dynamic team interactions and collaborative moments",
        image=_unsplash("photo-1552664730-d307ca884978"),
        category="team",
    ),
    schemas.PortfolioItemCreate(
        title="Creative Spaces",
        description="Inspiring workspaces that foster creativity",
        image=_unsplash("photo-1497366811353-6870744d04b2"),
        category="workspace",
    ),
    schemas.PortfolioItemCreate(
        title="Studio Sessions",
        description="Professional studio photography sessions",
        image=_unsplash("photo-1493225457124-a3eb161ffa5f"),
        category="studio",
    ),
    schemas.PortfolioItemCreate(
        title="Tech Workspaces",
        description="Modern technology environments and setups",
        image=_unsplash("photo-1498050108023-c5249f4df085"),
        category="workspace",
    ),
]


def seed_default_portfolio(store: ContentStore) -> int:
    """Insert the default items when the portfolio is empty; returns how many were added."""
    if store.get_portfolio_items():
        return 0
    for item in DEFAULT_PORTFOLIO:
        store.create_portfolio_item(item)
    logger.info("portfolio_seeded count=%d", len(DEFAULT_PORTFOLIO))
    return len(DEFAULT_PORTFOLIO)
