"""
Portfolio item repository functions.

Implements create/read/update/delete for portfolio items. Updates merge only
the fields present on the update payload; deletes are idempotent.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from studio.db import models, schemas


def get_portfolio_items(db: Session):
    return db.query(models.PortfolioItem).order_by(models.PortfolioItem.id).all()


def create_portfolio_item(db: Session, item: schemas.PortfolioItemCreate):
    db_item = models.PortfolioItem(**item.model_dump())
    db.add(db_item)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_item)
    return db_item


def update_portfolio_item(db: Session, item_id: int, item: schemas.PortfolioItemUpdate):
    """Apply a partial update; returns None when ``item_id`` does not exist."""
    db_item = db.get(models.PortfolioItem, item_id)
    if db_item is None:
        return None
    for key, value in item.changes().items():
        setattr(db_item, key, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_item)
    return db_item


def delete_portfolio_item(db: Session, item_id: int) -> bool:
    """Delete by id; returns whether a row was removed. Missing ids are not an error."""
    try:
        deleted = (
            db.query(models.PortfolioItem)
            .filter(models.PortfolioItem.id == item_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    return deleted > 0
