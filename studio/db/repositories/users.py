"""
User repository functions.

Lookup by primary key or username and plain inserts. Username uniqueness is
backed by the table's unique index, not checked here.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from studio.db import models, schemas


def get_user(db: Session, user_id: int):
    return db.get(models.User, user_id)


def get_user_by_username(db: Session, username: str):
    return (
        db.query(models.User)
        .filter(models.User.username == username)
        .order_by(models.User.id)
        .first()
    )


def create_user(db: Session, user: schemas.UserCreate):
    db_user = models.User(username=user.username, password=user.password)
    db.add(db_user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_user)
    return db_user
