"""
Contact repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from studio.db import models, schemas


def create_contact(db: Session, contact: schemas.ContactCreate):
    db_contact = models.Contact(**contact.model_dump())
    db.add(db_contact)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_contact)
    return db_contact


def get_contacts(db: Session):
    return db.query(models.Contact).order_by(models.Contact.id).all()
