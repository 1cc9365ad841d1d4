"""
Booking repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from studio.db import models, schemas


def create_booking(db: Session, booking: schemas.BookingCreate):
    db_booking = models.Booking(**booking.model_dump())
    db.add(db_booking)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_booking)
    return db_booking


def get_bookings(db: Session):
    return db.query(models.Booking).order_by(models.Booking.id).all()
