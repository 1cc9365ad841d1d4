"""
Booking form endpoints and the service catalogue behind its dropdown.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from studio.db import schemas
from studio.api.deps import get_store
from studio.storage import ContentStore

router = APIRouter(tags=["bookings"])


@router.post("/booking", response_model=schemas.Booking, status_code=status.HTTP_201_CREATED)
def create_booking_endpoint(
    booking: schemas.BookingCreate,
    store: ContentStore = Depends(get_store),
):
    return store.create_booking(booking)


@router.get("/bookings", response_model=List[schemas.Booking])
def list_bookings_endpoint(store: ContentStore = Depends(get_store)):
    return store.get_bookings()


@router.get("/services", response_model=List[schemas.BookingService])
def list_services_endpoint():
    return [
        schemas.BookingService(slug=slug, label=label)
        for slug, label in schemas.BOOKING_SERVICES.items()
    ]
