from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel, UtcDatetime

# Services offered on the booking form, slug -> display label.
BOOKING_SERVICES = {
    "studio": "Studio Photography",
    "tech": "Tech Photography",
    "team": "Team Photography",
    "corporate": "Corporate Events",
    "video": "Video Production",
    "postproduction": "Post-Production",
}


class BookingBase(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(min_length=1)
    service: str
    message: str = Field(min_length=1)


class BookingCreate(BookingBase):
    @field_validator("service")
    @classmethod
    def _known_service(cls, value: str) -> str:
        if value not in BOOKING_SERVICES:
            raise ValueError(f"unknown service '{value}'; expected one of {sorted(BOOKING_SERVICES)}")
        return value


class Booking(BookingBase):
    id: int
    created_at: UtcDatetime
    model_config = ConfigDict(from_attributes=True)


class BookingService(CamelModel):
    slug: str
    label: str
