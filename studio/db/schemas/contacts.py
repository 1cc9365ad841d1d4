from pydantic import ConfigDict, Field

from .base import CamelModel, UtcDatetime


class ContactBase(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactCreate(ContactBase):
    pass


class Contact(ContactBase):
    id: int
    created_at: UtcDatetime
    model_config = ConfigDict(from_attributes=True)
