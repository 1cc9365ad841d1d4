from pydantic import ConfigDict, Field

from .base import CamelModel


class UserBase(CamelModel):
    username: str = Field(min_length=1, max_length=150)


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class User(UserBase):
    id: int
    password: str
    model_config = ConfigDict(from_attributes=True)


class UserPublic(UserBase):
    """User as returned over HTTP; the password never leaves the service."""

    id: int
    model_config = ConfigDict(from_attributes=True)
