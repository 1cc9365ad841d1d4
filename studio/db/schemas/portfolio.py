from typing import Any, Dict

from pydantic import ConfigDict, Field

from .base import CamelModel


class PortfolioItemBase(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=50)


class PortfolioItemCreate(PortfolioItemBase):
    pass


class PortfolioItemUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    image: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1, max_length=50)

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied; explicit nulls count as omitted."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PortfolioItem(PortfolioItemBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
