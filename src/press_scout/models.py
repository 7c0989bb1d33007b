from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .query.types import Availability, EditionCategory


class BookDocument(BaseModel):
    """
    A normalised catalogue record.

    A price of 0 means the price is unknown, not that the book is free.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    author: str
    price: float = Field(ge=0)
    availability: Availability
    edition_type: EditionCategory
    description: str
    url: str
    image_url: str = Field(alias="imageUrl")
    publisher: str = Field(min_length=1)
    reviews: int = Field(ge=0)
    scraped_at: datetime

    # Optional enrichment fields
    currency: Optional[str] = None
    limitation: Optional[int] = Field(default=None, gt=0)
    genre_tags: Optional[List[str]] = None
    illustrator: Optional[str] = None
    binding: Optional[str] = None
    page_count: Optional[int] = Field(default=None, gt=0)
    publication_year: Optional[int] = Field(default=None, ge=1800, le=2100)
    raw_text: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"url must be absolute http(s), got '{value}'")
        return value

    @field_validator("genre_tags")
    @classmethod
    def _lowercase_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return None
        return [tag.strip().lower() for tag in value if tag.strip()]
