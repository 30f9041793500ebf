# bookstore/models/book.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .author import AuthorSummary
from .genre import GenreSummary


class BookBase(BaseModel):
    """Scalar fields of a book, as supplied when adding a book to an author"""
    title: str = Field(min_length=1, max_length=255)
    isbn: str = Field(min_length=1, max_length=32)
    page_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(str_strip_whitespace=True)


class BookCreate(BookBase):
    author_id: int


class BookUpdate(BaseModel):
    """Patch for a book. Author and genres are changed through their own operations."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    isbn: Optional[str] = Field(default=None, min_length=1, max_length=32)
    page_count: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(str_strip_whitespace=True)


class BookSummary(BaseModel):
    id: int
    title: str
    isbn: str
    page_count: int

    model_config = ConfigDict(from_attributes=True)


class BookSchema(BookSummary):
    author: AuthorSummary
    genres: List[GenreSummary] = []

    @field_validator('genres', mode='before')
    @classmethod
    def order_genres(cls, value):
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=lambda g: (g.name, g.id))
        return value
