# bookstore/models/genre.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenreCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)


class GenreUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)


class GenreSummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class BookRef(BaseModel):
    id: int
    title: str

    model_config = ConfigDict(from_attributes=True)


class GenreSchema(GenreSummary):
    books: List[BookRef] = []

    @field_validator('books', mode='before')
    @classmethod
    def order_books(cls, value):
        # The ORM hands over an unordered set
        return sorted(value, key=lambda b: b.id) if isinstance(value, (set, frozenset)) else value
