# bookstore/models/__init__.py
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bookstore.errors import ValidationFailedError
from .author import AuthorCreate, AuthorUpdate, AuthorSummary, AuthorSchema
from .genre import GenreCreate, GenreUpdate, GenreSummary, GenreSchema, BookRef
from .book import BookBase, BookCreate, BookUpdate, BookSummary, BookSchema

M = TypeVar('M', bound=BaseModel)


def parse_input(schema: Type[M], data: Mapping[str, Any]) -> M:
    """Validate raw input into ``schema``, raising ValidationFailedError on failure"""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationFailedError(f"{field}: {first['msg']}" if field else first["msg"], field=field) from e


__all__ = [
    'parse_input',
    'AuthorCreate',
    'AuthorUpdate',
    'AuthorSummary',
    'AuthorSchema',
    'BookBase',
    'BookRef',
    'BookCreate',
    'BookUpdate',
    'BookSummary',
    'BookSchema',
    'GenreCreate',
    'GenreUpdate',
    'GenreSummary',
    'GenreSchema',
]
