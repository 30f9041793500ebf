# bookstore/models/author.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    biography: Optional[str] = None

    model_config = ConfigDict(str_strip_whitespace=True)


class AuthorUpdate(BaseModel):
    """Patch for an author; only ``name`` may be changed"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)


class AuthorSummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class AuthorSchema(AuthorSummary):
    biography: Optional[str] = None
