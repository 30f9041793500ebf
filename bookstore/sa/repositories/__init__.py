# bookstore/sa/repositories/__init__.py
from .base import BaseRepository
from .book import BookRepository
from .author import AuthorRepository
from .genre import GenreRepository

__all__ = ['BaseRepository', 'BookRepository', 'AuthorRepository', 'GenreRepository']
