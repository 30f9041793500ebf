# bookstore/services/__init__.py
from .base import BaseService
from .author_service import AuthorService
from .book_service import BookService
from .genre_service import GenreService

__all__ = ['BaseService', 'AuthorService', 'BookService', 'GenreService']
