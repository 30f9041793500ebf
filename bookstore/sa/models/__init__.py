# bookstore/sa/models/__init__.py
from .base import Base
from .author import Author
from .genre import Genre
from .book import Book, book_genres

__all__ = [
    'Base',
    'Author',
    'Book',
    'Genre',
    'book_genres',
]
