# bookstore/sa/__init__.py
from .database import Database
from .models import Base, Author, Book, Genre, book_genres

__all__ = [
    'Database',
    'Base',
    'Author',
    'Book',
    'Genre',
    'book_genres',
]
