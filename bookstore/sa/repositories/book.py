# bookstore/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..models import Book
from .base import BaseRepository, LIKE_ESCAPE, contains_pattern


class BookRepository(BaseRepository[Book]):
    model = Book

    def __init__(self, session: Session):
        super().__init__(session)

    def find_by_author_id(self, author_id: int) -> List[Book]:
        """Get all books owned by an author.

        Args:
            author_id: The id of the owning author

        Returns:
            List of Book objects, empty if the author owns none
        """
        return (
            self.session.query(Book)
            .filter(Book.author_id == author_id)
            .order_by(Book.id)
            .all()
        )

    def find_by_title_containing_ignore_case(self, title: str) -> List[Book]:
        """Get books whose title contains ``title``, ignoring case.

        Both sides are lowered rather than using ``ilike`` so the match
        behaves the same on SQLite and PostgreSQL.
        """
        return (
            self.session.query(Book)
            .filter(func.lower(Book.title).like(contains_pattern(title), escape=LIKE_ESCAPE))
            .order_by(Book.id)
            .all()
        )

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()
