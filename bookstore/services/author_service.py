# bookstore/services/author_service.py

from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from bookstore.models import AuthorCreate, AuthorUpdate, BookBase
from bookstore.sa.models import Author, Book
from bookstore.sa.repositories import AuthorRepository
from .base import BaseService
from .book_service import BookService

logger = logging.getLogger(__name__)


class AuthorService(BaseService):
    def __init__(self, session: Session, conflict_retries: Optional[int] = None):
        super().__init__(session, conflict_retries)
        self.authors = AuthorRepository(session)
        self.book_service = BookService(session, conflict_retries)

    def list_authors(self, name: Optional[str] = None) -> List[Author]:
        """All authors, or those whose name contains ``name``"""
        with self.unit_of_work():
            if name:
                return self.authors.find_by_name_containing_ignore_case(name)
            return self.authors.find_all()

    def get_author(self, author_id: int) -> Author:
        with self.unit_of_work():
            return self.load_or_fail(self.authors, "Author", author_id)

    def create_author(self, data: AuthorCreate) -> Author:
        with self.unit_of_work():
            author = self.authors.save(Author(name=data.name, biography=data.biography))
        logger.info("Created author %s (%r)", author.id, author.name)
        return author

    def update_author(self, author_id: int, patch: AuthorUpdate) -> Author:
        with self.unit_of_work():
            author = self.load_or_fail(self.authors, "Author", author_id)
            if patch.name is not None:
                author.name = patch.name
            self.authors.save(author)
        logger.info("Updated author %s", author_id)
        return author

    def delete_author(self, author_id: int) -> int:
        """Delete an author together with every book it owns.

        Returns:
            Number of books removed along with the author
        """
        with self.unit_of_work():
            author = self.load_or_fail(self.authors, "Author", author_id)
            books = self.book_service.books.find_by_author_id(author_id)
            for book in books:
                self.book_service.remove_book(book)
            self.session.expire(author, ['books'])
            self.authors.delete(author)
        logger.info("Deleted author %s and %d owned book(s)", author_id, len(books))
        return len(books)

    def list_books_by_author(self, author_id: int) -> List[Book]:
        with self.unit_of_work():
            self.load_or_fail(self.authors, "Author", author_id)
            return self.book_service.books.find_by_author_id(author_id)

    def add_book_to_author(self, author_id: int, data: BookBase) -> Book:
        """Create a new book owned by the author. Existing books are never moved."""
        with self.unit_of_work():
            author = self.load_or_fail(self.authors, "Author", author_id)
            book = self.book_service.new_book(author, data)
        logger.info("Added book %s (%r) to author %s", book.id, book.title, author_id)
        return book
