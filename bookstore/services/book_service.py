# bookstore/services/book_service.py

from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from bookstore.errors import ValidationFailedError
from bookstore.models import BookBase, BookCreate, BookUpdate
from bookstore.sa.models import Author, Book
from bookstore.sa.repositories import AuthorRepository, BookRepository, GenreRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class BookService(BaseService):
    def __init__(self, session: Session, conflict_retries: Optional[int] = None):
        super().__init__(session, conflict_retries)
        self.books = BookRepository(session)
        self.authors = AuthorRepository(session)
        self.genres = GenreRepository(session)

    def list_books(self) -> List[Book]:
        with self.unit_of_work():
            return self.books.find_all()

    def search_books(self, title: str) -> List[Book]:
        """Books whose title contains ``title``, case-insensitively"""
        with self.unit_of_work():
            return self.books.find_by_title_containing_ignore_case(title)

    def get_book(self, book_id: int) -> Book:
        with self.unit_of_work():
            return self.load_or_fail(self.books, "Book", book_id)

    def create_book(self, data: BookCreate) -> Book:
        with self.unit_of_work():
            author = self.load_or_fail(self.authors, "Author", data.author_id)
            book = self.new_book(author, data)
        logger.info("Created book %s (%r) for author %s", book.id, book.title, author.id)
        return book

    def update_book(self, book_id: int, patch: BookUpdate) -> Book:
        """Overwrite the scalar fields set on ``patch``; author and genres are untouched"""
        with self.unit_of_work():
            book = self.load_or_fail(self.books, "Book", book_id)
            changes = patch.model_dump(exclude_unset=True, exclude_none=True)
            if "isbn" in changes and changes["isbn"] != book.isbn:
                self.ensure_isbn_available(changes["isbn"])
            for field, value in changes.items():
                setattr(book, field, value)
            self.books.save(book)
        logger.info("Updated book %s: %s", book_id, sorted(changes))
        return book

    def delete_book(self, book_id: int) -> None:
        with self.unit_of_work():
            book = self.load_or_fail(self.books, "Book", book_id)
            self.remove_book(book)
        logger.info("Deleted book %s", book_id)

    def attach_genre(self, book_id: int, genre_id: int) -> Book:
        def operation() -> Book:
            book = self.load_or_fail(self.books, "Book", book_id)
            genre = self.load_or_fail(self.genres, "Genre", genre_id)
            book.attach_genre(genre)
            return self.books.save(book)

        book = self.run_with_conflict_retry(operation)
        logger.info("Attached genre %s to book %s", genre_id, book_id)
        return book

    def detach_genre(self, book_id: int, genre_id: int) -> Book:
        def operation() -> Book:
            book = self.load_or_fail(self.books, "Book", book_id)
            genre = self.load_or_fail(self.genres, "Genre", genre_id)
            book.detach_genre(genre)
            return self.books.save(book)

        book = self.run_with_conflict_retry(operation)
        logger.info("Detached genre %s from book %s", genre_id, book_id)
        return book

    # Helpers below run inside the caller's unit of work and never commit

    def ensure_isbn_available(self, isbn: str) -> None:
        if self.books.find_by_isbn(isbn) is not None:
            logger.warning("Rejected duplicate isbn %s", isbn)
            raise ValidationFailedError(f"A book with isbn {isbn} already exists", field="isbn")

    def new_book(self, author: Author, data: BookBase) -> Book:
        self.ensure_isbn_available(data.isbn)
        book = Book(
            title=data.title,
            isbn=data.isbn,
            page_count=data.page_count,
            author=author,
        )
        return self.books.save(book)

    def remove_book(self, book: Book) -> None:
        for genre in book.genres:
            book.detach_genre(genre)
        self.books.delete(book)
