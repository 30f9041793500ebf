# bookstore/services/genre_service.py

from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from bookstore.models import GenreCreate, GenreUpdate
from bookstore.sa.models import Genre
from bookstore.sa.repositories import GenreRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class GenreService(BaseService):
    def __init__(self, session: Session, conflict_retries: Optional[int] = None):
        super().__init__(session, conflict_retries)
        self.genres = GenreRepository(session)

    def list_genres(self, name: Optional[str] = None) -> List[Genre]:
        with self.unit_of_work():
            if name:
                return self.genres.find_by_name_containing_ignore_case(name)
            return self.genres.find_all()

    def get_genre(self, genre_id: int) -> Genre:
        with self.unit_of_work():
            return self.load_or_fail(self.genres, "Genre", genre_id)

    def create_genre(self, data: GenreCreate) -> Genre:
        with self.unit_of_work():
            genre = self.genres.save(Genre(name=data.name))
        logger.info("Created genre %s (%r)", genre.id, genre.name)
        return genre

    def update_genre(self, genre_id: int, patch: GenreUpdate) -> Genre:
        with self.unit_of_work():
            genre = self.load_or_fail(self.genres, "Genre", genre_id)
            if patch.name is not None:
                genre.name = patch.name
            self.genres.save(genre)
        logger.info("Updated genre %s", genre_id)
        return genre

    def delete_genre(self, genre_id: int) -> None:
        """Delete a genre; books carrying it lose the genre but are kept"""
        with self.unit_of_work():
            genre = self.load_or_fail(self.genres, "Genre", genre_id)
            books = genre.books
            for book in books:
                book.detach_genre(genre)
            self.genres.delete(genre)
        logger.info("Deleted genre %s (detached from %d book(s))", genre_id, len(books))
