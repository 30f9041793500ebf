# bookstore/sa/repositories/genre.py

from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from bookstore.sa.models import Genre
from .base import BaseRepository, LIKE_ESCAPE, contains_pattern


class GenreRepository(BaseRepository[Genre]):
    """Repository for managing Genre entities."""

    model = Genre

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        super().__init__(session)

    def find_by_name_containing_ignore_case(self, name: str) -> List[Genre]:
        """Find genres whose name contains a substring.

        Args:
            name: Substring to look for, compared case-insensitively.
                ``%`` and ``_`` are matched literally.

        Returns:
            Every matching Genre, ordered by id
        """
        return (
            self.session.query(Genre)
            .filter(func.lower(Genre.name).like(contains_pattern(name), escape=LIKE_ESCAPE))
            .order_by(Genre.id)
            .all()
        )
