# bookstore/sa/models/genre.py
from sqlalchemy import String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base


class Genre(Base):
    __tablename__ = 'genres'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Inverse side of Book._genres; only Book.attach_genre/detach_genre write to it
    _books = relationship(
        'Book',
        secondary='book_genres',
        back_populates='_genres',
        collection_class=set,
    )

    @property
    def books(self) -> frozenset:
        """Books carrying this genre (read-only view)"""
        return frozenset(self._books)

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"
