# bookstore/sa/models/book.py
from sqlalchemy import Column, String, Integer, ForeignKey, Table
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base
from .genre import Genre

book_genres = Table(
    'book_genres',
    Base.metadata,
    Column('book_id', Integer, ForeignKey('books.id'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id'), primary_key=True),
)


class Book(Base):
    __tablename__ = 'books'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id'), nullable=False)

    # Relationships
    author = relationship('Author', back_populates='books')
    _genres = relationship(
        'Genre',
        secondary=book_genres,
        back_populates='_books',
        collection_class=set,
    )

    @property
    def genres(self) -> frozenset:
        """Genres attached to this book (read-only view)"""
        return frozenset(self._genres)

    def attach_genre(self, genre: Genre | None) -> None:
        """Associate a genre with this book, keeping both sides in sync.

        A ``None`` genre is ignored. Calling this twice with the same genre
        leaves the association unchanged.
        """
        if genre is None:
            return
        self._genres.add(genre)
        if self not in genre._books:
            genre._books.add(self)

    def detach_genre(self, genre: Genre | None) -> None:
        """Remove a genre from this book and the book from the genre.

        A ``None`` genre or a genre that is not attached is ignored.
        """
        if genre is None:
            return
        self._genres.discard(genre)
        if self in genre._books:
            genre._books.discard(self)

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r} isbn={self.isbn!r}>"
