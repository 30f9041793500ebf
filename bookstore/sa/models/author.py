# bookstore/sa/models/author.py
from sqlalchemy import String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base


class Author(Base):
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Owned books. Removal of the books on author deletion is done explicitly
    # by the service layer, not by an ORM cascade.
    books = relationship('Book', back_populates='author')

    def __repr__(self) -> str:
        return f"<Author id={self.id} name={self.name!r}>"
