# api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.sa.database import get_db
from bookstore.services import AuthorService, BookService, GenreService


def get_author_service(db: Session = Depends(get_db)) -> AuthorService:
    return AuthorService(db)


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(db)


def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService(db)
