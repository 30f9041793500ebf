# bookstore/sa/repositories/author.py
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..models import Author
from .base import BaseRepository, LIKE_ESCAPE, contains_pattern


class AuthorRepository(BaseRepository[Author]):
    model = Author

    def __init__(self, session: Session):
        super().__init__(session)

    def find_by_name_containing_ignore_case(self, name: str) -> List[Author]:
        """Authors whose name contains ``name``; wildcards in ``name`` match literally"""
        return (
            self.session.query(Author)
            .filter(func.lower(Author.name).like(contains_pattern(name), escape=LIKE_ESCAPE))
            .order_by(Author.id)
            .all()
        )
