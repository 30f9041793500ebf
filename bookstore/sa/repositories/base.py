# bookstore/sa/repositories/base.py
from typing import TypeVar, Generic, Optional, List, Type
from sqlalchemy.orm import Session

from bookstore.sa.models import Base

T = TypeVar('T', bound=Base)

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` matches literally"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: Optional[str]) -> str:
    """Lowercased LIKE pattern matching any text that contains ``value``"""
    return f"%{escape_like((value or '').lower())}%"


class BaseRepository(Generic[T]):
    """Persistence primitives shared by every entity repository.

    Repositories flush but never commit; the calling service owns the
    transaction. A missing row is reported as ``None``, never as an exception.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[T]:
        return self.session.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, id_value: int) -> Optional[T]:
        return self.session.get(self.model, id_value)

    def save(self, entity: T) -> T:
        """Persist a new or modified entity; assigns the id on first save"""
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity: T) -> None:
        self.session.delete(entity)
        self.session.flush()
