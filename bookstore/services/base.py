# bookstore/services/base.py
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from bookstore import config
from bookstore.errors import CatalogError, NotFoundError, ValidationFailedError, PersistenceError
from bookstore.sa.repositories import BaseRepository

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _db_error_message(error: SQLAlchemyError) -> str:
    return str(getattr(error, "orig", None) or error)


class BaseService:
    """Shared unit-of-work handling for the catalog services.

    Each public service method is one transaction on ``session``: it either
    commits everything it changed and returns, or rolls back and raises a
    CatalogError.
    """

    def __init__(self, session: Session, conflict_retries: Optional[int] = None):
        self.session = session
        self.conflict_retries = conflict_retries if conflict_retries is not None else config.CONFLICT_RETRIES

    @contextmanager
    def unit_of_work(self) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except CatalogError:
            self.session.rollback()
            raise
        except IntegrityError as e:
            self.session.rollback()
            message = _db_error_message(e)
            logger.warning("Constraint violation: %s", message)
            raise ValidationFailedError(f"Constraint violation: {message}") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Persistence failure")
            raise PersistenceError(f"Persistence failure: {_db_error_message(e)}") from e
        except Exception:
            self.session.rollback()
            raise

    def run_with_conflict_retry(self, operation: Callable[[], T]) -> T:
        """Run ``operation`` and commit, re-running it when the save conflicts.

        ``operation`` must load everything it touches, since a conflict rolls
        the session back and expires all loaded state.
        """
        attempts = max(1, self.conflict_retries)
        last_error: Optional[SQLAlchemyError] = None
        for attempt in range(1, attempts + 1):
            try:
                result = operation()
                self.session.commit()
                return result
            except CatalogError:
                self.session.rollback()
                raise
            except (IntegrityError, StaleDataError) as e:
                self.session.rollback()
                last_error = e
                logger.warning(
                    "Conflicting save (attempt %d/%d): %s", attempt, attempts, _db_error_message(e)
                )
            except SQLAlchemyError as e:
                self.session.rollback()
                logger.exception("Persistence failure")
                raise PersistenceError(f"Persistence failure: {_db_error_message(e)}") from e
            except Exception:
                self.session.rollback()
                raise
        raise PersistenceError(
            f"Save still conflicting after {attempts} attempts: {_db_error_message(last_error)}"
        ) from last_error

    def load_or_fail(self, repository: BaseRepository, entity_name: str, entity_id: int):
        entity = repository.find_by_id(entity_id)
        if entity is None:
            logger.warning("%s %s not found", entity_name, entity_id)
            raise NotFoundError(entity_name, entity_id)
        return entity
