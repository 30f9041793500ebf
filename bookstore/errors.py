# bookstore/errors.py
from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base class for failures surfaced by the service layer.

    Every failure carries a ``kind`` so callers can tell a missing entity
    from a bad request or a storage fault without parsing messages.
    """

    kind = "catalog_error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "context": self.context}


class NotFoundError(CatalogError):
    """The referenced entity id does not exist"""

    kind = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} not found with id: {entity_id}",
            {"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailedError(CatalogError):
    """A required field is missing or a uniqueness constraint would be violated"""

    kind = "validation_failed"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else {})
        self.field = field


class PersistenceError(CatalogError):
    """The storage layer failed; fatal for the current operation"""

    kind = "persistence_failure"
