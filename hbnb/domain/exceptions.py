"""
Domain Exceptions
=================

Typed errors raised by the core. Every error carries the offending field
or id so a presentation layer can map it (status codes, messages) without
inspecting internals.

- ValidationError: malformed or out-of-range field, raised before any
  repository access
- ConflictError: uniqueness, duplicate-review or eligibility violation
- NotFoundError: a referenced id does not exist
- ConcurrencyError: a write lost a race (version mismatch, guard timeout)
- PersistenceError: the repository layer failed
"""
from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for all errors raised by the core."""

    kind = "domain_error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.entity_id = entity_id

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for callers."""
        return {
            "error": self.kind,
            "message": self.message,
            "field": self.field,
            "entity_id": self.entity_id,
        }


class ValidationError(DomainError):
    kind = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, field=field)


class ConflictError(DomainError):
    kind = "conflict"

    def __init__(self, field: str, value: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"'{value}' is already in use for {field}", field=field)
        self.value = value


class NotFoundError(DomainError):
    kind = "not_found"

    def __init__(self, entity: str, entity_id: str, field: Optional[str] = None) -> None:
        super().__init__(
            f"{entity.capitalize()} '{entity_id}' not found",
            field=field or "id",
            entity_id=entity_id,
        )
        self.entity = entity


class ConcurrencyError(DomainError):
    kind = "concurrency_conflict"

    def __init__(self, aggregate: str, entity_id: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Concurrent update of {aggregate} '{entity_id}'",
            entity_id=entity_id,
        )
        self.aggregate = aggregate


class PersistenceError(DomainError):
    kind = "persistence_error"

    def __init__(self, operation: str, message: str, entity_id: Optional[str] = None) -> None:
        super().__init__(f"{operation} failed: {message}", entity_id=entity_id)
        self.operation = operation
