"""Domain-level exceptions.

All inventory rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value violates a product invariant.

    ``field`` names the offending attribute when one can be identified.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DuplicateEntityError(DomainException):
    """An entity with the same ID is already tracked."""

    def __init__(self, message: str, entity_id: int) -> None:
        super().__init__(message)
        self.entity_id = entity_id


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, message: str, entity_id: int) -> None:
        super().__init__(message)
        self.entity_id = entity_id
