"""
Domain exceptions.
"""
from typing import Iterable, List, Optional

from .validation.error import Error


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None, errors: Optional[Iterable[Error]] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        self.errors: List[Error] = list(errors) if errors is not None else [Error(message)]
        super().__init__(self.message)

    @classmethod
    def with_error(cls, error: Error) -> 'DomainException':
        """Build an exception carrying a single error."""
        return DomainException(message=error.message, errors=[error])

    @classmethod
    def with_errors(cls, errors: Iterable[Error]) -> 'DomainException':
        """Build an exception carrying several errors; the first one is the message."""
        errors = list(errors)
        message = errors[0].message if errors else ""
        return DomainException(message=message, errors=errors)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} with ID {entity_id} was not-found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when a value cannot be built from its input."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field
