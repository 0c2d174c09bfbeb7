# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utc_now
from .base_value_object import ValueObject, Identifier
from .exceptions import DomainException, EntityNotFoundError, ValidationError
from .pagination import Pagination, SearchQuery
from .validation import Error, Notification, ValidationHandler, Validator

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utc_now',
    'ValueObject',
    'Identifier',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'Pagination',
    'SearchQuery',
    'Error',
    'Notification',
    'ValidationHandler',
    'Validator',
]
