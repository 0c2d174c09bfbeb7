"""
Base entity classes for DDD.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .base_value_object import Identifier
from .validation import ValidationHandler


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class BaseEntity(ABC):
    """Base entity class with identity."""
    id: Identifier
    created_at: datetime
    updated_at: datetime

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        now = utc_now()
        # updated_at must strictly increase even when the clock has not ticked
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    @abstractmethod
    def validate(self, handler: ValidationHandler) -> None:
        """Append this entity's invariant violations to the handler."""
        pass


@dataclass(eq=False)
class AggregateRoot(BaseEntity):
    """Aggregate root base class: the unit of consistency and persistence."""
