"""
Base value object classes for DDD.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True, eq=False)
class Identifier(ValueObject):
    """Opaque string identity of an entity."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(f"Invalid identifier: {self.value!r}", field="id")

    def __str__(self) -> str:
        return self.value
