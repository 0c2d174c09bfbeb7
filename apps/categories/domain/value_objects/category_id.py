"""
Category identifier value object.
"""
from dataclasses import dataclass
from uuid import uuid4

from shared.domain import Identifier


@dataclass(frozen=True, eq=False)
class CategoryID(Identifier):
    """Identity of a Category."""

    @classmethod
    def unique(cls) -> 'CategoryID':
        """Generate a new random identifier."""
        return cls(value=uuid4().hex)

    @classmethod
    def from_value(cls, value: str) -> 'CategoryID':
        """Wrap an existing identifier string."""
        return cls(value=value)
