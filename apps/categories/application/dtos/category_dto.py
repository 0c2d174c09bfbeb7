"""
Category DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...domain.entities.category import Category


@dataclass
class UpdateCategoryCommand:
    """Input for updating a category."""
    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool

    @classmethod
    def with_(
        cls,
        id: str,
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
    ) -> 'UpdateCategoryCommand':
        return cls(id=id, name=name, description=description, is_active=is_active)


@dataclass
class UpdateCategoryOutput:
    """Output of a successful update."""
    id: str

    @classmethod
    def from_entity(cls, category: Category) -> 'UpdateCategoryOutput':
        """Create DTO from entity."""
        return cls(id=category.id.value)


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )
