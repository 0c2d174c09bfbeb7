"""
Category entity.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from shared.domain import AggregateRoot, ValidationHandler, utc_now
from ..validators.category_validator import CategoryValidator
from ..value_objects.category_id import CategoryID


@dataclass(eq=False)
class Category(AggregateRoot):
    """
    Category aggregate for organizing the catalog.

    State changes only through the methods below. ``deleted_at`` is set when
    the category is deactivated and cleared when it is activated again.
    Validation is a separate step: mutate first, then call ``validate``.
    """
    id: CategoryID
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    deleted_at: Optional[datetime] = None

    @classmethod
    def new_category(
        cls,
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
    ) -> 'Category':
        """Factory method to create a new category."""
        now = utc_now()
        return cls(
            id=CategoryID.unique(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=now,
            updated_at=now,
            deleted_at=None if is_active else now,
        )

    @classmethod
    def with_(
        cls,
        id: CategoryID,
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ) -> 'Category':
        """Rebuild a category from stored state."""
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )

    @classmethod
    def clone(cls, category: 'Category') -> 'Category':
        """Return an independent copy of the category."""
        return replace(category)

    def validate(self, handler: ValidationHandler) -> None:
        CategoryValidator(self, handler).validate()

    def activate(self) -> 'Category':
        """Activate the category."""
        self.deleted_at = None
        self.is_active = True
        self.touch()
        return self

    def deactivate(self) -> 'Category':
        """Deactivate the category, keeping the first deactivation time."""
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.is_active = False
        self.touch()
        return self

    def update(
        self,
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
    ) -> 'Category':
        """Apply new values without validating them."""
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.description = description
        self.touch()
        return self
