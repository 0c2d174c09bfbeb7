"""
Category domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError

from .value_objects.category_id import CategoryID


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id: CategoryID):
        super().__init__(entity_name="Category", entity_id=str(category_id))
        self.category_id = category_id


__all__ = ['CategoryNotFoundError']
