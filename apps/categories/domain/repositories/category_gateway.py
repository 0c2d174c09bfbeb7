"""
Category gateway interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from shared.domain import Pagination, SearchQuery
from ..entities.category import Category
from ..value_objects.category_id import CategoryID


class CategoryGateway(ABC):
    """
    Persistence contract for Category.

    Implementations must hand out independent instances: mutating a
    category returned by ``find_by_id`` must not affect stored state until
    ``update`` is called.
    """

    @abstractmethod
    def create(self, category: Category) -> Category:
        """Persist a new category."""
        pass

    @abstractmethod
    def delete_by_id(self, category_id: CategoryID) -> None:
        """Remove a category. Unknown ids are ignored."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    def update(self, category: Category) -> Category:
        """Persist changes to an existing category."""
        pass

    @abstractmethod
    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """Return one page of categories matching the query."""
        pass
