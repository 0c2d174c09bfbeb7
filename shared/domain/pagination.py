"""
Search and pagination value types shared by gateways.
"""
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class SearchQuery:
    """Paged search request. Pages are zero-based."""
    page: int = 0
    per_page: int = 10
    terms: str = ""
    sort: str = "name"
    direction: str = "asc"


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """One page of results."""
    current_page: int
    per_page: int
    total: int
    items: List[T] = field(default_factory=list)

    def map(self, mapper: Callable[[T], U]) -> 'Pagination[U]':
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[mapper(item) for item in self.items],
        )
