# Value objects
from .category_id import CategoryID

__all__ = ['CategoryID']
