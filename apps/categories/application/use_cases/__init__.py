# Use cases
from .delete_category import DeleteCategoryUseCase
from .update_category import UpdateCategoryUseCase

__all__ = ['DeleteCategoryUseCase', 'UpdateCategoryUseCase']
