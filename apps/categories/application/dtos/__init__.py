# DTOs
from .category_dto import CategoryDTO, UpdateCategoryCommand, UpdateCategoryOutput

__all__ = ['CategoryDTO', 'UpdateCategoryCommand', 'UpdateCategoryOutput']
