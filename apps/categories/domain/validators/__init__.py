# Validators
from .category_validator import CategoryValidator

__all__ = ['CategoryValidator']
