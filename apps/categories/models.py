# Django model discovery for the categories app
from .infrastructure.models import CategoryModel

__all__ = ['CategoryModel']
