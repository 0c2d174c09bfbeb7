# Gateway implementations
from .django_category_gateway import DjangoCategoryGateway

__all__ = ['DjangoCategoryGateway']
