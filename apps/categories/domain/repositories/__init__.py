# Repository interfaces
from .category_gateway import CategoryGateway

__all__ = ['CategoryGateway']
