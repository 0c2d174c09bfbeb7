# Serializers
from .category_serializer import (
    CategorySerializer,
    CategoryUpdateSerializer,
    NotificationSerializer,
    UpdateCategoryResponseSerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryUpdateSerializer',
    'NotificationSerializer',
    'UpdateCategoryResponseSerializer',
]
