"""
Categories API v1 URLs.
"""
from django.urls import path

from .views import CategoryDetailView

urlpatterns = [
    path('<str:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
]
