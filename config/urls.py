"""
Root URL configuration.
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path('api/v1/categories/', include('apps.categories.interfaces.api.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
