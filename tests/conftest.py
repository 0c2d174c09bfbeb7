"""
Pytest configuration and fixtures.
"""
from unittest.mock import Mock

import pytest

from apps.categories.domain.entities.category import Category
from apps.categories.domain.repositories.category_gateway import CategoryGateway


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def category():
    """An active category as stored before any update."""
    return Category.new_category("Film", None, True)


@pytest.fixture
def category_gateway():
    """Gateway double; update echoes the category it receives."""
    gateway = Mock(spec=CategoryGateway)
    gateway.update.side_effect = lambda category: category
    return gateway
