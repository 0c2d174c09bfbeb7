"""
Django ORM implementation of CategoryGateway.
"""
import logging
from typing import Optional

from django.db import transaction
from django.db.models import Q

from shared.domain import Pagination, SearchQuery
from ...domain.entities.category import Category
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID
from ..models.category_model import CategoryModel

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {'name', 'description', 'created_at', 'updated_at'}


class DjangoCategoryGateway(CategoryGateway):
    """Django ORM based category gateway implementation."""

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        with transaction.atomic():
            model = CategoryModel.objects.create(**self._to_fields(category))
        logger.info(f"Created category: {model.name} ({model.id})")
        return self._to_entity(model)

    def update(self, category: Category) -> Category:
        """Persist changes to a category."""
        with transaction.atomic():
            fields = self._to_fields(category)
            category_id = fields.pop('id')
            model, _ = CategoryModel.objects.update_or_create(
                id=category_id,
                defaults=fields,
            )
        logger.info(f"Saved category: {model.name} ({model.id})")
        return self._to_entity(model)

    def delete_by_id(self, category_id: CategoryID) -> None:
        """Delete a category."""
        deleted, _ = CategoryModel.objects.filter(id=category_id.value).delete()
        if deleted:
            logger.info(f"Deleted category: {category_id}")

    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        """Find a category by ID."""
        try:
            model = CategoryModel.objects.get(id=category_id.value)
            return self._to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """Find one page of categories."""
        queryset = CategoryModel.objects.all()
        if query.terms:
            queryset = queryset.filter(
                Q(name__icontains=query.terms) | Q(description__icontains=query.terms)
            )

        sort = query.sort if query.sort in SORTABLE_FIELDS else 'name'
        if query.direction.lower() == 'desc':
            sort = f'-{sort}'
        queryset = queryset.order_by(sort)

        start = query.page * query.per_page
        rows = queryset[start:start + query.per_page]
        return Pagination(
            current_page=query.page,
            per_page=query.per_page,
            total=queryset.count(),
            items=[self._to_entity(model) for model in rows],
        )

    def _to_fields(self, category: Category) -> dict:
        return {
            'id': category.id.value,
            'name': category.name,
            'description': category.description,
            'is_active': category.is_active,
            'created_at': category.created_at,
            'updated_at': category.updated_at,
            'deleted_at': category.deleted_at,
        }

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category.with_(
            id=CategoryID.from_value(model.id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
