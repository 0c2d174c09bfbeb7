"""
Category Django ORM model.
"""
from django.db import models


class CategoryModel(models.Model):
    """Stored state of a Category; timestamps are owned by the domain entity."""

    id = models.CharField(primary_key=True, max_length=32, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()
    deleted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_deleted(self) -> bool:
        """Check if category is soft deleted."""
        return self.deleted_at is not None
