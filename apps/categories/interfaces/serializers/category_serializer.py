"""
Category serializers.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    deleted_at = serializers.DateTimeField(read_only=True, allow_null=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """
    Serializer for category update input.

    Name rules are enforced by the domain, so the name is accepted as-is
    here and checked by CategoryValidator.
    """
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    is_active = serializers.BooleanField(required=False, default=True)


class UpdateCategoryResponseSerializer(serializers.Serializer):
    """Serializer for a successful update."""
    id = serializers.CharField(read_only=True)


class ErrorSerializer(serializers.Serializer):
    message = serializers.CharField(read_only=True)


class NotificationSerializer(serializers.Serializer):
    """Serializer for the errors of a failed update."""
    errors = ErrorSerializer(many=True, read_only=True)
