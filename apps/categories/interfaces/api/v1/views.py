"""
Categories API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.category_dto import CategoryDTO, UpdateCategoryCommand
from ....application.use_cases import DeleteCategoryUseCase, UpdateCategoryUseCase
from ....domain.exceptions import CategoryNotFoundError
from ....domain.value_objects.category_id import CategoryID
from ....infrastructure.repositories import DjangoCategoryGateway
from ...serializers.category_serializer import (
    CategorySerializer,
    CategoryUpdateSerializer,
    NotificationSerializer,
    UpdateCategoryResponseSerializer,
)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category detail, update and delete endpoint."""

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: str):
        gateway = DjangoCategoryGateway()
        parsed_id = CategoryID.from_value(category_id)
        category = gateway.find_by_id(parsed_id)
        if category is None:
            raise CategoryNotFoundError(parsed_id)

        serializer = CategorySerializer(CategoryDTO.from_entity(category))
        return Response(serializer.data)

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={
            200: UpdateCategoryResponseSerializer,
            422: NotificationSerializer,
        },
        summary="Update a category",
    )
    def put(self, request, category_id: str):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        command = UpdateCategoryCommand.with_(
            id=category_id,
            name=data.get('name'),
            description=data.get('description'),
            is_active=data.get('is_active', True),
        )

        use_case = UpdateCategoryUseCase(category_gateway=DjangoCategoryGateway())
        result = use_case.execute(command)

        return result.fold(
            lambda notification: Response(
                NotificationSerializer(notification).data,
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            ),
            lambda output: Response(UpdateCategoryResponseSerializer(output).data),
        )

    @extend_schema(summary="Delete a category")
    def delete(self, request, category_id: str):
        use_case = DeleteCategoryUseCase(category_gateway=DjangoCategoryGateway())
        use_case.execute(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
