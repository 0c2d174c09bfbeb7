"""
Update category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import Either, Left, Right, UseCase
from shared.domain import Notification
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID
from ..dtos.category_dto import UpdateCategoryCommand, UpdateCategoryOutput

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryUseCase(
    UseCase[UpdateCategoryCommand, Either[Notification, UpdateCategoryOutput]]
):
    """
    Use case for updating a category.

    A missing category raises CategoryNotFoundError. Validation errors and
    gateway failures come back as a Left holding a Notification; the gateway
    is only asked to persist a category that passed validation.
    """

    category_gateway: CategoryGateway

    def execute(
        self, input_dto: UpdateCategoryCommand
    ) -> Either[Notification, UpdateCategoryOutput]:
        category_id = CategoryID.from_value(input_dto.id)

        category = self.category_gateway.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        notification = Notification.create()
        category.update(
            input_dto.name,
            input_dto.description,
            input_dto.is_active,
        ).validate(notification)

        if notification.has_error():
            return Left(notification)

        return self._update(category)

    def _update(self, category: Category) -> Either[Notification, UpdateCategoryOutput]:
        try:
            updated = self.category_gateway.update(category)
        except Exception as e:
            logger.error(f"Failed to update category {category.id}: {e}", exc_info=True)
            return Left(Notification.create_from_exception(e))

        logger.info(f"Updated category: {updated.name} ({updated.id})")
        return Right(UpdateCategoryOutput.from_entity(updated))
