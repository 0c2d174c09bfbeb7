"""
Delete category use case.
"""
from dataclasses import dataclass

from shared.application import UnitUseCase
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID


@dataclass
class DeleteCategoryUseCase(UnitUseCase[str]):
    """Use case for deleting a category by id."""

    category_gateway: CategoryGateway

    def execute(self, input_dto: str) -> None:
        self.category_gateway.delete_by_id(CategoryID.from_value(input_dto))
