"""Tests for DeleteCategoryUseCase."""
from apps.categories.application.use_cases import DeleteCategoryUseCase
from apps.categories.domain.value_objects import CategoryID


def test_delete_passes_parsed_id_to_gateway(category_gateway):
    use_case = DeleteCategoryUseCase(category_gateway=category_gateway)

    result = use_case.execute("abc123")

    assert result is None
    category_gateway.delete_by_id.assert_called_once_with(CategoryID.from_value("abc123"))
