"""Tests for the Category aggregate."""
from apps.categories.domain.entities.category import Category
from apps.categories.domain.value_objects import CategoryID
from shared.domain import Notification


class TestNewCategory:

    def test_active_category(self):
        category = Category.new_category("Film", "A description", True)

        assert isinstance(category.id, CategoryID)
        assert category.name == "Film"
        assert category.description == "A description"
        assert category.is_active is True
        assert category.created_at == category.updated_at
        assert category.created_at.tzinfo is not None
        assert category.deleted_at is None

    def test_inactive_category_is_marked_deleted(self):
        category = Category.new_category("Film", None, False)

        assert category.is_active is False
        assert category.deleted_at is not None

    def test_ids_are_unique(self):
        first = Category.new_category("Film", None, True)
        second = Category.new_category("Film", None, True)

        assert first.id != second.id
        assert first != second


class TestClone:

    def test_clone_is_independent(self):
        category = Category.new_category("Film", None, True)

        copy = Category.clone(category)
        copy.update("Filmes", "changed", False)

        assert copy is not category
        assert copy == category
        assert category.name == "Film"
        assert category.is_active is True
        assert category.deleted_at is None


class TestUpdate:

    def test_update_changes_fields_and_returns_self(self, category):
        result = category.update("Filmes", "Categoria mais Assistida", True)

        assert result is category
        assert category.name == "Filmes"
        assert category.description == "Categoria mais Assistida"
        assert category.is_active is True

    def test_update_advances_updated_at_only(self, category):
        before = Category.clone(category)

        category.update("Filmes", None, True)

        assert category.updated_at > before.updated_at
        assert category.created_at == before.created_at
        assert category.id == before.id

    def test_consecutive_updates_keep_advancing(self, category):
        category.update("Filmes", None, True)
        first = category.updated_at
        category.update("Series", None, True)

        assert category.updated_at > first

    def test_deactivate_then_reactivate(self, category):
        assert category.deleted_at is None

        category.update("Film", None, False)
        assert category.is_active is False
        assert category.deleted_at is not None

        category.update("Film", None, True)
        assert category.is_active is True
        assert category.deleted_at is None

    def test_repeated_deactivation_keeps_first_deleted_at(self, category):
        category.update("Film", None, False)
        deleted_at = category.deleted_at

        category.update("Film", None, False)

        assert category.deleted_at == deleted_at
        assert category.updated_at > deleted_at

    def test_update_does_not_validate(self, category):
        category.update(None, None, True)

        assert category.name is None

    def test_update_then_validate_reports_errors(self, category):
        notification = Notification.create()

        category.update("ab", None, True).validate(notification)

        assert notification.has_error() is True


class TestActivation:

    def test_deactivate_and_activate_return_self(self, category):
        assert category.deactivate() is category
        assert category.is_active is False
        assert category.activate() is category
        assert category.is_active is True
        assert category.deleted_at is None


class TestCategoryID:

    def test_from_value_accepts_any_string(self):
        assert CategoryID.from_value("abc123").value == "abc123"

    def test_equality_by_value(self):
        assert CategoryID.from_value("abc") == CategoryID.from_value("abc")

    def test_unique_generates_hex(self):
        category_id = CategoryID.unique()

        assert len(category_id.value) == 32
        assert str(category_id) == category_id.value
