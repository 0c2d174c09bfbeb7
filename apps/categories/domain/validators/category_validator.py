"""
Category validation rules.
"""
from typing import TYPE_CHECKING

from shared.domain import Error, ValidationHandler, Validator

if TYPE_CHECKING:
    from ..entities.category import Category


class CategoryValidator(Validator):
    """Checks the invariants of a Category."""

    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 255

    def __init__(self, category: 'Category', handler: ValidationHandler):
        super().__init__(handler)
        self._category = category

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        # At most one name error per pass
        name = self._category.name
        if name is None:
            self.validation_handler().append(Error("'name' should not be null"))
            return

        if not name.strip():
            self.validation_handler().append(Error("'name' should not be empty"))
            return

        length = len(name.strip())
        if length < self.NAME_MIN_LENGTH or length > self.NAME_MAX_LENGTH:
            self.validation_handler().append(
                Error(
                    f"'name' must be between {self.NAME_MIN_LENGTH} "
                    f"and {self.NAME_MAX_LENGTH} characters"
                )
            )
