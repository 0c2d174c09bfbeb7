"""
Validation handler contract.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .error import Error


class ValidationHandler(ABC):
    """Sink that validators append their findings to."""

    @abstractmethod
    def append(self, error: Error) -> 'ValidationHandler':
        """Append a single error."""
        pass

    @abstractmethod
    def append_all(self, errors: Iterable[Error]) -> 'ValidationHandler':
        """Append several errors, keeping their order."""
        pass

    @property
    @abstractmethod
    def errors(self) -> List[Error]:
        """Errors collected so far, in insertion order."""
        pass

    def has_error(self) -> bool:
        return len(self.errors) > 0

    def first_error(self) -> Optional[Error]:
        """Return the first appended error, or None when there is none."""
        errors = self.errors
        return errors[0] if errors else None
