"""
Accumulating validation handler.
"""
from typing import Iterable, List, Optional

from .error import Error
from .validation_handler import ValidationHandler


class Notification(ValidationHandler):
    """
    Collects validation problems instead of stopping at the first one.

    The error list only grows: there is no way to remove an error once it
    has been appended.
    """

    def __init__(self, errors: Optional[Iterable[Error]] = None):
        self._errors: List[Error] = list(errors or [])

    @classmethod
    def create(cls, error: Optional[Error] = None) -> 'Notification':
        """Create an empty notification, or one holding a single error."""
        notification = cls()
        if error is not None:
            notification.append(error)
        return notification

    @classmethod
    def create_from_exception(cls, exc: BaseException) -> 'Notification':
        """Wrap an unexpected failure into a notification."""
        from ..exceptions import DomainException

        if isinstance(exc, DomainException) and exc.errors:
            return cls().append_all(exc.errors)
        return cls.create(Error(str(exc) or exc.__class__.__name__))

    def append(self, error: Error) -> 'Notification':
        self._errors.append(error)
        return self

    def append_all(self, errors: Iterable[Error]) -> 'Notification':
        self._errors.extend(errors)
        return self

    @property
    def errors(self) -> List[Error]:
        return list(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"
