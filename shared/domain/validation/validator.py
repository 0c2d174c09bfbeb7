"""
Base validator class.
"""
from abc import ABC, abstractmethod

from .validation_handler import ValidationHandler


class Validator(ABC):
    """
    A rule set over one target object.

    Concrete validators report problems by appending to the handler and
    never raise for invalid input.
    """

    def __init__(self, handler: ValidationHandler):
        self._handler = handler

    @abstractmethod
    def validate(self) -> None:
        """Run the rule set against the target."""
        pass

    def validation_handler(self) -> ValidationHandler:
        return self._handler
