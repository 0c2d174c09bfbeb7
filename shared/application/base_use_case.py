"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> OutputDTO:
        """Execute the use case."""
        pass


class UnitUseCase(ABC, Generic[InputDTO]):
    """Use case that produces no output."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> None:
        """Execute the use case."""
        pass
