"""
Two-armed result type returned by use cases.

Left carries the failure payload, Right carries the success payload.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

L = TypeVar('L')
R = TypeVar('R')
T = TypeVar('T')


class Either(ABC, Generic[L, R]):
    """Base class of Left and Right."""

    @abstractmethod
    def is_left(self) -> bool:
        pass

    def is_right(self) -> bool:
        return not self.is_left()

    @abstractmethod
    def get(self) -> R:
        """Return the Right value; raises ValueError on a Left."""
        pass

    @abstractmethod
    def get_left(self) -> L:
        """Return the Left value; raises ValueError on a Right."""
        pass

    @abstractmethod
    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        """Apply on_left or on_right depending on the arm."""
        pass


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L

    def is_left(self) -> bool:
        return True

    def get(self) -> R:
        raise ValueError("get() called on Left")

    def get_left(self) -> L:
        return self.value

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_left(self.value)


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R

    def is_left(self) -> bool:
        return False

    def get(self) -> R:
        return self.value

    def get_left(self) -> L:
        raise ValueError("get_left() called on Right")

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)
