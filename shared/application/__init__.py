# Shared application module
from .base_use_case import UseCase, UnitUseCase
from .either import Either, Left, Right

__all__ = [
    'UseCase',
    'UnitUseCase',
    'Either',
    'Left',
    'Right',
]
