# Validation primitives
from .error import Error
from .notification import Notification
from .validation_handler import ValidationHandler
from .validator import Validator

__all__ = [
    'Error',
    'Notification',
    'ValidationHandler',
    'Validator',
]
