"""
Validation error value.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """A single validation or failure message."""
    message: str
