"""
Interfaces for the card store.
"""

from .store import IKeyValueStore
from .validator import IValidator, ValidationResult

__all__ = [
    "IKeyValueStore",
    "IValidator",
    "ValidationResult",
]
