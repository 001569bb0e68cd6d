"""
Repository layer for card records.
"""

from .card_repository import CardRepository, KeyLockTable

__all__ = ["CardRepository", "KeyLockTable"]
