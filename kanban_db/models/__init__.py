from .card import Card, CardInput, CardPatch, CardStatus
from .instance import DatabaseInstance, build_key_prefix

__all__ = [
    "Card",
    "CardInput",
    "CardPatch",
    "CardStatus",
    "DatabaseInstance",
    "build_key_prefix",
]
