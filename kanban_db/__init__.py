"""
kanban-db: an asynchronous task-card store on top of a key-value primitive.

    db = KanbanDB(InMemoryKeyValueStore())
    cards = await db.connect()
    card_id = await cards.add_card({"name": "Buy milk"})
"""

from .config import Settings, settings
from .database import KanbanDB
from .exceptions import (
    CardNotFoundError,
    CorruptRecordError,
    InvalidCardError,
    InvalidStatusError,
    KanbanDBError,
    NotReadyError,
)
from .interfaces import IKeyValueStore
from .models import Card, CardInput, CardPatch, CardStatus, DatabaseInstance
from .repositories import CardRepository
from .stores import InMemoryKeyValueStore, SQLAlchemyKeyValueStore, create_store
from .validation import is_card_valid

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "settings",
    "KanbanDB",
    "CardRepository",
    "Card",
    "CardInput",
    "CardPatch",
    "CardStatus",
    "DatabaseInstance",
    "IKeyValueStore",
    "InMemoryKeyValueStore",
    "SQLAlchemyKeyValueStore",
    "create_store",
    "is_card_valid",
    "KanbanDBError",
    "NotReadyError",
    "CardNotFoundError",
    "InvalidCardError",
    "InvalidStatusError",
    "CorruptRecordError",
]
