"""
Key-value store backends.

All backends implement IKeyValueStore, making them interchangeable
under the record engine.
"""

from typing import Optional

from ..config import Settings, settings as default_settings
from ..interfaces.store import IKeyValueStore
from .memory_store import InMemoryKeyValueStore
from .sqlalchemy_store import SQLAlchemyKeyValueStore


def create_store(settings: Optional[Settings] = None) -> IKeyValueStore:
    """Build the backend named by ``settings.store_backend``."""
    settings = settings or default_settings
    backend = settings.store_backend.lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "sqlite":
        return SQLAlchemyKeyValueStore(settings.sqlite_path)
    raise ValueError(f"Unknown store backend: {settings.store_backend}. Supported backends: ['memory', 'sqlite']")


__all__ = [
    "InMemoryKeyValueStore",
    "SQLAlchemyKeyValueStore",
    "create_store",
]
