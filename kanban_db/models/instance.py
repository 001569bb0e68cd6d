"""
Session state for one connected namespace.
"""

from dataclasses import dataclass
from typing import Optional


def build_key_prefix(instance_id: str, tag: str = "KanbanDB", delimiter: str = "--") -> str:
    """
    Build the prefix shared by every record key of an instance.

    The trailing delimiter keeps instance ``abc`` from matching keys that
    belong to instance ``abcd``.
    """
    return f"{tag}{delimiter}{instance_id}{delimiter}"


@dataclass
class DatabaseInstance:
    """
    Connection state for one namespace of the key-value store.

    Created by ``KanbanDB.connect`` and handed to the record engine, which
    checks ``ready`` before every operation.
    """
    ready: bool = False
    instance_id: Optional[str] = None
    key_prefix: Optional[str] = None

    def card_key(self, card_id: str) -> str:
        """Fully qualified store key for a card in this namespace."""
        return f"{self.key_prefix}{card_id}"

    def owns_key(self, key: str) -> bool:
        """Anchored prefix test: does ``key`` belong to this namespace?"""
        return bool(self.key_prefix) and key.startswith(self.key_prefix)

    def close(self) -> None:
        self.ready = False
        self.instance_id = None
        self.key_prefix = None
