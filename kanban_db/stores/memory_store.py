"""
In-memory key-value store.

Process-local and non-durable; data is lost when the process exits.
Uses a plain dict, so keys enumerate in insertion order.
"""

from typing import Dict, List, Optional
from ..interfaces.store import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """
    Dict-backed implementation of IKeyValueStore.

    Features:
    - O(1) set/get/remove
    - Safe for single-threaded async code
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """
        Initialize the store.

        Args:
            initial: Optional key/value pairs to seed the store with
        """
        self._data: Dict[str, str] = dict(initial or {})

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def __len__(self) -> int:
        return len(self._data)
