"""
Key-value store interface - the storage primitive the card store sits on.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IKeyValueStore(ABC):
    """
    Synchronous string key-value storage contract.

    Mirrors the browser ``localStorage`` surface: every namespace lives in the
    same physical store and is distinguished only by key prefix.
    """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Args:
            key: Fully qualified key
            value: Serialized text
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value stored under ``key``.

        Args:
            key: Fully qualified key

        Returns:
            Stored text or None if the key is absent
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Remove ``key``. Removing a missing key is a no-op.

        Args:
            key: Fully qualified key
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key from the store, across all namespaces."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """
        List every key currently held.

        Returns:
            Keys in backend enumeration order (not guaranteed stable)
        """
        pass

    def close(self) -> None:
        """Release backend resources. Default: nothing to release."""
        pass
