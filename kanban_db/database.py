"""
KanbanDB - instance manager for the card store.

Owns the connection lifecycle: ``connect`` creates a DatabaseInstance bound to
a namespace and returns a CardRepository handle for it; ``disconnect`` closes
the instance so every handle issued for it stops working.
"""

import asyncio
import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .interfaces.store import IKeyValueStore
from .interfaces.validator import IValidator
from .models.instance import DatabaseInstance, build_key_prefix
from .repositories.card_repository import CardRepository, KeyLockTable
from .utils.runtime import Clock, Delay, IdGenerator, new_id, now_ms

logger = logging.getLogger(__name__)


class KanbanDB:
    """
    Connection manager for one client of a key-value store.

    Each KanbanDB holds its own session state, so independent clients never
    share a hidden instance. The per-key lock table belongs to the manager
    and outlives reconnects.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        settings: Optional[Settings] = None,
        id_generator: IdGenerator = new_id,
        clock: Clock = now_ms,
        delay: Delay = asyncio.sleep,
        validator: Optional[IValidator] = None
    ):
        """
        Initialize the manager.

        Args:
            store: Key-value backend shared by every namespace
            settings: Configuration (key tag/delimiter, latency)
            id_generator: Produces instance and card ids
            clock: Millisecond clock used for card timestamps
            delay: Coroutine used to simulate latency
            validator: Card validator passed to repositories
        """
        self.store = store
        self.settings = settings or default_settings
        self.id_generator = id_generator
        self.clock = clock
        self.delay = delay
        self.validator = validator
        self._key_locks = KeyLockTable()
        self._instance: Optional[DatabaseInstance] = None

    @property
    def instance(self) -> Optional[DatabaseInstance]:
        return self._instance

    async def connect(self, previous_instance_id: Optional[str] = None) -> CardRepository:
        """
        Open a namespace and return a handle to it.

        Args:
            previous_instance_id: Reopen this namespace, keeping its cards.
                When omitted a fresh namespace is created and the ENTIRE
                store is cleared first, including other namespaces.

        Returns:
            CardRepository bound to the new DatabaseInstance
        """
        if self._instance is not None and self._instance.ready:
            await self.disconnect()

        instance_id = previous_instance_id or self.id_generator()

        if not previous_instance_id:
            logger.warning(
                "Connecting without a previous instance id: clearing the whole "
                "key-value store, all namespaces included"
            )
            self.store.clear()

        instance = DatabaseInstance(
            ready=True,
            instance_id=instance_id,
            key_prefix=build_key_prefix(
                instance_id,
                tag=self.settings.key_tag,
                delimiter=self.settings.key_delimiter
            )
        )
        self._instance = instance
        logger.info(f"Connected to instance {instance_id}")

        return CardRepository(
            self.store,
            instance,
            settings=self.settings,
            id_generator=self.id_generator,
            clock=self.clock,
            delay=self.delay,
            validator=self.validator,
            key_locks=self._key_locks
        )

    async def disconnect(self) -> bool:
        """
        Close the current instance. Safe to call repeatedly.

        Returns:
            True
        """
        if self._instance is not None:
            logger.info(f"Disconnected from instance {self._instance.instance_id}")
            self._instance.close()
        self._instance = None
        return True

    def get_instance_id(self) -> Optional[str]:
        """
        Current instance id, or None when not connected.

        Pass it to ``connect`` later to reopen the same namespace.
        """
        if self._instance is None:
            return None
        return self._instance.instance_id
