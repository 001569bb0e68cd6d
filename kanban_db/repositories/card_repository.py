"""
CardRepository - the record engine.

Implements add/get/update/delete/list/filter-by-status over a key-value store,
scoped to one DatabaseInstance namespace. Every operation is a coroutine that
waits out a configurable latency before touching the store, so callers are
written as if the store were remote.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional
from pydantic import BaseModel, ValidationError

from ..config import Settings, settings as default_settings
from ..exceptions import (
    CardNotFoundError,
    CorruptRecordError,
    InvalidCardError,
    InvalidStatusError,
    NotReadyError,
)
from ..interfaces.store import IKeyValueStore
from ..interfaces.validator import IValidator
from ..models.card import Card, CardStatus
from ..models.instance import DatabaseInstance
from ..utils.runtime import Clock, Delay, IdGenerator, new_id, now_ms, sleep_ms
from ..validation.card_validator import CardValidator, is_status_code_valid

logger = logging.getLogger(__name__)

# Fields a caller may set; id, created and lastUpdated are owned by the engine
MUTABLE_FIELDS = ("name", "description", "status")


class KeyLockTable:
    """
    One asyncio.Lock per store key.

    Serializes read-modify-write operations on the same card so two
    overlapping updates cannot overwrite each other.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._holders: Dict[str, int] = {}

    @asynccontextmanager
    async def lock(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for ``key``; the entry is dropped once nobody holds or awaits it."""
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with self._locks[key]:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


class CardRepository:
    """
    Repository for card records in one namespace.

    Obtained from ``KanbanDB.connect``; becomes unusable (NotReadyError)
    once the owning instance is disconnected.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        instance: DatabaseInstance,
        settings: Optional[Settings] = None,
        id_generator: IdGenerator = new_id,
        clock: Clock = now_ms,
        delay: Delay = asyncio.sleep,
        validator: Optional[IValidator] = None,
        key_locks: Optional[KeyLockTable] = None
    ):
        """
        Initialize the repository.

        Args:
            store: Backend holding every namespace
            instance: Namespace this repository reads and writes
            settings: Configuration (latency); defaults to module settings
            id_generator: Produces new card ids
            clock: Returns current time in milliseconds
            delay: Coroutine used to simulate latency, takes seconds
            validator: Card validator (default: CardValidator)
            key_locks: Per-key lock table owned by the manager
        """
        self.store = store
        self.instance = instance
        self.settings = settings or default_settings
        self.id_generator = id_generator
        self.clock = clock
        self.delay = delay
        self.validator = validator or CardValidator()
        self._key_locks = key_locks or KeyLockTable()

    @property
    def instance_id(self) -> Optional[str]:
        return self.instance.instance_id

    # Public operations

    async def add_card(self, data: Any) -> str:
        """
        Create a card.

        Args:
            data: Mapping or model with name, optional description and status

        Returns:
            The new card id
        """
        await self._begin()

        fields = self._input_fields(data)
        now = self.clock()
        candidate = {
            "id": self.id_generator(),
            "name": fields.get("name"),
            "description": fields.get("description"),
            "status": fields.get("status"),
            "created": now,
            "lastUpdated": now,
        }
        self._validate(candidate)

        card = self._build_card(candidate)
        self.store.set(self.instance.card_key(card.id), card.to_storage())
        logger.debug(f"Added card {card.id} to instance {self.instance_id}")
        return card.id

    async def get_card_by_id(self, card_id: str) -> Card:
        """
        Get a single card.

        Raises:
            CardNotFoundError: if the id is not in this namespace
        """
        await self._begin()
        return self._load(card_id)

    async def update_card_by_id(self, card_id: str, patch: Any) -> bool:
        """
        Merge ``patch`` over an existing card.

        Only name, description and status can change. The merged card is
        validated before anything is written.

        Returns:
            True once the merged card is persisted
        """
        self._require_ready()
        key = self.instance.card_key(card_id)

        async with self._key_locks.lock(key):
            await self._begin()
            existing = self._load(card_id)

            merged = existing.model_dump(by_alias=True)
            merged.update(self._patch_fields(patch))
            merged["id"] = existing.id
            merged["created"] = existing.created
            merged["lastUpdated"] = max(self.clock(), existing.last_updated)
            self._validate(merged)

            self.store.set(key, self._build_card(merged).to_storage())

        logger.debug(f"Updated card {card_id} in instance {self.instance_id}")
        return True

    async def delete_card_by_id(self, card_id: str) -> bool:
        """
        Delete a card.

        Raises:
            CardNotFoundError: if the id is not in this namespace
        """
        self._require_ready()
        key = self.instance.card_key(card_id)

        async with self._key_locks.lock(key):
            await self._begin()
            if self.store.get(key) is None:
                raise CardNotFoundError(card_id)
            self.store.remove(key)

        logger.debug(f"Deleted card {card_id} from instance {self.instance_id}")
        return True

    async def get_cards(self) -> List[Card]:
        """
        List every card in this namespace.

        Scans the whole key space. Order follows the store's key enumeration
        and is not guaranteed. An empty namespace returns an empty list.
        """
        await self._begin()
        return self._scan()

    async def get_cards_by_status_codes(self, status_codes: Iterable[Any]) -> List[Card]:
        """
        List cards whose status is one of ``status_codes``.

        Cards without a status never match. Every code is checked before the
        store is read.

        Raises:
            InvalidStatusError: if any code is not a CardStatus value
        """
        self._require_ready()

        if isinstance(status_codes, (str, bytes)) or not isinstance(status_codes, Iterable):
            raise InvalidStatusError(status_codes)
        codes = list(status_codes)
        for code in codes:
            if not is_status_code_valid(code):
                raise InvalidStatusError(code)
        wanted = {CardStatus(code).value for code in codes}

        await self._begin()
        return [card for card in self._scan() if card.status in wanted]

    # Internals

    def _require_ready(self) -> None:
        if not self.instance.ready:
            raise NotReadyError()

    async def _begin(self) -> None:
        """Check readiness, wait out the simulated latency, check again."""
        self._require_ready()
        await sleep_ms(self.delay, self.settings.latency_ms)
        # The instance may have been disconnected while we were waiting
        self._require_ready()

    def _validate(self, candidate: Dict[str, Any]) -> None:
        result = self.validator.validate(candidate)
        if not result.is_valid:
            logger.debug(f"Rejected card {candidate.get('id')}: {result.messages}")
            raise InvalidCardError(messages=result.messages)

    @staticmethod
    def _build_card(fields: Dict[str, Any]) -> Card:
        # An injected validator may accept fields the Card model still rejects
        try:
            return Card.model_validate(fields)
        except ValidationError as e:
            raise InvalidCardError(messages=[err["msg"] for err in e.errors()]) from e

    def _load(self, card_id: str) -> Card:
        key = self.instance.card_key(card_id)
        raw = self.store.get(key)
        if raw is None:
            raise CardNotFoundError(card_id)
        return self._parse(key, raw)

    def _scan(self) -> List[Card]:
        cards = []
        for key in self.store.keys():
            if not self.instance.owns_key(key):
                continue
            raw = self.store.get(key)
            if raw is None:
                # Removed between enumeration and read
                continue
            cards.append(self._parse(key, raw))
        return cards

    @staticmethod
    def _parse(key: str, raw: str) -> Card:
        try:
            return Card.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptRecordError(key, str(e)) from e

    @staticmethod
    def _input_fields(data: Any) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            data = data.model_dump()
        if not isinstance(data, Mapping):
            raise InvalidCardError(messages=[f"card data must be a mapping, got {type(data).__name__}"])
        return {field: data.get(field) for field in MUTABLE_FIELDS}

    @staticmethod
    def _patch_fields(patch: Any) -> Dict[str, Any]:
        if isinstance(patch, BaseModel):
            patch = patch.model_dump(exclude_unset=True)
        if not isinstance(patch, Mapping):
            raise InvalidCardError(messages=[f"card patch must be a mapping, got {type(patch).__name__}"])

        ignored = [field for field in patch if field not in MUTABLE_FIELDS]
        if ignored:
            logger.debug(f"Ignoring read-only or unknown patch fields: {ignored}")
        return {field: patch[field] for field in MUTABLE_FIELDS if field in patch}
