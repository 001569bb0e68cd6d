"""
Tests for overlapping operations on the same card.

Updates and deletes hold a per-key lock across their read and write, so
overlapping calls are applied one after the other.
"""

import asyncio

import pytest
from kanban_db.config import Settings
from kanban_db.database import KanbanDB
from kanban_db.exceptions import CardNotFoundError
from kanban_db.stores.memory_store import InMemoryKeyValueStore


@pytest.fixture
def slow_db():
    return KanbanDB(InMemoryKeyValueStore(), settings=Settings(latency_ms=10))


@pytest.mark.asyncio
async def test_concurrent_updates_do_not_lose_writes(slow_db):
    cards = await slow_db.connect()
    card_id = await cards.add_card({"name": "Original"})

    results = await asyncio.gather(
        cards.update_card_by_id(card_id, {"name": "Renamed"}),
        cards.update_card_by_id(card_id, {"status": "DONE"}),
    )

    assert results == [True, True]
    card = await cards.get_card_by_id(card_id)
    assert card.name == "Renamed"
    assert card.status == "DONE"


@pytest.mark.asyncio
async def test_reconnect_then_concurrent_updates_are_serialized(slow_db):
    cards = await slow_db.connect("shared")
    card_id = await cards.add_card({"name": "Original"})
    other = await slow_db.connect("shared")

    await asyncio.gather(
        other.update_card_by_id(card_id, {"description": "from other"}),
        other.update_card_by_id(card_id, {"status": "TODO"}),
    )

    card = await other.get_card_by_id(card_id)
    assert card.description == "from other"
    assert card.status == "TODO"


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_reports_not_found(slow_db):
    cards = await slow_db.connect()
    card_id = await cards.add_card({"name": "Doomed"})

    deleted, updated = await asyncio.gather(
        cards.delete_card_by_id(card_id),
        cards.update_card_by_id(card_id, {"status": "DONE"}),
        return_exceptions=True,
    )

    assert deleted is True
    assert isinstance(updated, CardNotFoundError)
    assert await cards.get_cards() == []


@pytest.mark.asyncio
async def test_lock_table_is_emptied_after_operations(slow_db):
    cards = await slow_db.connect()

    for n in range(5):
        with pytest.raises(CardNotFoundError):
            await cards.update_card_by_id(f"missing-{n}", {"status": "DONE"})
        card_id = await cards.add_card({"name": f"card {n}"})
        await cards.update_card_by_id(card_id, {"status": "TODO"})
        await cards.delete_card_by_id(card_id)

    assert len(slow_db._key_locks) == 0


@pytest.mark.asyncio
async def test_lock_table_is_emptied_after_contended_updates(slow_db):
    cards = await slow_db.connect()
    card_id = await cards.add_card({"name": "Busy"})

    await asyncio.gather(*(
        cards.update_card_by_id(card_id, {"description": f"edit {n}"})
        for n in range(5)
    ))

    assert len(slow_db._key_locks) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
