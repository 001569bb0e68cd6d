"""
Pytest configuration and shared fixtures for card store tests.
"""
import itertools

import pytest
import pytest_asyncio

from kanban_db.config import Settings
from kanban_db.database import KanbanDB
from kanban_db.stores.memory_store import InMemoryKeyValueStore


class SteppingClock:
    """Millisecond clock that advances by ``step`` on every call"""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def test_settings():
    """Settings with latency disabled."""
    return Settings(latency_ms=0, store_backend="memory")


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def sequential_ids():
    """Deterministic id generator: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def db(store, test_settings, clock):
    return KanbanDB(store, settings=test_settings, clock=clock)


@pytest_asyncio.fixture
async def cards(db):
    """Repository handle for a freshly connected namespace."""
    repository = await db.connect()
    yield repository
    await db.disconnect()
