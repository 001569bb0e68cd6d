"""
Default identifier, clock and delay providers.

The record engine takes each of these as a constructor argument so tests can
swap in deterministic versions.
"""

import asyncio
import time
import uuid
from typing import Awaitable, Callable

IdGenerator = Callable[[], str]
Clock = Callable[[], int]
Delay = Callable[[float], Awaitable[None]]


def new_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


async def sleep_ms(delay: Delay, milliseconds: int) -> None:
    """Await ``delay`` for the given number of milliseconds (skipped when zero)."""
    if milliseconds > 0:
        await delay(milliseconds / 1000)
    else:
        # Still yield so callers always observe an asynchronous completion
        await asyncio.sleep(0)
