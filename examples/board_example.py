"""
Example: A small kanban board on the persistent SQLite store

Run it twice: the second run reopens the namespace saved by the first one
instead of wiping the store.
"""

import asyncio
from pathlib import Path

from kanban_db import KanbanDB, SQLAlchemyKeyValueStore, Settings

INSTANCE_FILE = Path("./data/board_instance.txt")


async def main():
    settings = Settings(latency_ms=100)
    store = SQLAlchemyKeyValueStore("./data/board.db")
    db = KanbanDB(store, settings=settings)

    if INSTANCE_FILE.exists():
        cards = await db.connect(INSTANCE_FILE.read_text().strip())
        print(f"Reopened board {cards.instance_id}")
    else:
        # No previous id: this clears everything in board.db
        cards = await db.connect()
        INSTANCE_FILE.parent.mkdir(parents=True, exist_ok=True)
        INSTANCE_FILE.write_text(cards.instance_id)
        print(f"Created board {cards.instance_id}")

        await cards.add_card({"name": "Buy milk", "status": "TODO"})
        await cards.add_card({"name": "Write report", "description": "Q3 numbers", "status": "IN_PROGRESS"})
        await cards.add_card({"name": "Book flights", "status": "DONE"})

    print(f"\n{'=' * 40}")
    for status in ("TODO", "IN_PROGRESS", "DONE"):
        print(f"\n--- {status} ---")
        for card in await cards.get_cards_by_status_codes([status]):
            print(f"  {card.name}  ({card.id})")
    print(f"\n{'=' * 40}\n")

    await db.disconnect()
    store.close()


if __name__ == "__main__":
    asyncio.run(main())
