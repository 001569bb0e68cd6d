"""
Command-line access to a persistent card store.

    kanban-db connect
    kanban-db add --instance-id ID --name "Buy milk" --status TODO
    kanban-db list --instance-id ID --status TODO --status DONE

Each command opens the configured store, runs one operation and prints JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import Settings, settings as default_settings
from .database import KanbanDB
from .exceptions import KanbanDBError
from .models.card import CardStatus
from .stores import create_store

logger = logging.getLogger(__name__)

STATUS_CHOICES = [status.value for status in CardStatus]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kanban-db",
        description="Manage task cards in a key-value backed store"
    )
    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="Path to the SQLite store (default: KANBAN_DB_SQLITE_PATH)",
    )
    parser.add_argument(
        "--latency-ms",
        type=int,
        default=None,
        help="Simulated latency per operation in milliseconds",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: KANBAN_DB_LOG_LEVEL)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser(
        "connect",
        help="Create a fresh namespace. WARNING: clears the whole store",
    )

    add = commands.add_parser("add", help="Add a card")
    _add_instance_argument(add)
    add.add_argument("--name", type=str, required=True)
    add.add_argument("--description", type=str, default=None)
    add.add_argument("--status", type=str, default=None)

    get = commands.add_parser("get", help="Show one card")
    _add_instance_argument(get)
    get.add_argument("card_id")

    update = commands.add_parser("update", help="Update fields of a card")
    _add_instance_argument(update)
    update.add_argument("card_id")
    update.add_argument("--name", type=str, default=None)
    update.add_argument("--description", type=str, default=None)
    update.add_argument("--status", type=str, default=None)

    delete = commands.add_parser("delete", help="Delete a card")
    _add_instance_argument(delete)
    delete.add_argument("card_id")

    list_cards = commands.add_parser("list", help="List cards, optionally by status")
    _add_instance_argument(list_cards)
    list_cards.add_argument(
        "--status",
        action="append",
        default=None,
        help=f"Only cards with this status; repeatable ({', '.join(STATUS_CHOICES)})",
    )

    return parser


def _add_instance_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--instance-id",
        type=str,
        required=True,
        help="Instance id printed by 'connect'",
    )


def _settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    overrides: Dict[str, Any] = {"store_backend": "sqlite"}
    if args.db:
        overrides["sqlite_path"] = args.db
    if args.latency_ms is not None:
        overrides["latency_ms"] = args.latency_ms
    if args.log_level:
        overrides["log_level"] = args.log_level
    return base.model_copy(update=overrides)


def _present_fields(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        field: getattr(args, field)
        for field in ("name", "description", "status")
        if getattr(args, field) is not None
    }


async def run_command(args: argparse.Namespace, settings: Settings) -> Any:
    """Execute one parsed command and return a JSON-serializable result."""
    store = create_store(settings)
    db = KanbanDB(store, settings=settings)
    try:
        if args.command == "connect":
            await db.connect()
            return {"instance_id": db.get_instance_id()}

        cards = await db.connect(args.instance_id)

        if args.command == "add":
            return {"id": await cards.add_card(_present_fields(args))}
        if args.command == "get":
            card = await cards.get_card_by_id(args.card_id)
            return card.model_dump(by_alias=True)
        if args.command == "update":
            return {"updated": await cards.update_card_by_id(args.card_id, _present_fields(args))}
        if args.command == "delete":
            return {"deleted": await cards.delete_card_by_id(args.card_id)}
        if args.command == "list":
            if args.status:
                found = await cards.get_cards_by_status_codes(args.status)
            else:
                found = await cards.get_cards()
            return [card.model_dump(by_alias=True) for card in found]

        raise ValueError(f"Unknown command: {args.command}")
    finally:
        await db.disconnect()
        store.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _settings_from_args(args, default_settings)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        result = asyncio.run(run_command(args, settings))
    except KanbanDBError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
