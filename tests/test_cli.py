"""
Tests for the kanban-db command line.
"""

import json

import pytest
from kanban_db.cli import build_parser, main


@pytest.fixture
def run(tmp_path, capsys):
    """Run the CLI against a temp SQLite file and decode its JSON output."""
    db_path = str(tmp_path / "cli.db")

    def _run(*argv):
        code = main(["--db", db_path, "--latency-ms", "0", *argv])
        captured = capsys.readouterr()
        output = json.loads(captured.out) if code == 0 else None
        return code, output, captured.err

    return _run


def test_full_card_lifecycle(run):
    code, connected, _ = run("connect")
    assert code == 0
    instance_id = connected["instance_id"]

    code, added, _ = run("add", "--instance-id", instance_id, "--name", "Buy milk", "--status", "TODO")
    assert code == 0
    card_id = added["id"]

    code, card, _ = run("get", "--instance-id", instance_id, card_id)
    assert card["name"] == "Buy milk"
    assert card["status"] == "TODO"
    assert card["created"] == card["lastUpdated"]

    code, updated, _ = run("update", "--instance-id", instance_id, card_id, "--status", "DONE")
    assert updated == {"updated": True}

    code, done, _ = run("list", "--instance-id", instance_id, "--status", "DONE")
    assert [c["id"] for c in done] == [card_id]

    code, todo, _ = run("list", "--instance-id", instance_id, "--status", "TODO")
    assert todo == []

    code, deleted, _ = run("delete", "--instance-id", instance_id, card_id)
    assert deleted == {"deleted": True}

    code, remaining, _ = run("list", "--instance-id", instance_id)
    assert remaining == []


def test_errors_exit_non_zero(run):
    _, connected, _ = run("connect")
    instance_id = connected["instance_id"]

    code, _, err = run("get", "--instance-id", instance_id, "missing")
    assert code == 1
    assert "not found" in err

    code, _, err = run("add", "--instance-id", instance_id, "--name", "")
    assert code == 1
    assert "Invalid card data" in err

    code, _, err = run("list", "--instance-id", instance_id, "--status", "LATER")
    assert code == 1
    assert "Invalid status" in err


def test_instance_id_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["add", "--name", "x"])
