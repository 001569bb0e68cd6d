"""
Tests for environment-driven configuration.
"""

from kanban_db.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.latency_ms == 100
    assert settings.key_tag == "KanbanDB"
    assert settings.key_delimiter == "--"
    assert settings.store_backend == "memory"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KANBAN_DB_LATENCY_MS", "0")
    monkeypatch.setenv("KANBAN_DB_STORE_BACKEND", "sqlite")
    monkeypatch.setenv("KANBAN_DB_KEY_TAG", "Board")

    settings = Settings(_env_file=None)

    assert settings.latency_ms == 0
    assert settings.store_backend == "sqlite"
    assert settings.key_tag == "Board"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("KANBAN_DB_SQLITE_PATH=/tmp/cards.db\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.sqlite_path == "/tmp/cards.db"
