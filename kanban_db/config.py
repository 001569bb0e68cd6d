from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # Record engine
    latency_ms: int = 100  # Simulated round trip before every store access

    # Key namespacing
    key_tag: str = "KanbanDB"
    key_delimiter: str = "--"

    # Storage backend
    store_backend: str = "memory"  # memory|sqlite
    sqlite_path: str = "./data/kanban.db"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="KANBAN_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
