"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    storage_backend: Literal["memory", "file", "sql"] = "file"
    storage_dir: Path = Path(".budget_data")
    database_url: str = "sqlite:///budget_tracker.db"
    db_echo: bool = False

    # Persisted keys (shared with payloads written by the browser app)
    storage_key: str = "monthlyBudgetData"
    legacy_storage_key: str = "transactions"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
