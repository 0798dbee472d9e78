"""
Storage module initialization.
"""

from budget_tracker.config import Settings
from budget_tracker.storage.base import InMemoryStorage, KeyValueStorage
from budget_tracker.storage.file import JsonFileStorage
from budget_tracker.storage.sql import KeyValueEntry, SqlKeyValueStorage


def get_storage(settings: Settings) -> KeyValueStorage:
    """Build the storage backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    if settings.storage_backend == "sql":
        return SqlKeyValueStorage(settings.database_url, echo=settings.db_echo)
    return JsonFileStorage(settings.storage_dir)


__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueEntry",
    "KeyValueStorage",
    "SqlKeyValueStorage",
    "get_storage",
]
