"""Key-value storage contract and the in-memory backend."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """A durable string slot addressed by key.

    Backends raise ``StorageReadError`` / ``StorageWriteError`` for failures
    of the underlying medium. A missing key is not an error: ``get`` returns
    ``None`` and ``remove`` does nothing.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present."""

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __repr__(self) -> str:
        return f"<InMemoryStorage keys={sorted(self._data)}>"
