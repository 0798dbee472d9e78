"""Directory-backed storage: one UTF-8 file per key."""

import logging
import os
import re
import tempfile
from pathlib import Path

from budget_tracker.core.exceptions import StorageReadError, StorageWriteError
from budget_tracker.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class JsonFileStorage(KeyValueStorage):
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so a crash never leaves a half-written value.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError({"key": key, "path": str(path), "error": str(exc)}) from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageWriteError({"key": key, "path": str(path), "error": str(exc)}) from exc
        logger.debug(f"Wrote {len(value)} chars to {path}")

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageWriteError({"key": key, "path": str(path), "error": str(exc)}) from exc

    def __repr__(self) -> str:
        return f"<JsonFileStorage {self.directory}>"
