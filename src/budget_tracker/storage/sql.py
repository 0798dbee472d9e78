"""SQLAlchemy-backed key-value storage.

Using SQLAlchemy for the table mapping; SQLite by default, any database
SQLAlchemy can reach otherwise.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from budget_tracker.core.exceptions import StorageReadError, StorageWriteError
from budget_tracker.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class KeyValueEntry(Base):
    """One persisted value. The whole budget payload lives in a single row."""

    __tablename__ = "key_value_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key={self.key}, updated_at={self.updated_at})>"


class SqlKeyValueStorage(KeyValueStorage):
    """Manages the engine, the session factory and the entries table."""

    def __init__(self, database_url: str = "sqlite:///budget_tracker.db", echo: bool = False):
        self.database_url = database_url
        self.engine = create_engine(database_url, echo=echo)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StorageReadError({"database_url": database_url, "error": str(exc)}) from exc

        logger.info(f"Initialized key-value storage at {self.engine.url!r}")

    def get(self, key: str) -> str | None:
        try:
            with self.SessionLocal() as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError as exc:
            raise StorageReadError({"key": key, "error": str(exc)}) from exc

    def set(self, key: str, value: str) -> None:
        try:
            with self.SessionLocal.begin() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as exc:
            raise StorageWriteError({"key": key, "error": str(exc)}) from exc
        logger.debug(f"Saved entry: {key}")

    def remove(self, key: str) -> None:
        try:
            with self.SessionLocal.begin() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is not None:
                    session.delete(entry)
        except SQLAlchemyError as exc:
            raise StorageWriteError({"key": key, "error": str(exc)}) from exc

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"<SqlKeyValueStorage {self.engine.url!r}>"
