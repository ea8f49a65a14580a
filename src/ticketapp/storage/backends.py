"""Key-value backends with the shape of a browser's localStorage."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from sqlalchemy import Engine, create_engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ticketapp.exceptions import StorageBackendError
from ticketapp.storage.models import Base, StorageItem


class StorageBackend(Protocol):
    """Interface for a string-to-string persistent store."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None if the key is missing."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a string under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""
        ...


class MemoryBackend:
    """Dict-backed store. One instance is one browser scope."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


def _create_engine(db_path: str) -> Engine:
    if db_path == ":memory:":
        # One shared connection, or each session would see a fresh empty DB
        return create_engine(
            "sqlite:///:memory:",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}")


class SqliteBackend:
    """SQLite-backed store, partitioned by scope.

    Several browser contexts can share one database file; each one reads and
    writes only the rows of its own scope.
    """

    def __init__(self, db_path: str = "ticketapp.db", scope: str = "default") -> None:
        """Open the database and create the storage table if needed.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
            scope: Partition name for this browser context.
        """
        self.db_path = db_path
        self.scope = scope
        self._engine = _create_engine(db_path)
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        Base.metadata.create_all(self._engine)

    def close(self) -> None:
        """Dispose of the engine's connections."""
        self._engine.dispose()

    def get_item(self, key: str) -> str | None:
        try:
            with self._sessions() as session:
                item = session.get(StorageItem, (self.scope, key))
                return None if item is None else item.value
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to read '{key}'") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with self._sessions.begin() as session:
                session.merge(StorageItem(scope=self.scope, key=key, value=value))
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to write '{key}'") from e

    def remove_item(self, key: str) -> None:
        stmt = delete(StorageItem).where(StorageItem.scope == self.scope, StorageItem.key == key)
        try:
            with self._sessions.begin() as session:
                session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to remove '{key}'") from e

    def keys(self) -> list[str]:
        """List the keys stored in this scope."""
        stmt = select(StorageItem.key).where(StorageItem.scope == self.scope)
        with self._sessions() as session:
            return list(session.scalars(stmt))
