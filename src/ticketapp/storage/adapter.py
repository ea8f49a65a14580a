"""StorageAdapter - typed access to the users, tickets and session collections."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ticketapp.exceptions import StorageBackendError, StorageParseError
from ticketapp.models import Session, Ticket, User
from ticketapp.storage.backends import MemoryBackend, StorageBackend
from ticketapp.storage.models import Collection

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _default(collection: Collection) -> Any:
    if collection is Collection.SESSION:
        return None
    return []


class StorageAdapter:
    """JSON (de)serialization over a key-value backend.

    Loading never raises. A missing key or malformed JSON yields the
    collection's empty default; list records that do not match their model
    are skipped one by one. Saving is fire-and-forget; backend failures are
    logged and swallowed.
    """

    def __init__(self, backend: StorageBackend | None = None) -> None:
        self.backend: StorageBackend = backend if backend is not None else MemoryBackend()

    # --- Raw collection access ---

    def load(self, collection: Collection) -> Any:
        """Load and JSON-decode a collection.

        Args:
            collection: The collection to read.

        Returns:
            The decoded value, or [] (users, tickets) / None (session) when the
            key is missing or its content cannot be decoded.
        """
        try:
            return self._decode(collection)
        except StorageParseError as e:
            logger.warning("Discarding unreadable %s: %s", collection.value, e)
            return _default(collection)

    def save(self, collection: Collection, value: Any) -> None:
        """JSON-encode and persist a collection."""
        try:
            self.backend.set_item(collection.value, json.dumps(value))
        except StorageBackendError:
            logger.exception("Failed to persist %s", collection.value)

    def remove(self, collection: Collection) -> None:
        """Delete a collection's key."""
        try:
            self.backend.remove_item(collection.value)
        except StorageBackendError:
            logger.exception("Failed to remove %s", collection.value)

    def _decode(self, collection: Collection) -> Any:
        try:
            raw = self.backend.get_item(collection.value)
        except StorageBackendError as e:
            raise StorageParseError(str(e)) from e
        if raw is None:
            return _default(collection)
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageParseError(f"invalid JSON: {e}") from e
        # JSON null (and, for lists, other falsy values) reads as empty
        if value is None or (collection is not Collection.SESSION and not value):
            return _default(collection)
        return value

    # --- Typed accessors ---

    def load_users(self) -> list[User]:
        return self._load_records(Collection.USERS, User)

    def save_users(self, users: list[User]) -> None:
        self.save(Collection.USERS, [u.model_dump(mode="json") for u in users])

    def load_tickets(self) -> list[Ticket]:
        return self._load_records(Collection.TICKETS, Ticket)

    def save_tickets(self, tickets: list[Ticket]) -> None:
        self.save(Collection.TICKETS, [t.to_record() for t in tickets])

    def load_session(self) -> Session | None:
        raw = self.load(Collection.SESSION)
        if raw is None:
            return None
        try:
            return Session.model_validate(raw)
        except PydanticValidationError as e:
            logger.warning("Discarding unreadable %s: %s", Collection.SESSION.value, e)
            return None

    def save_session(self, session: Session) -> None:
        self.save(Collection.SESSION, session.model_dump(mode="json"))

    def clear_session(self) -> None:
        self.remove(Collection.SESSION)

    def _load_records(self, collection: Collection, model: type[ModelT]) -> list[ModelT]:
        """Validate a list collection record by record.

        Records that do not match the model are logged and skipped, so one bad
        entry does not cost the valid ones on the next save.
        """
        raw = self.load(collection)
        if not isinstance(raw, list):
            logger.warning(
                "Discarding %s: expected a list, got %s", collection.value, type(raw).__name__
            )
            return []
        records: list[ModelT] = []
        for item in raw:
            try:
                records.append(model.model_validate(item))
            except PydanticValidationError as e:
                logger.warning("Skipping unreadable %s record %r: %s", collection.value, item, e)
        return records
