"""Storage Adapter - browser-scoped persistence for users, tickets and the session."""

from ticketapp.storage.adapter import StorageAdapter
from ticketapp.storage.backends import MemoryBackend, SqliteBackend, StorageBackend
from ticketapp.storage.models import Collection

__all__ = [
    "Collection",
    "MemoryBackend",
    "SqliteBackend",
    "StorageAdapter",
    "StorageBackend",
]
