"""AppContext - the per-browser state every component is built from."""

from __future__ import annotations

from dataclasses import dataclass, field

from ticketapp.config import Settings
from ticketapp.notifications import Notifier
from ticketapp.session import CookieJar, SessionManager
from ticketapp.storage import MemoryBackend, SqliteBackend, StorageAdapter


@dataclass
class AppContext:
    """Storage scope, cookie channel and toast queue of one browser context.

    Components receive the context instead of reaching for module-level
    state, so tests can build isolated instances.
    """

    storage: StorageAdapter = field(default_factory=StorageAdapter)
    cookies: CookieJar = field(default_factory=CookieJar)
    notifier: Notifier = field(default_factory=Notifier)
    settings: Settings = field(default_factory=Settings)
    sessions: SessionManager = field(init=False)

    def __post_init__(self) -> None:
        self.sessions = SessionManager(self.storage, self.cookies, self.notifier)

    @classmethod
    def in_memory(cls, settings: Settings | None = None) -> AppContext:
        """Context over a fresh dict-backed store."""
        return cls(
            storage=StorageAdapter(MemoryBackend()),
            settings=settings if settings is not None else Settings(),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> AppContext:
        """Context over the SQLite store named by the settings."""
        backend = SqliteBackend(settings.storage_path, scope=settings.storage_scope)
        return cls(storage=StorageAdapter(backend), settings=settings)
