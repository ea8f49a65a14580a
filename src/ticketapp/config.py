"""Runtime settings for TicketApp, read from TICKETAPP_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "web" / "templates"
DEFAULT_SEED_FILE = PACKAGE_DIR / "web" / "data" / "tickets.json"
DEFAULT_STORAGE_PATH = "ticketapp.db"
DEFAULT_SEED_URL = "http://localhost:8000/data/tickets.json"
DEFAULT_SEED_TIMEOUT = 5.0


class ConfigError(Exception):
    """Raised when an environment variable holds an unusable value."""


@dataclass
class Settings:
    """TicketApp settings.

    Attributes:
        storage_path: SQLite file backing the client key-value store,
            or ":memory:".
        storage_scope: Partition of the key-value store (one per browser context).
        seed_url: Endpoint the tickets view hydrates from when storage is empty.
        seed_timeout: Timeout in seconds for the seed fetch.
        templates_dir: Directory the front controller renders pages from.
        seed_file: JSON file served at /data/tickets.json.
        log_dir: Directory for log files (None lets logging pick its default).
        log_level: Log level name.
    """

    storage_path: str = DEFAULT_STORAGE_PATH
    storage_scope: str = "default"
    seed_url: str = DEFAULT_SEED_URL
    seed_timeout: float = DEFAULT_SEED_TIMEOUT
    templates_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATES_DIR)
    seed_file: Path = field(default_factory=lambda: DEFAULT_SEED_FILE)
    log_dir: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from the environment.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with environment overrides applied.

        Raises:
            ConfigError: If TICKETAPP_SEED_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("TICKETAPP_SEED_TIMEOUT", str(DEFAULT_SEED_TIMEOUT))
        try:
            seed_timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"TICKETAPP_SEED_TIMEOUT must be a number, got {raw_timeout!r}") from e
        if seed_timeout <= 0:
            raise ConfigError("TICKETAPP_SEED_TIMEOUT must be positive")

        return cls(
            storage_path=env.get("TICKETAPP_STORAGE_PATH", DEFAULT_STORAGE_PATH),
            storage_scope=env.get("TICKETAPP_STORAGE_SCOPE", "default"),
            seed_url=env.get("TICKETAPP_SEED_URL", DEFAULT_SEED_URL),
            seed_timeout=seed_timeout,
            templates_dir=Path(env.get("TICKETAPP_TEMPLATES_DIR", str(DEFAULT_TEMPLATES_DIR))),
            seed_file=Path(env.get("TICKETAPP_SEED_FILE", str(DEFAULT_SEED_FILE))),
            log_dir=env.get("TICKETAPP_LOG_DIR"),
            log_level=env.get("TICKETAPP_LOG_LEVEL", "INFO"),
        )
