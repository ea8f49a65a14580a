"""Logging setup for TicketApp.

Records from every ``ticketapp.*`` logger go to a size-rotated file and,
optionally, to the console. Handlers mask session tokens, cookie values and
passwords before anything is written.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ticketapp.config import Settings

ROOT_LOGGER = "ticketapp"
LOG_DIR = "logs"
LOG_FILE = "ticketapp.log"
MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SECRETS = (
    (re.compile(r"tok_[a-z0-9]+"), "tok_[REDACTED]"),
    (re.compile(r"ticketapp_session=[^;\s]+"), "ticketapp_session=[REDACTED]"),
    (re.compile(r"password=\S+"), "password=[REDACTED]"),
)


def sanitize_for_log(text: str) -> str:
    """Mask session tokens, cookie values and passwords in text."""
    for pattern, replacement in _SECRETS:
        text = pattern.sub(replacement, text)
    return text


class RedactingFilter(logging.Filter):
    """Replaces a record's message with its sanitized form."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = sanitize_for_log(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logging(
    settings: Settings | None = None,
    *,
    console: bool = True,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> logging.Logger:
    """Attach file and console handlers to the ticketapp logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        settings: Supplies log_dir and log_level. Defaults to Settings.from_env(),
            so TICKETAPP_LOG_DIR and TICKETAPP_LOG_LEVEL apply.
        console: Also log to stderr.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files to keep.

    Returns:
        The ticketapp logger.
    """
    if settings is None:
        settings = Settings.from_env()

    log_dir = Path(settings.log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    redact = RedactingFilter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(redact)
        logger.addHandler(handler)

    logger.info("Logging to %s at %s", log_path, logging.getLevelName(level))
    return logger
