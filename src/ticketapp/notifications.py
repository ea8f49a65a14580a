"""Transient toast notifications."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

logger = logging.getLogger(__name__)

TOAST_DURATION = 3.5  # seconds a toast stays visible


class Severity(StrEnum):
    """Toast severity."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Toast:
    """A queued notification."""

    message: str
    severity: Severity
    created_at: float
    duration: float = TOAST_DURATION

    def expired(self, now: float) -> bool:
        return now >= self.created_at + self.duration


@dataclass
class Notifier:
    """Stack of auto-dismissing toasts.

    Toasts are appended in order and stay until their duration elapses;
    several can be visible at once.
    """

    clock: Callable[[], float] = time.monotonic
    duration: float = TOAST_DURATION
    _toasts: list[Toast] = field(default_factory=list)

    def notify(self, message: str, severity: Severity | str = Severity.INFO) -> Toast:
        """Enqueue a toast.

        Args:
            message: Text to display.
            severity: One of info, success, error.

        Returns:
            The queued Toast.
        """
        toast = Toast(
            message=message,
            severity=Severity(severity),
            created_at=self.clock(),
            duration=self.duration,
        )
        self._toasts.append(toast)
        log_level = logging.WARNING if toast.severity is Severity.ERROR else logging.INFO
        logger.log(log_level, "[%s] %s", toast.severity.value, message)
        return toast

    def active(self) -> list[Toast]:
        """Drop expired toasts and return the visible ones, oldest first."""
        now = self.clock()
        self._toasts = [t for t in self._toasts if not t.expired(now)]
        return list(self._toasts)

    def drain(self) -> list[Toast]:
        """Return every queued toast and clear the queue."""
        toasts, self._toasts = self._toasts, []
        return toasts

    @property
    def queued(self) -> list[Toast]:
        """Queued toasts, including expired ones not yet pruned."""
        return list(self._toasts)
