"""SessionManager - session record, cookie mirror and the client-side gate."""

from __future__ import annotations

import logging
import secrets
from http.cookies import SimpleCookie
from typing import TYPE_CHECKING

from ticketapp.logging import sanitize_for_log
from ticketapp.models import Navigation, Session
from ticketapp.notifications import Severity

if TYPE_CHECKING:
    from ticketapp.notifications import Notifier
    from ticketapp.storage import StorageAdapter

logger = logging.getLogger(__name__)

COOKIE_NAME = "ticketapp_session"
COOKIE_MAX_AGE = 24 * 60 * 60  # 1 day
LOGIN_PATH = "/auth/login"
PROTECTED_VIEWS = ("/dashboard", "/tickets")
GATE_REDIRECT_DELAY = 0.4
SESSION_EXPIRED_MESSAGE = "Your session has expired — please log in again."

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_token() -> str:
    """Generate an opaque session token ("tok_" + base36 suffix).

    Not cryptographically meaningful: collisions are unlikely, not impossible.
    """
    n = secrets.randbits(56)
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_BASE36[r])
    return "tok_" + ("".join(reversed(digits)) or "0")


def normalize_path(path: str) -> str:
    """Strip a trailing slash; the empty path is the root."""
    return path.rstrip("/") or "/"


class CookieJar:
    """The session cookie as seen by the server-side route guard.

    Only the token travels in the cookie. The latest change is kept as a
    Set-Cookie header value so the glue can hand it to the HTTP layer.
    """

    def __init__(self, name: str = COOKIE_NAME) -> None:
        self.name = name
        self.value: str | None = None
        self.max_age: int | None = None
        self.header: str | None = None

    def set(self, value: str, max_age: int = COOKIE_MAX_AGE) -> None:
        self.value = value
        self.max_age = max_age
        self.header = self._render(value, max_age)

    def clear(self) -> None:
        self.value = None
        self.max_age = 0
        self.header = self._render("", 0)

    def present(self) -> bool:
        return bool(self.value)

    def _render(self, value: str, max_age: int) -> str:
        cookie: SimpleCookie = SimpleCookie()
        cookie[self.name] = value
        cookie[self.name]["path"] = "/"
        cookie[self.name]["max-age"] = max_age
        return cookie[self.name].OutputString()


class SessionManager:
    """Creates, reads and destroys the single session of a storage scope."""

    def __init__(self, storage: StorageAdapter, cookies: CookieJar, notifier: Notifier) -> None:
        self._storage = storage
        self._cookies = cookies
        self._notifier = notifier

    def current_session(self) -> Session | None:
        """Return the persisted session, or None when absent or unreadable."""
        return self._storage.load_session()

    def start_session(self, username: str, fullname: str | None = None) -> Session:
        """Persist a new session and mirror its token into the cookie.

        Args:
            username: The authenticated user's name.
            fullname: Display name, stored when known (signup).

        Returns:
            The created Session.
        """
        session = Session(token=generate_token(), user=username, fullname=fullname)
        self._storage.save_session(session)
        self._cookies.set(session.token, COOKIE_MAX_AGE)
        logger.info("Session started for %s (%s)", username, sanitize_for_log(session.token))
        return session

    def end_session(self) -> None:
        """Remove the session record and clear the cookie."""
        self._storage.clear_session()
        self._cookies.clear()
        logger.info("Session ended")

    def is_authenticated(self) -> bool:
        return self.current_session() is not None

    def guard(self, path: str) -> Navigation | None:
        """Client-side gate for the protected views.

        Args:
            path: The path being displayed.

        Returns:
            None when the view may render, otherwise a delayed navigation to
            the login view (after an error toast).
        """
        if normalize_path(path) not in PROTECTED_VIEWS or self.is_authenticated():
            return None
        self._notifier.notify(SESSION_EXPIRED_MESSAGE, Severity.ERROR)
        return Navigation(LOGIN_PATH, GATE_REDIRECT_DELAY)
