"""AuthFlows - signup, login and logout against the stored user list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from ticketapp.exceptions import InvalidCredentials, ValidationError
from ticketapp.models import Navigation, User
from ticketapp.notifications import Severity
from ticketapp.session import LOGIN_PATH

if TYPE_CHECKING:
    from ticketapp.context import AppContext

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"
DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo"
MIN_PASSWORD_LENGTH = 6

LOGIN_REDIRECT_DELAY = 0.3
SIGNUP_REDIRECT_DELAY = 0.5
LOGOUT_REDIRECT_DELAY = 0.3


class AuthFlows:
    """User-facing authentication flows.

    Every flow notifies exactly once: on success it returns the navigation to
    perform, on failure it raises after posting an error toast. The "demo"
    account is a built-in bypass, never a stored user, and its name is
    reserved at signup.
    """

    def __init__(self, context: AppContext) -> None:
        self._storage = context.storage
        self._sessions = context.sessions
        self._notifier = context.notifier

    def login(self, username: str, password: str) -> Navigation:
        """Log in with a stored account or the demo bypass.

        Args:
            username: Username; surrounding whitespace is ignored.
            password: Password, compared exactly.

        Returns:
            Navigation to the dashboard.

        Raises:
            ValidationError: If username or password is empty.
            InvalidCredentials: If no account matches.
        """
        username = (username or "").strip()
        password = password or ""
        if not username:
            self._fail(ValidationError("username", "Username is required"))
        if not password:
            self._fail(ValidationError("password", "Password is required"))

        if not self._matches(username, password):
            logger.info("Rejected login for %s", username)
            self._fail(InvalidCredentials("Invalid credentials"))

        self._sessions.start_session(username)
        self._notifier.notify("Login successful", Severity.SUCCESS)
        return Navigation(DASHBOARD_PATH, LOGIN_REDIRECT_DELAY)

    def signup(
        self,
        fullname: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> Navigation:
        """Create an account and log it in.

        Checks run in a fixed order and stop at the first failure: full name,
        username, password length, password confirmation, username taken.

        Returns:
            Navigation to the dashboard.

        Raises:
            ValidationError: On the first failing check.
        """
        fullname = (fullname or "").strip()
        username = (username or "").strip()
        password = password or ""
        confirm_password = confirm_password or ""

        if not fullname:
            self._fail(ValidationError("fullname", "Full name is required"))
        if not username:
            self._fail(ValidationError("username", "Username is required"))
        if len(password) < MIN_PASSWORD_LENGTH:
            self._fail(
                ValidationError(
                    "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )
            )
        if password != confirm_password:
            self._fail(ValidationError("confirm_password", "Passwords do not match"))

        users = self._storage.load_users()
        if username == DEMO_USERNAME or any(u.username == username for u in users):
            self._fail(ValidationError("username", "Username already exists"))

        users.append(User(fullname=fullname, username=username, password=password))
        self._storage.save_users(users)
        logger.info("Created account %s", username)

        self._sessions.start_session(username, fullname)
        self._notifier.notify(f"Account created successfully! Welcome {fullname}", Severity.SUCCESS)
        return Navigation(DASHBOARD_PATH, SIGNUP_REDIRECT_DELAY)

    def logout(self) -> Navigation:
        """End the session unconditionally."""
        self._sessions.end_session()
        self._notifier.notify("Logged out", Severity.INFO)
        return Navigation(LOGIN_PATH, LOGOUT_REDIRECT_DELAY)

    def _matches(self, username: str, password: str) -> bool:
        if username == DEMO_USERNAME and password == DEMO_PASSWORD:
            return True
        return any(
            u.username == username and u.password == password for u in self._storage.load_users()
        )

    def _fail(self, error: ValidationError | InvalidCredentials) -> NoReturn:
        self._notifier.notify(str(error), Severity.ERROR)
        raise error
