"""Session Manager - session token lifecycle and route gating."""

from ticketapp.session.manager import (
    COOKIE_MAX_AGE,
    COOKIE_NAME,
    LOGIN_PATH,
    PROTECTED_VIEWS,
    CookieJar,
    SessionManager,
    generate_token,
    normalize_path,
)

__all__ = [
    "COOKIE_MAX_AGE",
    "COOKIE_NAME",
    "LOGIN_PATH",
    "PROTECTED_VIEWS",
    "CookieJar",
    "SessionManager",
    "generate_token",
    "normalize_path",
]
