"""Front controller - page routing, cookie route guard and seed data."""

from ticketapp.web.app import create_app, main
from ticketapp.web.routes import PROTECTED_PREFIXES, ROUTES

__all__ = [
    "PROTECTED_PREFIXES",
    "ROUTES",
    "create_app",
    "main",
]
