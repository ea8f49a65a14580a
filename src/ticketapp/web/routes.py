"""Front controller routes: seed data and path-to-template pages."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from ticketapp.session import COOKIE_NAME, LOGIN_PATH, normalize_path
from ticketapp.web.dependencies import SettingsDep, TemplatesDep

logger = logging.getLogger(__name__)

# Path -> page template
ROUTES = {
    "/": "landing.html",
    "/auth/login": "login.html",
    "/auth/signup": "signup.html",
    "/dashboard": "dashboard.html",
    "/tickets": "tickets.html",
}

# Prefixes that require the session cookie. "/" stays public.
PROTECTED_PREFIXES = ("/dashboard", "/tickets")

NOT_FOUND_TEMPLATE = "404.html"
NOT_FOUND_FALLBACK = "<h1>404 - Not Found</h1>"

router = APIRouter()


def is_protected(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in PROTECTED_PREFIXES)


def load_json(path: Path) -> Any:
    """Read a JSON data file; missing or unreadable files read as []."""
    if not path.exists():
        return []
    try:
        return json.loads(path.read_text(encoding="utf-8")) or []
    except (OSError, ValueError) as e:
        logger.warning("Could not read data file %s: %s", path, e)
        return []


@router.get("/data/tickets.json")
def seed_tickets(settings: SettingsDep) -> JSONResponse:
    """Sample tickets for an empty client store."""
    return JSONResponse(content=load_json(settings.seed_file))


@router.get("/{path:path}", response_class=HTMLResponse)
def page(
    path: str, request: Request, settings: SettingsDep, templates: TemplatesDep
) -> Response:
    """Render the template mapped to the path.

    Protected paths redirect to the login page when the session cookie is
    absent. Only the cookie's presence is checked, never its value.
    """
    uri = normalize_path("/" + path)

    if is_protected(uri) and not request.cookies.get(COOKIE_NAME):
        logger.info("No session cookie for %s, redirecting to login", uri)
        return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_302_FOUND)

    template = ROUTES.get(uri)
    if template is not None:
        return templates.TemplateResponse(request, template, {"path": uri})

    logger.info("No route for %s", uri)
    if (settings.templates_dir / NOT_FOUND_TEMPLATE).exists():
        return templates.TemplateResponse(
            request, NOT_FOUND_TEMPLATE, {"path": uri}, status_code=status.HTTP_404_NOT_FOUND
        )
    return HTMLResponse(NOT_FOUND_FALLBACK, status_code=status.HTTP_404_NOT_FOUND)
