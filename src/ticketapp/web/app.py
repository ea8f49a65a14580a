"""FastAPI front controller setup."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateNotFound
from markupsafe import escape

from ticketapp.config import Settings
from ticketapp.logging import setup_logging
from ticketapp.web.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the front controller application."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="TicketApp",
        description="Front controller for the TicketApp ticket tracker",
        version="0.1.0",
    )

    # Store config for dependencies
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # Exception handlers
    @app.exception_handler(TemplateNotFound)
    async def template_not_found_handler(_request: Request, exc: TemplateNotFound) -> HTMLResponse:
        logger.error("Template not found: %s", exc.name)
        return HTMLResponse(
            f"<h1>Template not found: {escape(exc.name)}</h1>",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(router)

    return app


def main() -> None:
    """Run the front controller with uvicorn."""
    import uvicorn  # noqa: PLC0415

    settings = Settings.from_env()
    setup_logging(settings)
    uvicorn.run(create_app(settings), host="127.0.0.1", port=8000)
