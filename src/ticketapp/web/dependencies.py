"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from ticketapp.config import Settings


def get_settings(request: Request) -> Settings:
    """Dependency that provides the app's Settings."""
    settings: Settings = request.app.state.settings
    return settings


def get_templates(request: Request) -> Jinja2Templates:
    """Dependency that provides the page template renderer."""
    templates: Jinja2Templates = request.app.state.templates
    return templates


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
