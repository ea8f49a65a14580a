"""Shared form state and submit lifecycle for the ticket views."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, select_autoescape

from ticketapp.exceptions import TicketNotFoundError, ValidationError
from ticketapp.notifications import Severity
from ticketapp.tickets import TicketStore

if TYPE_CHECKING:
    from ticketapp.context import AppContext
    from ticketapp.models import Navigation, Ticket

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


@functools.cache
def template_env() -> Environment:
    """Jinja environment for view fragments, HTML-escaping every value."""
    return Environment(
        loader=PackageLoader("ticketapp.views", "templates"),
        autoescape=select_autoescape(["html"]),
    )


class FormMode(StrEnum):
    """Whether the ticket form creates a new ticket or saves an existing one."""

    CREATE = "create"
    EDIT = "edit"


@dataclass
class TicketForm:
    """Values and inline errors of a ticket form."""

    title: str = ""
    status: str = ""
    priority: str = "medium"
    description: str = ""
    editing_id: int | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATE if self.editing_id is None else FormMode.EDIT

    def populate(self, ticket: Ticket) -> None:
        self.title = ticket.title
        self.status = ticket.status.value
        self.priority = ticket.priority.value
        self.description = ticket.description
        self.editing_id = ticket.id
        self.errors.clear()

    def reset(self) -> None:
        self.title = ""
        self.status = ""
        self.priority = "medium"
        self.description = ""
        self.editing_id = None
        self.errors.clear()


class TicketView:
    """Base for a protected view with its own ticket form.

    Subclasses own their transient state; nothing is shared between view
    instances except the store behind them.
    """

    path: str = "/"
    delete_prompt: str = "Delete this ticket?"

    def __init__(self, context: AppContext, store: TicketStore | None = None) -> None:
        self._context = context
        self._notifier = context.notifier
        self.store = store if store is not None else TicketStore(context)
        self.form = TicketForm()

    def enter(self) -> Navigation | None:
        """Apply the session gate before the view renders."""
        return self._context.sessions.guard(self.path)

    def on_edit_click(self, ticket_id: int) -> Ticket | None:
        """Load a ticket into the form and switch it to edit mode."""
        try:
            ticket = self.store.get(ticket_id)
        except TicketNotFoundError:
            self._notifier.notify("Ticket not found", Severity.ERROR)
            return None
        self.form.populate(ticket)
        return ticket

    def on_delete_click(self, ticket_id: int, confirm: ConfirmCallback) -> bool:
        """Delete a ticket once the user confirms.

        Args:
            ticket_id: Ticket to delete.
            confirm: Asks the user; receives the prompt, returns True to proceed.

        Returns:
            True if the ticket was deleted.
        """
        if not confirm(self.delete_prompt):
            return False
        self.store.delete(ticket_id)
        if self.form.editing_id == ticket_id:
            self.form.reset()
        self._notifier.notify("Ticket deleted", Severity.SUCCESS)
        return True

    def submit(
        self,
        title: str,
        status: str,
        priority: str | None = None,
        description: str | None = None,
    ) -> Ticket | None:
        """Create or save a ticket depending on the form mode.

        Field errors land in form.errors and are announced with one toast.

        Returns:
            The created or updated ticket, or None on failure.
        """
        form = self.form
        form.errors.clear()
        form.title, form.status = title, status
        form.priority = priority or form.priority
        form.description = description or ""
        try:
            if form.editing_id is None:
                ticket = self.store.create(title, status, priority, description)
                message = "Ticket created"
            else:
                ticket = self.store.update(form.editing_id, title, status, priority, description)
                message = "Ticket updated"
        except ValidationError as e:
            form.errors[e.field] = e.message
            self._notifier.notify(e.message, Severity.ERROR)
            return None
        except TicketNotFoundError:
            logger.warning("Ticket %s vanished while editing", form.editing_id)
            form.reset()
            self._notifier.notify("Ticket not found", Severity.ERROR)
            return None
        form.reset()
        self._notifier.notify(message, Severity.SUCCESS)
        return ticket

    def render(self, template: str, **context: object) -> str:
        return template_env().get_template(template).render(**context)
