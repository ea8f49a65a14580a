"""TicketsView - ticket cards with a toggleable create/edit form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ticketapp.views.base import FormMode, TicketView
from ticketapp.views.seed import SeedClient

if TYPE_CHECKING:
    from ticketapp.context import AppContext
    from ticketapp.models import Navigation, Ticket
    from ticketapp.tickets import TicketStore

logger = logging.getLogger(__name__)


class TicketsView(TicketView):
    """Card list of every ticket.

    On its first successful entry, an empty store is hydrated once from the
    seed endpoint; a failed or empty fetch leaves the list empty.
    """

    path = "/tickets"

    def __init__(
        self,
        context: AppContext,
        store: TicketStore | None = None,
        seed_client: SeedClient | None = None,
    ) -> None:
        super().__init__(context, store)
        settings = context.settings
        self._seed_client = (
            seed_client
            if seed_client is not None
            else SeedClient(settings.seed_url, settings.seed_timeout)
        )
        self._seeded = False
        self.form_visible = False

    @property
    def form_title(self) -> str:
        return "Create Ticket" if self.form.mode is FormMode.CREATE else "Edit Ticket"

    def enter(self) -> Navigation | None:
        """Gate the view, then hydrate from seed data on the first visit."""
        redirect = super().enter()
        if redirect is not None:
            return redirect
        if not self._seeded:
            self._seeded = True
            self.hydrate()
        return None

    def hydrate(self) -> list[Ticket]:
        """Fill an empty store from the seed endpoint.

        The seed client is closed after its single fetch.

        Returns:
            The tickets stored by this call (empty if nothing was loaded).
        """
        if not self.store.is_empty():
            return []
        try:
            records = self._seed_client.fetch()
        finally:
            self._seed_client.close()
        if not records:
            return []
        tickets = self.store.replace_all(records)
        logger.info("Hydrated %d seed tickets", len(tickets))
        return tickets

    def tickets(self) -> list[Ticket]:
        return self.store.list()

    def render_cards(self) -> str:
        """Card list HTML."""
        return self.render("ticket_cards.html", tickets=self.tickets())

    # --- Handlers bound by the presentation layer ---

    def on_new_click(self) -> None:
        self.form.reset()
        self.form_visible = True

    def on_cancel_click(self) -> None:
        self.form_visible = False

    def on_edit_click(self, ticket_id: int) -> Ticket | None:
        ticket = super().on_edit_click(ticket_id)
        if ticket is not None:
            self.form_visible = True
        return ticket

    def on_create_submit(
        self,
        title: str,
        status: str,
        priority: str | None = None,
        description: str | None = "",
    ) -> Ticket | None:
        ticket = self.submit(title, status, priority, description)
        if ticket is not None:
            self.form_visible = False
        return ticket
