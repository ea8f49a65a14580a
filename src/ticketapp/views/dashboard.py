"""DashboardView - ticket stats and a filterable table with an inline form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ticketapp.notifications import Severity
from ticketapp.views.base import TicketView

if TYPE_CHECKING:
    from ticketapp.context import AppContext
    from ticketapp.models import Ticket, TicketStats
    from ticketapp.tickets import TicketStore


class DashboardView(TicketView):
    """Stats, a filtered/searched table and one shared create/edit form.

    The form switches to edit mode when a row's Edit is clicked and back to
    create mode after a save or reset. Its submit label is "Save" either way.
    """

    path = "/dashboard"
    delete_prompt = "Are you sure you want to delete this ticket?"
    submit_label = "Save"

    def __init__(self, context: AppContext, store: TicketStore | None = None) -> None:
        super().__init__(context, store)
        self.status_filter = ""
        self.search = ""

    @property
    def stats(self) -> TicketStats:
        """Counts recomputed from storage on every read."""
        return self.store.stats()

    def rows(self) -> list[Ticket]:
        return self.store.list(status=self.status_filter or None, search=self.search or None)

    def render_table(self) -> str:
        """Table body HTML for the current filter and search."""
        return self.render("ticket_table.html", tickets=self.rows())

    def render_stats(self) -> str:
        return self.render("ticket_stats.html", stats=self.stats)

    # --- Handlers bound by the presentation layer ---

    def on_filter_change(self, status: str) -> None:
        self.status_filter = status or ""

    def on_search_input(self, text: str) -> None:
        self.search = (text or "").strip()

    def on_edit_click(self, ticket_id: int) -> Ticket | None:
        ticket = super().on_edit_click(ticket_id)
        if ticket is not None:
            self._notifier.notify("Editing ticket", Severity.INFO)
        return ticket

    def on_create_submit(
        self,
        title: str,
        status: str,
        priority: str | None = "medium",
        description: str | None = "",
    ) -> Ticket | None:
        return self.submit(title, status, priority, description)

    def on_form_reset(self) -> None:
        self.form.reset()
