"""View Renderers - dashboard and ticket list presentation state."""

from ticketapp.views.base import FormMode, TicketForm, TicketView
from ticketapp.views.dashboard import DashboardView
from ticketapp.views.seed import SeedClient
from ticketapp.views.tickets import TicketsView

__all__ = [
    "DashboardView",
    "FormMode",
    "SeedClient",
    "TicketForm",
    "TicketView",
    "TicketsView",
]
