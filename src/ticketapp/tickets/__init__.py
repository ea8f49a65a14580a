"""Ticket Store - persisted ticket CRUD, filtering and search."""

from ticketapp.tickets.store import TicketStore, next_ticket_id, validate_fields

__all__ = [
    "TicketStore",
    "next_ticket_id",
    "validate_fields",
]
