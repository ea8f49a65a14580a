"""TicketStore - CRUD and search over the persisted ticket list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ticketapp.exceptions import TicketNotFoundError, ValidationError
from ticketapp.models import Ticket, TicketPriority, TicketStats, TicketStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ticketapp.context import AppContext

logger = logging.getLogger(__name__)


def next_ticket_id(tickets: Iterable[Ticket]) -> int:
    """One more than the highest id, or 1 for an empty list."""
    return max((t.id for t in tickets), default=0) + 1


def validate_fields(
    title: str | None,
    status: str | None,
    priority: str | None = None,
) -> tuple[str, TicketStatus, TicketPriority | None]:
    """Check ticket form fields.

    Args:
        title: Ticket title; trimmed, must be non-empty.
        status: One of open, in_progress, closed.
        priority: One of low, medium, high; empty means unspecified.

    Returns:
        Trimmed title, parsed status and parsed priority (None if unspecified).

    Raises:
        ValidationError: Naming the first offending field.
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("title", "Title is required")
    try:
        parsed_status = TicketStatus(status or "")
    except ValueError as e:
        raise ValidationError("status", "Please select a valid status") from e
    if not priority:
        return title, parsed_status, None
    try:
        parsed_priority = TicketPriority(priority)
    except ValueError as e:
        raise ValidationError("priority", "Please select a valid priority") from e
    return title, parsed_status, parsed_priority


class TicketStore:
    """Ticket collection backed by the context's storage.

    Every operation re-reads storage, so two stores over the same context
    always agree. Ids are allocated as max + 1 and never reused while the
    highest ticket survives.
    """

    def __init__(self, context: AppContext) -> None:
        self._storage = context.storage

    def list(self, status: str | None = None, search: str | None = None) -> list[Ticket]:
        """List tickets, optionally filtered.

        Args:
            status: Keep only tickets with exactly this status.
            search: Case-insensitive substring of title or description.

        Returns:
            Matching tickets in insertion order.
        """
        tickets = self._storage.load_tickets()
        if status:
            tickets = [t for t in tickets if t.status == status]
        needle = (search or "").strip().lower()
        if needle:
            tickets = [
                t
                for t in tickets
                if needle in t.title.lower() or needle in t.description.lower()
            ]
        return tickets

    def get(self, ticket_id: int) -> Ticket:
        """Get ticket by ID.

        Raises:
            TicketNotFoundError: If the ticket doesn't exist.
        """
        for ticket in self._storage.load_tickets():
            if ticket.id == ticket_id:
                return ticket
        raise TicketNotFoundError(f"Ticket with id '{ticket_id}' not found")

    def create(
        self,
        title: str,
        status: str,
        priority: str | None = None,
        description: str | None = None,
    ) -> Ticket:
        """Create a ticket with the next id.

        Raises:
            ValidationError: If title or status (or a given priority) is invalid.
        """
        clean_title, parsed_status, parsed_priority = validate_fields(title, status, priority)
        tickets = self._storage.load_tickets()
        ticket = Ticket(
            id=next_ticket_id(tickets),
            title=clean_title,
            status=parsed_status,
            priority=parsed_priority or TicketPriority.MEDIUM,
            description=(description or "").strip(),
        )
        tickets.append(ticket)
        self._storage.save_tickets(tickets)
        logger.info("Created ticket %s", ticket.id)
        return ticket

    def update(
        self,
        ticket_id: int,
        title: str,
        status: str,
        priority: str | None = None,
        description: str | None = None,
    ) -> Ticket:
        """Replace a ticket's fields in place.

        Priority and description keep their current values when None.

        Raises:
            ValidationError: If title or status (or a given priority) is invalid.
            TicketNotFoundError: If the ticket doesn't exist.
        """
        clean_title, parsed_status, parsed_priority = validate_fields(title, status, priority)
        tickets = self._storage.load_tickets()
        for index, current in enumerate(tickets):
            if current.id != ticket_id:
                continue
            changes: dict[str, Any] = {"title": clean_title, "status": parsed_status}
            if parsed_priority is not None:
                changes["priority"] = parsed_priority
            if description is not None:
                changes["description"] = description.strip()
            updated = current.model_copy(update=changes)
            tickets[index] = updated
            self._storage.save_tickets(tickets)
            logger.info("Updated ticket %s", ticket_id)
            return updated
        raise TicketNotFoundError(f"Ticket with id '{ticket_id}' not found")

    def delete(self, ticket_id: int) -> None:
        """Delete a ticket. Unknown ids are ignored."""
        tickets = self._storage.load_tickets()
        remaining = [t for t in tickets if t.id != ticket_id]
        if len(remaining) == len(tickets):
            logger.debug("Delete of unknown ticket %s ignored", ticket_id)
        else:
            logger.info("Deleted ticket %s", ticket_id)
        self._storage.save_tickets(remaining)

    def stats(self) -> TicketStats:
        """Count tickets per status."""
        tickets = self._storage.load_tickets()
        return TicketStats(
            total=len(tickets),
            open=sum(1 for t in tickets if t.status is TicketStatus.OPEN),
            in_progress=sum(1 for t in tickets if t.status is TicketStatus.IN_PROGRESS),
            closed=sum(1 for t in tickets if t.status is TicketStatus.CLOSED),
        )

    def is_empty(self) -> bool:
        return not self._storage.load_tickets()

    def replace_all(self, records: Iterable[dict[str, Any] | Ticket]) -> list[Ticket]:
        """Overwrite the collection, e.g. with seed data.

        Records that do not form a valid ticket are skipped, as are later
        records reusing an id already taken.

        Returns:
            The tickets stored.
        """
        tickets: list[Ticket] = []
        seen: set[int] = set()
        for record in records:
            try:
                ticket = record if isinstance(record, Ticket) else Ticket.model_validate(record)
            except ValueError as e:
                logger.warning("Skipping invalid ticket record %r: %s", record, e)
                continue
            if ticket.id in seen:
                logger.warning("Skipping ticket record with duplicate id %d", ticket.id)
                continue
            seen.add(ticket.id)
            tickets.append(ticket)
        self._storage.save_tickets(tickets)
        return tickets
