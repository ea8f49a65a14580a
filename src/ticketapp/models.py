"""Record types shared by the storage, session, auth and ticket components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class TicketStatus(StrEnum):
    """Ticket status enum."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        """Human-readable status, as shown on ticket cards."""
        return self.value.replace("_", " ")

    @property
    def dashboard_label(self) -> str:
        """Status as shown in the dashboard table (closed reads as resolved)."""
        if self is TicketStatus.CLOSED:
            return "resolved"
        return self.label

    @property
    def css_class(self) -> str:
        return f"status-{self.value}"


class TicketPriority(StrEnum):
    """Ticket priority enum."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def css_class(self) -> str:
        return f"priority-{self.value}"


class User(BaseModel):
    """A signed-up account. Passwords are kept in plaintext."""

    fullname: str
    username: str
    password: str


class Session(BaseModel):
    """The single active session of a storage scope."""

    token: str
    user: str
    fullname: str | None = None


class Ticket(BaseModel):
    """A support ticket."""

    id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    status: TicketStatus
    priority: TicketPriority = TicketPriority.MEDIUM
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: object) -> object:
        return "" if value is None else value

    def to_record(self) -> dict[str, object]:
        """Plain JSON-compatible dict, as persisted in storage."""
        return self.model_dump(mode="json")


@dataclass
class TicketStats:
    """Ticket counts shown on the dashboard."""

    total: int
    open: int
    in_progress: int
    closed: int


@dataclass(frozen=True)
class Navigation:
    """A request to move the client to another path after a delay.

    Attributes:
        path: Target path.
        delay: Seconds to wait before navigating, so a toast stays visible.
    """

    path: str
    delay: float = 0.0
