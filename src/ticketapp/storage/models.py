"""SQLAlchemy models for the SQLite storage backend."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from enum import StrEnum
from typing import Any

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Collection(StrEnum):
    """Logical collections and the storage keys they live under."""

    SESSION = "ticketapp_session"
    USERS = "ticketapp_users"
    TICKETS = "ticketapp_tickets"


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class StorageItem(Base):
    """One key of a browser-scoped key-value store."""

    __tablename__ = "local_storage"

    scope: Mapped[str] = mapped_column(String(64), primary_key=True)
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(self, scope: str, key: str, value: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.scope = scope
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"<StorageItem(scope={self.scope!r}, key={self.key!r})>"
