"""Custom exceptions for TicketApp."""


class TicketAppError(Exception):
    """Base exception for TicketApp errors."""


class ValidationError(TicketAppError):
    """User-correctable input problem tied to a single form field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidCredentials(TicketAppError):
    """Username/password pair did not match any account."""


class TicketNotFoundError(TicketAppError):
    """Ticket with given ID does not exist."""


class StorageParseError(TicketAppError):
    """Persisted value could not be decoded into its collection type."""


class StorageBackendError(TicketAppError):
    """Key-value backend failed to read or write an item."""
