"""TicketApp - ticket tracking demo with a client-side application core."""

__version__ = "0.1.0"
