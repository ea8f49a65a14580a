"""Shared pytest fixtures and configuration."""

import pytest

from ticketapp.context import AppContext
from ticketapp.notifications import Notifier
from ticketapp.storage import MemoryBackend, StorageAdapter
from ticketapp.tickets import TicketStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class FakeClock:
    """Manually advanced clock for toast expiry."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def context(clock: FakeClock) -> AppContext:
    """An isolated in-memory browser context."""
    return AppContext(storage=StorageAdapter(MemoryBackend()), notifier=Notifier(clock=clock))


@pytest.fixture
def store(context: AppContext) -> TicketStore:
    return TicketStore(context)


@pytest.fixture
def logged_in(context: AppContext) -> AppContext:
    """Context with an active demo session."""
    context.sessions.start_session("demo")
    return context
