"""SeedClient - one-shot fetch of the sample ticket list."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ticketapp.config import DEFAULT_SEED_TIMEOUT, DEFAULT_SEED_URL

logger = logging.getLogger(__name__)


class SeedClient:
    """Fetches seed tickets from the front controller's JSON endpoint.

    The fetch is never retried and never raises: any transport error, non-200
    status, undecodable body or non-array payload yields an empty list.
    """

    def __init__(self, url: str = DEFAULT_SEED_URL, timeout: float = DEFAULT_SEED_TIMEOUT) -> None:
        """Initialize Seed Client.

        Args:
            url: Seed endpoint, e.g. http://host/data/tickets.json
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch(self) -> list[dict[str, Any]]:
        """Fetch the seed ticket records.

        Returns:
            Ticket-shaped dicts, or an empty list on any failure.
        """
        try:
            response = self.client.get(self.url)
        except httpx.HTTPError as e:
            logger.warning("Seed fetch from %s failed: %s", self.url, e)
            return []

        if response.status_code != 200:
            logger.warning("Seed fetch from %s returned %s", self.url, response.status_code)
            return []

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Seed data from %s is not JSON: %s", self.url, e)
            return []

        if not isinstance(data, list):
            logger.warning("Seed data from %s is not an array", self.url)
            return []

        return [record for record in data if isinstance(record, dict)]
