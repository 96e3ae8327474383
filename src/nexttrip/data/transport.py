"""Transport seam between the resolver and the network."""

from typing import Protocol

import httpx


class Transport(Protocol):
    """Anything that can send a prepared HTTP request.

    httpx.AsyncClient satisfies this directly; tests supply scripted responders.
    """

    async def send(self, request: httpx.Request) -> httpx.Response: ...


class NextTripClient:
    """Async HTTP transport for the NexTrip API.

    Usage:
        async with NextTripClient() as transport:
            provider = MetroTransitProvider(transport)
    """

    def __init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "NextTripClient":
        """Enter async context - create HTTP client."""
        self._client = httpx.AsyncClient(headers={"Accept": "application/json"})
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return the response with its body read.

        Raises:
            RuntimeError: If client not initialized.
            httpx.HTTPError: If the HTTP request fails.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        return await self._client.send(request)
