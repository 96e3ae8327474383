"""Tests for the httpx-backed transport."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from nexttrip.data.transport import NextTripClient


async def test_send_delegates_to_httpx():
    """Test that send passes the prepared request to the httpx client."""
    request = httpx.Request("GET", "https://example.com/routes")
    mock_response = MagicMock()

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.send = AsyncMock(return_value=mock_response)
        mock_client_class.return_value = mock_client

        async with NextTripClient() as client:
            response = await client.send(request)

    assert response is mock_response
    mock_client.send.assert_awaited_once_with(request)


async def test_client_closed_on_exit():
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value = mock_client

        async with NextTripClient():
            pass

    mock_client.aclose.assert_awaited_once()


async def test_client_sets_accept_header():
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client_class.return_value = AsyncMock()

        async with NextTripClient():
            pass

        call_kwargs = mock_client_class.call_args.kwargs
        assert call_kwargs["headers"]["Accept"] == "application/json"


async def test_client_requires_async_context():
    """Test that send fails without async context."""
    client = NextTripClient()

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.send(httpx.Request("GET", "https://example.com/routes"))
