"""Precise unit tests for HTTPClient.

Tests focus on session management, verb dispatch, error mapping and
response release.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from stockfighter.core import DecodeError, HTTPMethod, TransportError
from stockfighter.runtime.rest import HTTPClient


def make_response(
    status: int = 200, payload=None, json_error: Exception | None = None, text: str = ""
):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=text)
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


def attach_session(client: HTTPClient, **request_kwargs) -> MagicMock:
    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.request = MagicMock(**request_kwargs)
    client._session = mock_session
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client.headers == {}

    def test_build_url_relative(self):
        client = HTTPClient(base_url="https://api.example.com/ob/api")
        assert client.build_url("/heartbeat") == "https://api.example.com/ob/api/heartbeat"

    def test_build_url_absolute_passthrough(self):
        client = HTTPClient(base_url="https://api.example.com")
        assert client.build_url("http://other/heartbeat") == "http://other/heartbeat"

    @pytest.mark.asyncio
    async def test_session_carries_headers(self):
        client = HTTPClient(headers={"X-Starfighter-Authorization": "key"})
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert session.headers["X-Starfighter-Authorization"] == "key"
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientDispatch:
    """Test verb dispatch and body handling."""

    @pytest.mark.asyncio
    async def test_get_is_bodyless(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(payload={"ok": True})
        session = attach_session(client, return_value=response)

        result = await client.get("/heartbeat")

        assert result == {"ok": True}
        session.request.assert_called_once_with("GET", "https://api.example.com/heartbeat")

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(payload={"ok": True, "id": 1})
        session = attach_session(client, return_value=response)

        await client.post("/orders", {"qty": 10})

        session.request.assert_called_once_with(
            "POST", "https://api.example.com/orders", json={"qty": 10}
        )

    @pytest.mark.asyncio
    async def test_delete_is_bodyless(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(payload={"ok": True})
        session = attach_session(client, return_value=response)

        await client.delete("/orders/1")

        session.request.assert_called_once_with("DELETE", "https://api.example.com/orders/1")

    @pytest.mark.asyncio
    async def test_method_given_as_string(self):
        client = HTTPClient()
        response = make_response(payload={"ok": True})
        session = attach_session(client, return_value=response)

        await client.request("get", "https://api.example.com/heartbeat")

        assert session.request.call_args.args[0] == "GET"

    @pytest.mark.asyncio
    async def test_post_without_body_rejected(self):
        client = HTTPClient()
        session = attach_session(client)

        with pytest.raises(ValueError):
            await client.request(HTTPMethod.POST, "https://api.example.com/orders")
        session.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_method_rejected(self):
        client = HTTPClient()
        attach_session(client)

        with pytest.raises(ValueError):
            await client.request("PATCH", "https://api.example.com/orders")


class TestHTTPClientErrors:
    """Test mapping of failures onto library errors."""

    @pytest.mark.asyncio
    async def test_connection_error_becomes_transport_error(self):
        client = HTTPClient()
        attach_session(client, side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/heartbeat")
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        client = HTTPClient()
        attach_session(client, side_effect=TimeoutError())

        with pytest.raises(TransportError):
            await client.get("https://api.example.com/heartbeat")

    @pytest.mark.asyncio
    async def test_http_error_status_becomes_transport_error(self):
        client = HTTPClient()
        response = make_response(status=500, payload={"ok": False})
        attach_session(client, return_value=response)

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/heartbeat")
        assert exc_info.value.status_code == 500
        response.__aexit__.assert_awaited_once()
        response.json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_json_becomes_decode_error(self):
        client = HTTPClient()
        response = make_response(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))
        attach_session(client, return_value=response)

        with pytest.raises(DecodeError):
            await client.get("https://api.example.com/heartbeat")
        response.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_response_released_on_success(self):
        client = HTTPClient()
        response = make_response(payload={"ok": True})
        attach_session(client, return_value=response)

        await client.get("https://api.example.com/heartbeat")

        response.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_error_status_message_includes_exchange_reason(self):
        """The exchange explains 4xx failures in the body; keep it in the error."""
        client = HTTPClient()
        response = make_response(
            status=404, text='{"ok": false, "error": "No venue exists with the symbol NOPE"}'
        )
        attach_session(client, return_value=response)

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/venues/NOPE/heartbeat")
        assert exc_info.value.status_code == 404
        assert "HTTP 404" in str(exc_info.value)
        assert "No venue exists with the symbol NOPE" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_error_status_with_unreadable_body(self):
        """A body that cannot be read still yields a TransportError."""
        client = HTTPClient()
        response = make_response(status=502)
        response.text = AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))
        attach_session(client, return_value=response)

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/heartbeat")
        assert exc_info.value.status_code == 502
        assert str(exc_info.value).endswith("failed with HTTP 502")
        response.__aexit__.assert_awaited_once()
