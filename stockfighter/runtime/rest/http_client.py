"""Async HTTP client wrapper: one request, one decoded JSON body."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from ...core.enums import HTTPMethod
from ...core.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)

# Longest slice of an error body kept in the exception message
_MAX_ERROR_BODY = 200


async def _error_detail(response: aiohttp.ClientResponse) -> str:
    """Best-effort excerpt of an error response body, prefixed for the message."""
    try:
        body = (await response.text()).strip()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return ""
    if not body:
        return ""
    return f": {body[:_MAX_ERROR_BODY]}"


class HTTPClient:
    """Async HTTP client wrapper.

    Every request is issued on a lazily created ``aiohttp.ClientSession`` and
    its response is released before ``request`` returns, whatever the
    outcome.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def build_url(self, url: str) -> str:
        """Join a relative path onto ``base_url``; absolute URLs pass through."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: HTTPMethod | str,
        url: str,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one HTTP call and return the decoded JSON body.

        Args:
            method: GET and DELETE are sent bodyless; POST carries ``json_body``
            url: Absolute URL or a path relative to ``base_url``
            json_body: Request body, required for POST

        Returns:
            The parsed JSON document

        Raises:
            ValueError: POST without a body, or an unsupported method
            TransportError: Connection failure or non-2xx status
            DecodeError: Body is not valid JSON
        """
        method = HTTPMethod(method.upper() if isinstance(method, str) else method)
        if method is HTTPMethod.POST and json_body is None:
            raise ValueError("POST requests require a body")

        kwargs: dict[str, Any] = {}
        if method is HTTPMethod.POST:
            kwargs["json"] = json_body

        full_url = self.build_url(url)
        logger.debug("Sending request", extra={"method": method.value, "url": full_url})

        try:
            async with self.session.request(method.value, full_url, **kwargs) as response:
                if response.status >= 400:
                    detail = await _error_detail(response)
                    raise TransportError(
                        f"{method.value} {full_url} failed with HTTP {response.status}{detail}",
                        status_code=response.status,
                    )
                try:
                    data = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, json.JSONDecodeError, UnicodeDecodeError) as e:
                    raise DecodeError(f"Invalid JSON from {method.value} {full_url}: {e}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method.value} {full_url} failed: {e}") from e
        except TimeoutError as e:
            raise TransportError(f"{method.value} {full_url} timed out") from e

        logger.debug(
            "Request completed", extra={"method": method.value, "url": full_url, "status": response.status}
        )
        return data

    async def get(self, url: str) -> Any:
        """GET request."""
        return await self.request(HTTPMethod.GET, url)

    async def post(self, url: str, json_body: dict[str, Any]) -> Any:
        """POST request with a JSON body."""
        return await self.request(HTTPMethod.POST, url, json_body=json_body)

    async def delete(self, url: str) -> Any:
        """DELETE request."""
        return await self.request(HTTPMethod.DELETE, url)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
