"""Order book endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import OrderbookResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import ensure_echo, parse_venue_response, segment


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/stocks/{segment(params['stock'])}"


SPEC = RestEndpointSpec(
    id="order_book",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the book snapshot into OrderbookResponse."""

    def parse(self, response: Any, params: dict[str, Any]) -> OrderbookResponse:
        """Parse the book snapshot.

        Both venue and symbol must be echoed and match the request.
        """
        book = parse_venue_response(OrderbookResponse, response, params)
        ensure_echo("symbol", params["stock"], book.symbol)
        return book
