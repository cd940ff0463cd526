"""Single order status endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import OrderResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import ensure_echo, parse_venue_response, segment


def build_path(params: dict[str, Any]) -> str:
    venue = segment(params["venue"])
    stock = segment(params["stock"])
    return f"/venues/{venue}/stocks/{stock}/orders/{int(params['id'])}"


SPEC = RestEndpointSpec(
    id="order_status",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for any endpoint answering with a single order.

    Shared by order status, placement and cancellation.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> OrderResponse:
        order = parse_venue_response(OrderResponse, response, params)
        ensure_echo("symbol", params["stock"], order.symbol, required=False)
        return order
