"""Account order listing endpoints (all stocks, or one stock)."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import OrderResponse, OrdersStatusResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import parse_venue_response, segment


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/accounts/{segment(params['account'])}/orders"


def build_stock_path(params: dict[str, Any]) -> str:
    venue = segment(params["venue"])
    account = segment(params["account"])
    return f"/venues/{venue}/accounts/{account}/stocks/{segment(params['stock'])}/orders"


SPEC = RestEndpointSpec(
    id="account_orders",
    method=HTTPMethod.GET,
    build_path=build_path,
)

STOCK_SPEC = RestEndpointSpec(
    id="account_stock_orders",
    method=HTTPMethod.GET,
    build_path=build_stock_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing an account's order history into OrderResponse list."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[OrderResponse]:
        return list(parse_venue_response(OrdersStatusResponse, response, params).orders)
