"""Endpoint registry.

Each endpoint module exposes a ``SPEC`` describing the request and an
``Adapter`` turning the JSON body into a validated model.
"""

from __future__ import annotations

from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import (
    account_orders,
    cancel_order,
    heartbeat,
    order_book,
    order_status,
    place_order,
    quote,
    stocks,
    venue_heartbeat,
)

_ENDPOINTS: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "heartbeat": (heartbeat.SPEC, heartbeat.Adapter),
    "venue_heartbeat": (venue_heartbeat.SPEC, venue_heartbeat.Adapter),
    "stocks": (stocks.SPEC, stocks.Adapter),
    "order_book": (order_book.SPEC, order_book.Adapter),
    "quote": (quote.SPEC, quote.Adapter),
    "order_status": (order_status.SPEC, order_status.Adapter),
    "place_order": (place_order.SPEC, place_order.Adapter),
    "cancel_order": (cancel_order.SPEC, cancel_order.Adapter),
    "account_orders": (account_orders.SPEC, account_orders.Adapter),
    "account_stock_orders": (account_orders.STOCK_SPEC, account_orders.Adapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint spec by ID."""
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get adapter class by endpoint ID."""
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """IDs of every registered endpoint."""
    return list(_ENDPOINTS)


__all__ = ["get_endpoint_adapter", "get_endpoint_spec", "list_endpoints"]
