"""Order placement endpoint definition."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import OrderRequest
from stockfighter.runtime.rest import RestEndpointSpec

from .common import segment
from .order_status import Adapter


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/stocks/{segment(params['stock'])}/orders"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Serialize the order, taking venue and stock from the path parameters."""
    order: OrderRequest = params["order"]
    order = order.model_copy(update={"venue": params["venue"], "stock": params["stock"]})
    return order.to_payload()


SPEC = RestEndpointSpec(
    id="place_order",
    method=HTTPMethod.POST,
    build_path=build_path,
    build_body=build_body,
)

__all__ = ["SPEC", "Adapter", "build_body", "build_path"]
