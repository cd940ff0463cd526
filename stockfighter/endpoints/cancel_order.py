"""Order cancellation endpoint definition."""

from __future__ import annotations

from stockfighter.core.enums import HTTPMethod
from stockfighter.runtime.rest import RestEndpointSpec

from .order_status import Adapter, build_path

SPEC = RestEndpointSpec(
    id="cancel_order",
    method=HTTPMethod.DELETE,
    build_path=build_path,
)

__all__ = ["SPEC", "Adapter", "build_path"]
