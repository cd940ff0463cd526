"""Venue stock listing endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import SymbolInfo, VenueStocksResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import decode, ensure_ok, segment


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/stocks"


SPEC = RestEndpointSpec(
    id="stocks",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the stock listing into SymbolInfo list.

    The listing does not echo the venue, so only ``ok`` is checked.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> list[SymbolInfo]:
        return list(ensure_ok(decode(VenueStocksResponse, response)).symbols)
