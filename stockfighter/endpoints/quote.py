"""Quote endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import QuoteResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import ensure_echo, parse_venue_response, segment


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/stocks/{segment(params['stock'])}/quote"


SPEC = RestEndpointSpec(
    id="quote",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a quote into QuoteResponse."""

    def parse(self, response: Any, params: dict[str, Any]) -> QuoteResponse:
        quote = parse_venue_response(QuoteResponse, response, params)
        ensure_echo("symbol", params["stock"], quote.symbol, required=False)
        return quote
