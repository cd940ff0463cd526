"""Venue heartbeat endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import VenueStatusResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import parse_venue_response, segment


def build_path(params: dict[str, Any]) -> str:
    return f"/venues/{segment(params['venue'])}/heartbeat"


SPEC = RestEndpointSpec(
    id="venue_heartbeat",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for a single venue's heartbeat."""

    def parse(self, response: Any, params: dict[str, Any]) -> VenueStatusResponse:
        return parse_venue_response(VenueStatusResponse, response, params)
