"""API heartbeat endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stockfighter.core.enums import HTTPMethod
from stockfighter.models import StatusResponse
from stockfighter.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import decode, ensure_ok


def build_path(params: dict[str, Any]) -> str:
    return "/heartbeat"


SPEC = RestEndpointSpec(
    id="heartbeat",
    method=HTTPMethod.GET,
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for the service-wide heartbeat."""

    def parse(self, response: Any, params: dict[str, Any]) -> StatusResponse:
        return ensure_ok(decode(StatusResponse, response))
