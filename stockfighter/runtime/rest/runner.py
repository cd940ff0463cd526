"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.enums import HTTPMethod
from .http_client import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HTTPMethod
    build_path: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        body = spec.build_body(params) if spec.build_body else None

        data = await self._http.request(spec.method, path, json_body=body)
        return adapter.parse(data, params)
