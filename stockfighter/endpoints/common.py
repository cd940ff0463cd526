"""Helpers shared by every endpoint adapter.

Adapters decode the JSON body into a model, then reject it unless the
exchange reported success and echoed back the identifiers that were asked
for.
"""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from stockfighter.core.exceptions import DecodeError, EchoMismatchError, ResponseRejectedError
from stockfighter.models import StatusResponse

M = TypeVar("M", bound=StatusResponse)


def segment(value: Any) -> str:
    """Quote one path parameter for safe substitution into a URL path."""
    return quote(str(value), safe="")


def decode(model: type[M], response: Any) -> M:
    """Validate a JSON document into ``model``.

    Raises:
        DecodeError: Document is not an object or does not fit the model
    """
    if not isinstance(response, dict):
        raise DecodeError(
            f"Expected JSON object for {model.__name__}, got {type(response).__name__}"
        )
    try:
        return model.model_validate(response)
    except ValidationError as e:
        raise DecodeError(f"Malformed {model.__name__}: {e}") from e


def ensure_ok(result: M) -> M:
    """Reject a response whose ``ok`` flag is false."""
    if not result.ok:
        raise ResponseRejectedError(result.error or "Exchange reported failure", field="ok")
    return result


def ensure_echo(field: str, expected: str, actual: str | None, *, required: bool = True) -> None:
    """Reject a response whose echoed identifier differs from the request.

    When ``required`` is False an absent (None) value is accepted.
    """
    if actual is None and not required:
        return
    if actual != expected:
        raise EchoMismatchError(field, expected, "" if actual is None else actual)


def parse_venue_response(model: type[M], response: Any, params: dict[str, Any]) -> M:
    """Decode, check ``ok`` and check the echoed venue."""
    result = ensure_ok(decode(model, response))
    ensure_echo("venue", params["venue"], result.venue)
    return result
