"""Custom exception hierarchy."""

from __future__ import annotations


class StockfighterError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(StockfighterError):
    """HTTP call failed: connection error or non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(StockfighterError):
    """Response body is not JSON or does not fit the expected shape."""

    pass


class ResponseRejectedError(StockfighterError):
    """Decoded response is not acceptable.

    Raised when the exchange reports ``ok: false``. The ``error`` message sent
    by the exchange, if any, becomes the exception message.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.actual = actual


class EchoMismatchError(ResponseRejectedError):
    """An identifying field echoed by the exchange differs from the request."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Response {field} {actual!r} does not match requested {expected!r}",
            field=field,
            expected=expected,
            actual=actual,
        )
