"""Core enums and exceptions."""

from .enums import Direction, HTTPMethod, OrderType
from .exceptions import (
    DecodeError,
    EchoMismatchError,
    ResponseRejectedError,
    StockfighterError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "Direction",
    "EchoMismatchError",
    "HTTPMethod",
    "OrderType",
    "ResponseRejectedError",
    "StockfighterError",
    "TransportError",
]
