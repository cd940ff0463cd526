"""Stockfighter - async client for the simulated stock exchange API."""

from .client import StockfighterClient
from .config import StockfighterConfig
from .core import (
    DecodeError,
    Direction,
    EchoMismatchError,
    HTTPMethod,
    OrderType,
    ResponseRejectedError,
    StockfighterError,
    TransportError,
)
from .models import (
    Fill,
    OrderbookEntry,
    OrderbookResponse,
    OrderRequest,
    OrderResponse,
    OrdersStatusResponse,
    QuoteResponse,
    StatusResponse,
    SymbolInfo,
    VenueStatusResponse,
    VenueStocksResponse,
)
from .runtime.rest import HTTPClient

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "Direction",
    "EchoMismatchError",
    "Fill",
    "HTTPClient",
    "HTTPMethod",
    "OrderRequest",
    "OrderResponse",
    "OrderType",
    "OrderbookEntry",
    "OrderbookResponse",
    "OrdersStatusResponse",
    "QuoteResponse",
    "ResponseRejectedError",
    "StatusResponse",
    "StockfighterClient",
    "StockfighterConfig",
    "StockfighterError",
    "SymbolInfo",
    "TransportError",
    "VenueStatusResponse",
    "VenueStocksResponse",
    "__version__",
]
