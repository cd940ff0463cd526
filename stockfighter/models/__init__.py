"""Data models for exchange payloads.

Architecture:
    All models are Pydantic v2 and immutable (frozen=True); a decoded
    response cannot be altered after the request that produced it.

Design Decisions:
    - camelCase aliases: wire names are accepted and emitted on demand
    - Zero-value defaults: a missing field decodes to its empty value
    - Integer prices: the exchange quotes prices in cents

Model Categories:
    - Envelopes: StatusResponse, VenueStatusResponse
    - Market data: SymbolInfo, OrderbookEntry, OrderbookResponse, QuoteResponse
    - Orders: OrderRequest, OrderResponse, Fill, OrdersStatusResponse
"""

from .base import ExchangeModel
from .order import Fill, OrderRequest, OrderResponse, OrdersStatusResponse
from .order_book import OrderbookEntry, OrderbookResponse
from .quote import QuoteResponse
from .status import StatusResponse, VenueStatusResponse
from .symbol import SymbolInfo, VenueStocksResponse

__all__ = [
    "ExchangeModel",
    "Fill",
    "OrderRequest",
    "OrderResponse",
    "OrderbookEntry",
    "OrderbookResponse",
    "OrdersStatusResponse",
    "QuoteResponse",
    "StatusResponse",
    "SymbolInfo",
    "VenueStatusResponse",
    "VenueStocksResponse",
]
