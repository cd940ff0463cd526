"""Market quote model."""

from __future__ import annotations

from .base import ExchangeModel, Timestamp
from .status import VenueStatusResponse


class QuoteResponse(VenueStatusResponse):
    """Current quote for one symbol.

    Bid/ask prices are None when that side of the book is empty; sizes and
    depths are zero in that case.
    """

    symbol: str | None = None
    bid: int | None = None
    ask: int | None = None
    bid_size: int = 0
    ask_size: int = 0
    bid_depth: int = 0
    ask_depth: int = 0
    last: int | None = None
    last_size: int = 0
    last_trade: Timestamp | None = None
    quote_time: Timestamp | None = None

    @property
    def spread(self) -> int | None:
        """Ask minus bid, or None when either side is missing."""
        if self.bid is None or self.ask is None:
            return None
        return self.ask - self.bid
