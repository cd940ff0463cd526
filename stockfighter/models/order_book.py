"""Order book snapshot model."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import ExchangeModel, Timestamp
from .status import VenueStatusResponse


class OrderbookEntry(ExchangeModel):
    """A resting order at one price level."""

    price: int = Field(default=0, ge=0)
    qty: int = Field(default=0, ge=0)
    is_buy: bool = False


class OrderbookResponse(VenueStatusResponse):
    """Full book snapshot for one symbol.

    Bids and asks are kept in the order the exchange sent them; the client
    does not sort or otherwise interpret them.
    """

    symbol: str = ""
    bids: list[OrderbookEntry] = Field(default_factory=list)
    asks: list[OrderbookEntry] = Field(default_factory=list)
    ts: Timestamp | None = None

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def _null_side(cls, value: Any) -> Any:
        # An empty side is sent as null
        return [] if value is None else value
