"""Order request/response models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core.enums import Direction, OrderType
from .base import ExchangeModel, Timestamp
from .status import VenueStatusResponse


class OrderRequest(ExchangeModel):
    """Caller's intent to trade.

    ``venue`` and ``stock`` may be left empty; the client fills them from the
    call's path parameters before sending.
    """

    account: str = Field(..., min_length=1)
    venue: str = ""
    stock: str = ""
    order_type: OrderType = OrderType.LIMIT
    direction: Direction
    qty: int = Field(..., gt=0)
    price: int = Field(default=0, ge=0)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body the exchange expects."""
        return self.model_dump(by_alias=True, mode="json")


class Fill(ExchangeModel):
    """Partial or complete execution of an order."""

    price: int = 0
    qty: int = 0
    ts: Timestamp | None = None


class OrderResponse(VenueStatusResponse):
    """Exchange's view of an order.

    ``symbol`` stays None when the exchange does not echo it.
    """

    symbol: str | None = None
    direction: Direction | None = None
    original_qty: int = 0
    qty: int = 0
    price: int = 0
    order_type: OrderType | None = None
    id: int = 0
    account: str = ""
    ts: Timestamp | None = None
    fills: list[Fill] = Field(default_factory=list)
    total_filled: int = 0
    open: bool = False


class OrdersStatusResponse(VenueStatusResponse):
    orders: list[OrderResponse] = Field(default_factory=list)
