"""Tradable instrument descriptors."""

from pydantic import Field

from .base import ExchangeModel
from .status import StatusResponse


class SymbolInfo(ExchangeModel):
    """Instrument listed on a venue."""

    name: str = ""
    symbol: str = ""


class VenueStocksResponse(StatusResponse):
    symbols: list[SymbolInfo] = Field(default_factory=list)
