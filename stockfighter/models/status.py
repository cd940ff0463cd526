"""Status envelopes carried by every exchange response."""

from .base import ExchangeModel


class StatusResponse(ExchangeModel):
    """Generic service health, also the envelope of every other response."""

    ok: bool = False
    error: str = ""


class VenueStatusResponse(StatusResponse):
    """Venue-scoped response; ``venue`` is echoed back by the exchange."""

    venue: str = ""
