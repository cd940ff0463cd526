"""Core enumerations shared by models, endpoints and the client.

String enums serialize straight to the wire values the exchange expects.
"""

from enum import Enum


class Direction(str, Enum):
    """Side of an order."""

    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Order types accepted by the exchange.

    Values match the ``orderType`` field on the wire.
    """

    LIMIT = "limit"
    MARKET = "market"
    FILL_OR_KILL = "fill-or-kill"
    IMMEDIATE_OR_CANCEL = "immediate-or-cancel"

    @classmethod
    def from_str(cls, value: str) -> "OrderType | None":
        """Resolve an order type from its wire value or a common short name.

        Returns None for unknown values.
        """
        aliases = {"fok": cls.FILL_OR_KILL, "ioc": cls.IMMEDIATE_OR_CANCEL}
        normalized = value.strip().lower()
        if normalized in aliases:
            return aliases[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        return None


class HTTPMethod(str, Enum):
    """HTTP verbs used by the request pipeline."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
