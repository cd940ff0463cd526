"""Stockfighter REST client.

Architecture:
    Each public method names an endpoint, builds its params and hands them to
    ``fetch``, which resolves the endpoint spec and adapter from the registry
    and runs them through ``RestRunner``. ``fetch`` raises library errors;
    the per-endpoint methods convert any ``StockfighterError`` into a failure
    value (False, None) after logging it, so callers never see a partially
    decoded model.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import StockfighterConfig
from .core.exceptions import StockfighterError
from .endpoints import get_endpoint_adapter, get_endpoint_spec, list_endpoints
from .models import OrderbookResponse, OrderRequest, OrderResponse, QuoteResponse, SymbolInfo
from .runtime.rest import HTTPClient, RestRunner

logger = logging.getLogger(__name__)


class StockfighterClient:
    """Async client for the Stockfighter exchange API.

    Calls are issued one at a time; each awaits its response before
    returning.
    """

    def __init__(
        self,
        config: StockfighterConfig | None = None,
        *,
        api_key: str | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client settings; defaults to ``StockfighterConfig()``
            api_key: Overrides ``config.api_key`` when given
            http: Pre-built HTTP client (mostly for tests)
        """
        config = config or StockfighterConfig()
        if api_key is not None:
            config = StockfighterConfig(
                api_key=api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                auth_header=config.auth_header,
            )
        self.config = config
        self._http = http or HTTPClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.auth_headers(),
        )
        self._runner = RestRunner(self._http)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Run one endpoint and return its validated result.

        Args:
            endpoint_id: Endpoint identifier (e.g., "quote", "place_order")
            params: Path parameters and, for placement, the ``order``

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
            TransportError: HTTP call failed
            DecodeError: Body did not decode into the endpoint's model
            ResponseRejectedError: ``ok`` was false or an echoed field mismatched
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(
                f"Unknown REST endpoint: {endpoint_id} (known: {', '.join(list_endpoints())})"
            )

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        logger.debug("Running endpoint", extra={"endpoint": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def _try_fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any | None:
        try:
            return await self.fetch(endpoint_id, params)
        except StockfighterError as e:
            logger.warning(
                "%s failed: %s",
                endpoint_id,
                e,
                extra={"endpoint": endpoint_id, "error_type": type(e).__name__},
            )
            return None

    async def ping(self) -> bool:
        """Check that the API is up."""
        return await self._try_fetch("heartbeat", {}) is not None

    async def ping_venue(self, venue: str) -> bool:
        """Check that a venue is up."""
        return await self._try_fetch("venue_heartbeat", {"venue": venue}) is not None

    async def fetch_stocks(self, venue: str) -> list[SymbolInfo] | None:
        """List the stocks traded on a venue."""
        return await self._try_fetch("stocks", {"venue": venue})

    async def fetch_orderbook(self, venue: str, stock: str) -> OrderbookResponse | None:
        """Fetch the order book for a stock."""
        return await self._try_fetch("order_book", {"venue": venue, "stock": stock})

    async def fetch_quote(self, venue: str, stock: str) -> QuoteResponse | None:
        """Fetch the current quote for a stock."""
        return await self._try_fetch("quote", {"venue": venue, "stock": stock})

    async def fetch_order(self, venue: str, stock: str, id: int) -> OrderResponse | None:
        """Fetch the status of one order."""
        return await self._try_fetch("order_status", {"venue": venue, "stock": stock, "id": id})

    async def place_order(
        self, venue: str, stock: str, order: OrderRequest
    ) -> OrderResponse | None:
        """Place an order.

        The order's venue and stock are taken from the arguments, overriding
        whatever the request carries.
        """
        return await self._try_fetch(
            "place_order", {"venue": venue, "stock": stock, "order": order}
        )

    async def cancel_order(self, venue: str, stock: str, id: int) -> bool:
        """Cancel an order.

        Returns:
            True only if the exchange reports the order closed afterwards
        """
        order = await self._try_fetch("cancel_order", {"venue": venue, "stock": stock, "id": id})
        if order is None:
            return False
        if order.open:
            logger.warning("Order still open after cancel", extra={"venue": venue, "id": id})
            return False
        return True

    async def fetch_account_orders(self, venue: str, account: str) -> list[OrderResponse] | None:
        """List every order an account placed on a venue."""
        return await self._try_fetch("account_orders", {"venue": venue, "account": account})

    async def fetch_account_stock_orders(
        self, venue: str, stock: str, account: str
    ) -> list[OrderResponse] | None:
        """List an account's orders for one stock."""
        return await self._try_fetch(
            "account_stock_orders", {"venue": venue, "stock": stock, "account": account}
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> StockfighterClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
