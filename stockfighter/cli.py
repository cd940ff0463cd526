"""Command-line health check for the Stockfighter API."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from .client import StockfighterClient
from .config import ENV_API_KEY, StockfighterConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="stockfighter", description="Check Stockfighter API, venue and stock status"
    )
    p.add_argument("-key", "--key", default=None, help=f"API key (default: ${ENV_API_KEY})")
    p.add_argument("--base-url", default=None, help="API base URL")
    p.add_argument("--venue", default=None, help="Venue to ping and list stocks for")
    p.add_argument("--stock", default=None, help="Stock to quote (requires --venue)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)
    if args.stock and not args.venue:
        p.error("--stock requires --venue")
    return args


def build_config(args: argparse.Namespace) -> StockfighterConfig:
    env_config = StockfighterConfig.from_env()
    return StockfighterConfig(
        api_key=args.key if args.key is not None else env_config.api_key,
        base_url=args.base_url or env_config.base_url,
        timeout=env_config.timeout,
        auth_header=env_config.auth_header,
    )


async def run(client: StockfighterClient, venue: str | None, stock: str | None) -> bool:
    """Run every requested check, printing results; True when all pass."""
    ok = await client.ping()
    print(f"API heartbeat: {'up' if ok else 'DOWN'}")
    if not venue:
        return ok

    venue_ok = await client.ping_venue(venue)
    print(f"{venue} heartbeat: {'up' if venue_ok else 'DOWN'}")
    ok = ok and venue_ok

    symbols = await client.fetch_stocks(venue)
    if symbols is None:
        print(f"{venue} stocks: unavailable")
        ok = False
    else:
        print(f"{venue} stocks:")
        for info in symbols:
            print(f"  {info.symbol:<8} {info.name}")

    if not stock:
        return ok

    quote = await client.fetch_quote(venue, stock)
    if quote is None:
        print(f"{stock} quote: unavailable")
        ok = False
    else:
        print(
            f"{stock} quote: bid {quote.bid} x {quote.bid_size}  "
            f"ask {quote.ask} x {quote.ask_size}  last {quote.last}"
        )

    book = await client.fetch_orderbook(venue, stock)
    if book is None:
        print(f"{stock} order book: unavailable")
        ok = False
    else:
        print(f"{stock} order book: {len(book.bids)} bids, {len(book.asks)} asks")
        for entry in book.bids[:5]:
            print(f"  bid {entry.price:>10} x {entry.qty:>8}")
        for entry in book.asks[:5]:
            print(f"  ask {entry.price:>10} x {entry.qty:>8}")
    return ok


async def main_async(args: argparse.Namespace) -> int:
    async with StockfighterClient(build_config(args)) as client:
        ok = await run(client, args.venue, args.stock)
    return 0 if ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(main_async(args))


if __name__ == "__main__":
    sys.exit(main())
