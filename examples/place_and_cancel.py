#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from stockfighter import Direction, OrderRequest, OrderType, StockfighterClient, StockfighterConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Place an order, show it, then cancel it if still open")
    p.add_argument("account")
    p.add_argument("venue", nargs="?", default="TESTEX")
    p.add_argument("stock", nargs="?", default="FOOBAR")
    p.add_argument("--qty", type=int, default=10)
    p.add_argument("--price", type=int, default=100)
    p.add_argument("--side", default="buy", choices=["buy", "sell"])
    p.add_argument(
        "--type",
        default="limit",
        help="limit, market, fill-or-kill (fok) or immediate-or-cancel (ioc)",
    )
    args = p.parse_args()
    if OrderType.from_str(args.type) is None:
        p.error(f"unknown order type: {args.type}")
    return args


async def main() -> None:
    args = parse_args()
    order = OrderRequest(
        account=args.account,
        direction=Direction(args.side),
        order_type=OrderType.from_str(args.type),
        qty=args.qty,
        price=args.price,
    )
    async with StockfighterClient(StockfighterConfig.from_env()) as client:
        placed = await client.place_order(args.venue, args.stock, order)
        if placed is None:
            print("Order rejected")
            return
        print(f"Order {placed.id}: {placed.total_filled}/{placed.original_qty} filled")
        for fill in placed.fills:
            print(f"  {fill.qty} @ {fill.price} ({fill.ts})")

        if placed.open:
            cancelled = await client.cancel_order(args.venue, args.stock, placed.id)
            print("Cancelled" if cancelled else "Cancel failed")

        history = await client.fetch_account_stock_orders(args.venue, args.stock, args.account)
        print(f"{len(history or [])} orders on {args.stock} for {args.account}")


if __name__ == "__main__":
    asyncio.run(main())
