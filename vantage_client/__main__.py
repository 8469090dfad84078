"""Command line access to a few Alpha Vantage functions.

    python -m vantage_client quote IBM
    python -m vantage_client daily IBM --latest 5
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Any, Sequence

from vantage_client.api import ApiClient, get_api_client
from vantage_client.config import get_settings
from vantage_client.core.logging import setup_logging
from vantage_client.core.telemetry import setup_telemetry
from vantage_client.endpoints import OutputSize, StockFunction
from vantage_client.errors import AlphaVantageError

logger = logging.getLogger(__name__)


async def _run(api: ApiClient, args: argparse.Namespace) -> Any:
    if args.command == "quote":
        return dataclasses.asdict(await api.quote(args.symbol).json())
    if args.command == "search":
        result = await api.search(args.keywords).json()
        return [dataclasses.asdict(match) for match in result.matches]
    if args.command == "exchange":
        return dataclasses.asdict(await api.exchange(args.from_currency, args.to_currency).json())
    if args.command == "daily":
        builder = api.stock_time(StockFunction.DAILY, args.symbol)
        if args.full:
            builder.output_size(OutputSize.FULL)
        series = await builder.json()
        return {
            "symbol": series.symbol,
            "last_refreshed": series.last_refreshed,
            "entries": [dataclasses.asdict(entry) for entry in series.entries.latest_n(args.latest)],
        }
    raise ValueError(f"Unknown command {args.command}")


def _count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative count, got {value}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vantage_client", description="Query the Alpha Vantage API")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="GLOBAL_QUOTE for a symbol")
    quote.add_argument("symbol")

    search = sub.add_parser("search", help="SYMBOL_SEARCH by keywords")
    search.add_argument("keywords")

    exchange = sub.add_parser("exchange", help="CURRENCY_EXCHANGE_RATE between two currencies")
    exchange.add_argument("from_currency")
    exchange.add_argument("to_currency")

    daily = sub.add_parser("daily", help="TIME_SERIES_DAILY for a symbol")
    daily.add_argument("symbol")
    daily.add_argument("--latest", type=_count, default=1, help="Number of most recent bars to print")
    daily.add_argument("--full", action="store_true", help="Request the full history")
    return parser


async def _main(args: argparse.Namespace) -> Any:
    async with get_api_client() as api:
        return await _run(api, args)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)
    setup_telemetry(settings)

    try:
        result = asyncio.run(_main(args))
    except AlphaVantageError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
