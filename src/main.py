"""Entry point for the holder-intel CLI.

Usage:
    holder-intel analyze <MINT> [--name NAME]
    holder-intel snapshot <NAME> [<NAME> ...] [--chain CHAIN]
    holder-intel price <ADDRESS> [<ADDRESS> ...]
"""

import argparse
import asyncio
import json
import sys

from loguru import logger

from config.settings import settings
from src.parsers.dexscreener.client import DexScreenerClient
from src.parsers.exceptions import HolderIntelError
from src.parsers.holder_intel import analyze_holders, open_sources
from src.parsers.market_snapshot import get_token_prices, market_snapshot
from src.parsers.rate_limiter import DelayPolicy
from src.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holder-intel", description="Solana token holder intelligence"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Classify the top holders of a token")
    analyze.add_argument("mint", help="Token mint address")
    analyze.add_argument("--name", default=None, help="Display name for the report")

    snapshot = sub.add_parser("snapshot", help="Market snapshot for tokens by name/symbol")
    snapshot.add_argument("names", nargs="+")
    snapshot.add_argument("--chain", default=None, help="Only pairs on this chain (e.g. solana, base)")

    price = sub.add_parser("price", help="Price data for tokens by address")
    price.add_argument("addresses", nargs="+")

    return parser


async def run(args: argparse.Namespace) -> object:
    delays = DelayPolicy.from_settings(settings)

    if args.command == "analyze":
        async with open_sources(settings) as sources:
            report = await analyze_holders(
                args.mint, args.name, sources=sources, delays=delays, cfg=settings
            )
        return report.model_dump(mode="json", by_alias=True)

    async with DexScreenerClient(
        settings.dexscreener_base_url, timeout=settings.http_timeout_sec
    ) as client:
        if args.command == "snapshot":
            entries = await market_snapshot(
                args.names, args.chain, client=client, delay=delays.market_search
            )
            return {"tokens": [e.model_dump(mode="json", by_alias=True) for e in entries]}

        prices = await get_token_prices(args.addresses, client=client)
        return {"tokens": [p.model_dump(mode="json", by_alias=True) for p in prices]}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(json_logs=settings.json_logs, level=settings.log_level)

    try:
        result = asyncio.run(run(args))
    except HolderIntelError as e:
        logger.error(f"[HOLDER-INTEL] {args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
