"""Market lookups over DexScreener — snapshot by name, price by address.

No holder classification here: these wrap the market-pair source only.
"""

from decimal import Decimal

from loguru import logger

from src.models.market import MarketSnapshotEntry, TokenPrice
from src.parsers.dexscreener.client import DexScreenerClient
from src.parsers.dexscreener.models import DexScreenerPair, best_pair
from src.parsers.exceptions import TokenNotFoundError
from src.parsers.rate_limiter import FixedDelay


def _num(value: Decimal | None) -> float:
    return float(value) if value is not None else 0.0


def match_search_pair(
    pairs: list[DexScreenerPair], name: str, chain: str | None = None
) -> DexScreenerPair | None:
    """First pair on ``chain`` (if given) whose base symbol contains ``name``, case-insensitive."""
    needle = name.upper()
    for pair in pairs:
        if chain and pair.chainId != chain:
            continue
        symbol = (pair.baseToken.symbol if pair.baseToken else None) or ""
        if needle in symbol.upper():
            return pair
    return None


def snapshot_entry(pair: DexScreenerPair) -> MarketSnapshotEntry:
    base = pair.baseToken
    txns = pair.txns_h24
    buys = txns.buys or 0
    sells = txns.sells or 0
    return MarketSnapshotEntry(
        name=(base.symbol if base else None) or "",
        address=base.address if base else "",
        chain=pair.chainId,
        price=pair.priceUsd,
        mc=_num(pair.market_cap),
        vol24h=_num(pair.volume_h24),
        buys24h=buys,
        sells24h=sells,
        buys_sell_ratio=buys / (sells or 1),
        liquidity=_num(pair.liquidity_usd),
        price_change24h=_num(pair.priceChange.h24 if pair.priceChange else None),
    )


async def market_snapshot(
    names: list[str],
    chain: str | None = None,
    *,
    client: DexScreenerClient,
    delay: FixedDelay,
) -> list[MarketSnapshotEntry]:
    """Search each name in turn; names with no usable match are skipped."""
    entries: list[MarketSnapshotEntry] = []
    for name in names:
        pairs = await client.search_pairs(name)
        pair = match_search_pair(pairs or [], name, chain)
        if pair is None:
            logger.debug(f"[MARKET] No match for {name!r} (chain={chain})")
        else:
            entries.append(snapshot_entry(pair))
        await delay.wait()
    return entries


def token_price_from_pair(address: str, pair: DexScreenerPair) -> TokenPrice:
    base = pair.baseToken
    volume = pair.volume
    change = pair.priceChange
    txns = pair.txns_h24
    return TokenPrice(
        address=address,
        symbol=(base.symbol if base else None) or "",
        name=(base.name if base else None) or "",
        price_usd=pair.priceUsd,
        market_cap=_num(pair.market_cap),
        volume24h=_num(volume.h24 if volume else None),
        volume1h=_num(volume.h1 if volume else None),
        volume5m=_num(volume.m5 if volume else None),
        price_change24h=_num(change.h24 if change else None),
        price_change1h=_num(change.h1 if change else None),
        liquidity=_num(pair.liquidity_usd),
        buys24h=txns.buys or 0,
        sells24h=txns.sells or 0,
        chain=pair.chainId,
        dex=pair.dexId,
        pair_address=pair.pairAddress,
    )


async def get_token_price(address: str, *, client: DexScreenerClient) -> TokenPrice:
    """Price data from the highest-liquidity pair. Raises TokenNotFoundError."""
    pair = best_pair(await client.get_token_pairs(address) or [])
    if pair is None:
        raise TokenNotFoundError(f"No pairs found for {address}")
    return token_price_from_pair(address, pair)


async def get_token_prices(addresses: list[str], *, client: DexScreenerClient) -> list[TokenPrice]:
    """Prices for several tokens; addresses that fail are left out."""
    prices: list[TokenPrice] = []
    for address in addresses:
        try:
            prices.append(await get_token_price(address, client=client))
        except TokenNotFoundError as e:
            logger.debug(f"[MARKET] {e}")
    return prices
