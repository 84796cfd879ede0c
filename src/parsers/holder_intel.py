"""Holder intelligence pipeline — market context, holder report, per-holder enrichment.

One invocation is strictly sequential: every outbound call waits for the
previous one and for its source's fixed delay. Nothing is shared between
invocations, so two tokens can be analysed concurrently with separate
``HolderIntelSources``.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from config.settings import Settings, settings
from src.models.holder import HolderProfile, HolderRecord, HolderReport, TokenContext
from src.parsers.dexscreener.client import DexScreenerClient
from src.parsers.dexscreener.models import DexScreenerPair, best_pair
from src.parsers.exceptions import InvalidMintError, NoHoldersError
from src.parsers.holder_classifier import classify_holder
from src.parsers.holder_report import build_report
from src.parsers.rate_limiter import DelayPolicy, FixedDelay
from src.parsers.rugcheck.client import RugcheckClient
from src.parsers.rugcheck.models import RugcheckHolder
from src.parsers.solana_rpc.client import SolanaRpcClient


@dataclass
class HolderIntelSources:
    """The three data sources one analysis talks to."""

    dexscreener: DexScreenerClient
    rugcheck: RugcheckClient
    rpc: SolanaRpcClient


@asynccontextmanager
async def open_sources(cfg: Settings | None = None) -> AsyncIterator[HolderIntelSources]:
    cfg = cfg or settings
    async with (
        DexScreenerClient(cfg.dexscreener_base_url, timeout=cfg.http_timeout_sec) as dex,
        RugcheckClient(cfg.rugcheck_base_url, timeout=cfg.http_timeout_sec) as rugcheck,
        SolanaRpcClient(cfg.solana_rpc_url, timeout=cfg.http_timeout_sec) as rpc,
    ):
        yield HolderIntelSources(dexscreener=dex, rugcheck=rugcheck, rpc=rpc)


def validate_mint(mint: str) -> str:
    """Return the stripped mint, or raise InvalidMintError if it is not a Solana pubkey."""
    candidate = (mint or "").strip()
    try:
        Pubkey.from_string(candidate)
    except ValueError as e:
        raise InvalidMintError(f"invalid mint address: {mint!r}") from e
    return candidate


def filter_holders(
    holders: list[RugcheckHolder], *, min_pct: float = 0.01, max_pct: float = 50.0
) -> list[HolderRecord]:
    """Drop dust (pct <= min_pct) and structural entries such as burn/mint authority (pct >= max_pct)."""
    return [
        HolderRecord(address=h.owner, holding_pct=h.pct)
        for h in holders
        if min_pct < h.pct < max_pct
    ]


def build_token_context(
    mint: str, display_name: str | None, pairs: list[DexScreenerPair] | None, risk_score: int
) -> TokenContext:
    """Name precedence: explicit display name, pair symbol, first 8 chars of the mint."""
    pair = best_pair(pairs or [])
    symbol = pair.baseToken.symbol if pair and pair.baseToken else None
    mc = pair.market_cap if pair else None
    vol = pair.volume_h24 if pair else None
    return TokenContext(
        name=display_name or symbol or mint[:8],
        mint=mint,
        price=pair.priceUsd if pair else None,
        mc=float(mc) if mc else None,
        vol24h=float(vol) if vol else None,
        risk_score=risk_score,
    )


async def enrich_holder(
    holder: HolderRecord,
    rpc: SolanaRpcClient,
    delay: FixedDelay,
    *,
    signature_limit: int = 20,
) -> HolderProfile:
    """Balance, signature history and token-account count, then classify.

    Each lookup that fails contributes None and the holder is still classified.
    """
    await delay.wait()
    sol_balance = await rpc.get_balance(holder.address)

    await delay.wait()
    samples = await rpc.get_signatures(holder.address, limit=signature_limit)

    await delay.wait()
    token_count = await rpc.get_token_account_count(holder.address)

    return classify_holder(
        holder.address,
        holder.holding_pct,
        samples,
        token_count,
        sol_balance,
    )


async def analyze_holders(
    mint: str,
    display_name: str | None = None,
    *,
    sources: HolderIntelSources,
    delays: DelayPolicy | None = None,
    cfg: Settings | None = None,
) -> HolderReport:
    """Full holder intelligence report for a Solana token.

    Raises InvalidMintError for an unparseable mint and NoHoldersError when
    the holder report is unavailable or no holder passes the pct filter.
    """
    cfg = cfg or settings
    delays = delays or DelayPolicy.from_settings(cfg)
    mint = validate_mint(mint)

    pairs = await sources.dexscreener.get_token_pairs(mint)
    if not pairs:
        logger.debug(f"[HOLDER-INTEL] No market pairs for {mint[:12]}, continuing without")

    await delays.holder_report.wait()
    report = await sources.rugcheck.get_holder_report(mint)
    if report is None:
        raise NoHoldersError(f"holder report unavailable for token {mint}")

    holders = filter_holders(
        report.top_holders, min_pct=cfg.min_holder_pct, max_pct=cfg.max_holder_pct
    )
    if not holders:
        raise NoHoldersError(f"no holders found for token {mint}")

    token = build_token_context(mint, display_name, pairs, report.score)
    selected = holders[: cfg.max_holders_analyzed]
    logger.info(
        f"[HOLDER-INTEL] {token.name}: enriching {len(selected)}/{len(holders)} holders"
    )

    profiles: list[HolderProfile] = []
    for i, holder in enumerate(selected, 1):
        profile = await enrich_holder(
            holder, sources.rpc, delays.rpc_call, signature_limit=cfg.signature_limit
        )
        logger.debug(
            f"[HOLDER-INTEL] {i}/{len(selected)} {holder.address[:8]}.. "
            f"{profile.type.value} ({profile.confidence}) {','.join(profile.signals)}"
        )
        profiles.append(profile)

    result = build_report(token, profiles, total_holders=len(holders))
    s = result.summary
    logger.info(
        f"[HOLDER-INTEL] {token.name}: {s.bots} bots, {s.humans} humans, "
        f"{s.dead} dead/LP, avg {s.average_sol_balance} SOL"
    )
    return result
