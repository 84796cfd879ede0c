"""Holder classification — bot / dead / LP pool / human from on-chain activity.

Pure function of the enrichment results: no I/O, deterministic for the
same inputs. Holders without any transaction sample take the no-data
branch. Everyone else starts as HUMAN and runs through CLASSIFICATION_RULES
in order, each rule contributing at most one signal. A rule that sets a
type also sets its confidence; later rules may override earlier ones.
"""

from collections.abc import Callable
from dataclasses import dataclass

from src.models.holder import HolderProfile, HolderType
from src.parsers.holder_activity import ActivityGaps, analyze_gaps
from src.parsers.solana_rpc.models import TxSample
from src.parsers.timezone_inference import infer_timezone

# No-data branch
LP_POOL_MIN_PCT = 10.0
LP_POOL_CONFIDENCE = 0.9
DEAD_CONFIDENCE = 0.8

# Default branch
HUMAN_CONFIDENCE = 0.6
BOT_CONFIDENCE = 0.9
BOT_MIN_BURSTS = 5  # strictly more than this many sub-5s gaps
BOT_MIN_GAP_SEC = 2.0
BOT_MIN_SAMPLES = 10  # strictly more than this many samples for the min-gap test

SIGNAL_HIGH_PCT = "high_pct"
SIGNAL_NO_TXNS = "no_txns"
SIGNAL_BURST_TRADING = "burst_trading"
SIGNAL_MEGA_DEGEN = "MEGA_DEGEN"
SIGNAL_DEGEN = "DEGEN"
SIGNAL_FOCUSED = "FOCUSED"
SIGNAL_WHALE = "WHALE"
SIGNAL_MID_CAP = "MID_CAP"
SIGNAL_RETAIL = "RETAIL"
SIGNAL_DUST = "DUST"


@dataclass(frozen=True)
class HolderEvidence:
    """Everything a rule may look at for one holder."""

    holding_pct: float
    gaps: ActivityGaps
    token_count: int | None
    sol_balance: float | None


@dataclass(frozen=True)
class RuleHit:
    signal: str
    holder_type: HolderType | None = None
    confidence: float | None = None


Rule = Callable[[HolderEvidence], RuleHit | None]


def burst_trading_rule(ev: HolderEvidence) -> RuleHit | None:
    gaps = ev.gaps
    if gaps.burst_count > BOT_MIN_BURSTS or (
        gaps.min_gap_sec < BOT_MIN_GAP_SEC and gaps.sample_count > BOT_MIN_SAMPLES
    ):
        return RuleHit(SIGNAL_BURST_TRADING, HolderType.BOT, BOT_CONFIDENCE)
    return None


def token_diversity_rule(ev: HolderEvidence) -> RuleHit | None:
    count = ev.token_count
    if count is None:
        return None
    if count > 20:
        return RuleHit(SIGNAL_MEGA_DEGEN)
    if count > 10:
        return RuleHit(SIGNAL_DEGEN)
    if count <= 3:
        return RuleHit(SIGNAL_FOCUSED)
    return None  # 4-10 tokens: unremarkable


def wealth_tier_rule(ev: HolderEvidence) -> RuleHit | None:
    balance = ev.sol_balance
    if balance is None:
        return None
    if balance > 100:
        return RuleHit(SIGNAL_WHALE)
    if balance > 10:
        return RuleHit(SIGNAL_MID_CAP)
    if balance > 1:
        return RuleHit(SIGNAL_RETAIL)
    return RuleHit(SIGNAL_DUST)


CLASSIFICATION_RULES: tuple[Rule, ...] = (
    burst_trading_rule,
    token_diversity_rule,
    wealth_tier_rule,
)


def classify_holder(
    address: str,
    holding_pct: float,
    samples: list[TxSample] | None,
    token_count: int | None,
    sol_balance: float | None,
    *,
    rules: tuple[Rule, ...] = CLASSIFICATION_RULES,
) -> HolderProfile:
    """Classify one holder. ``None`` inputs mean the lookup failed (unknown)."""
    if not samples:
        if holding_pct > LP_POOL_MIN_PCT:
            holder_type, confidence = HolderType.LP_POOL, LP_POOL_CONFIDENCE
            signals = [SIGNAL_HIGH_PCT, SIGNAL_NO_TXNS]
        else:
            holder_type, confidence = HolderType.DEAD, DEAD_CONFIDENCE
            signals = [SIGNAL_NO_TXNS]
        return HolderProfile(
            address=address,
            holding_pct=holding_pct,
            type=holder_type,
            confidence=confidence,
            sol_balance=sol_balance,
            token_count=token_count,
            timezone=None,
            signals=signals,
        )

    evidence = HolderEvidence(
        holding_pct=holding_pct,
        gaps=analyze_gaps(samples),
        token_count=token_count,
        sol_balance=sol_balance,
    )

    holder_type, confidence = HolderType.HUMAN, HUMAN_CONFIDENCE
    signals: list[str] = []
    for rule in rules:
        hit = rule(evidence)
        if hit is None:
            continue
        if hit.holder_type is not None:
            holder_type = hit.holder_type
            confidence = hit.confidence if hit.confidence is not None else confidence
        if hit.signal not in signals:
            signals.append(hit.signal)

    return HolderProfile(
        address=address,
        holding_pct=holding_pct,
        type=holder_type,
        confidence=confidence,
        sol_balance=sol_balance,
        token_count=token_count,
        timezone=infer_timezone(samples),
        signals=signals,
    )
