"""Tests for holder classification rules."""

from datetime import datetime, timezone

import pytest

from src.models.holder import HolderType
from src.parsers.holder_activity import analyze_gaps
from src.parsers.holder_classifier import (
    CLASSIFICATION_RULES,
    HolderEvidence,
    RuleHit,
    burst_trading_rule,
    classify_holder,
    token_diversity_rule,
    wealth_tier_rule,
)
from src.parsers.solana_rpc.models import TxSample

BASE_MS = int(datetime(2025, 1, 1, 14, 0, tzinfo=timezone.utc).timestamp()) * 1000


def _spaced(count: int, gap_sec: float, start_ms: int = BASE_MS) -> list[TxSample]:
    """``count`` samples newest first, ``gap_sec`` apart."""
    return [TxSample(timestamp_ms=start_ms - int(i * gap_sec * 1000)) for i in range(count)]


def _evidence(samples=None, token_count=None, sol_balance=None, pct=1.0) -> HolderEvidence:
    return HolderEvidence(
        holding_pct=pct,
        gaps=analyze_gaps(samples or []),
        token_count=token_count,
        sol_balance=sol_balance,
    )


class TestNoDataBranch:
    def test_high_pct_without_txns_is_lp_pool(self):
        p = classify_holder("pool", 15.0, [], None, None)
        assert p.type == HolderType.LP_POOL
        assert p.confidence == 0.9
        assert p.signals == ["high_pct", "no_txns"]
        assert p.timezone is None

    def test_low_pct_without_txns_is_dead(self):
        p = classify_holder("dead", 5.0, [], None, None)
        assert p.type == HolderType.DEAD
        assert p.confidence == 0.8
        assert p.signals == ["no_txns"]

    def test_exactly_ten_pct_is_dead(self):
        assert classify_holder("x", 10.0, [], None, None).type == HolderType.DEAD

    def test_failed_signature_lookup_takes_no_data_branch(self):
        """None (lookup failed) behaves like an empty history."""
        p = classify_holder("x", 12.0, None, 7, 3.5)
        assert p.type == HolderType.LP_POOL
        assert p.sol_balance == 3.5
        assert p.token_count == 7

    def test_no_data_skips_tier_signals(self):
        p = classify_holder("x", 1.0, None, 50, 500.0)
        assert "WHALE" not in p.signals
        assert "MEGA_DEGEN" not in p.signals

    def test_total_lookup_failure_still_typed(self):
        p = classify_holder("x", 0.5, None, None, None)
        assert p.type == HolderType.DEAD
        assert 0.0 <= p.confidence <= 1.0


class TestBotDetection:
    def test_fifteen_one_second_gaps_is_bot(self):
        p = classify_holder("bot", 2.0, _spaced(15, 1), 5, 5.0)
        assert p.type == HolderType.BOT
        assert p.confidence == 0.9
        assert "burst_trading" in p.signals

    def test_six_bursts_is_bot(self):
        samples = _spaced(7, 3)  # 6 gaps of 3s
        assert classify_holder("x", 1.0, samples, None, None).type == HolderType.BOT

    def test_five_bursts_is_human(self):
        samples = _spaced(6, 3)  # 5 gaps of 3s
        p = classify_holder("x", 1.0, samples, None, None)
        assert p.type == HolderType.HUMAN
        assert p.confidence == 0.6
        assert p.signals == []

    def test_short_min_gap_needs_more_than_ten_samples(self):
        # one 1s gap, rest hour-long
        ten = [TxSample(timestamp_ms=BASE_MS), TxSample(timestamp_ms=BASE_MS - 1000)] + _spaced(
            8, 3600, BASE_MS - 3_601_000
        )
        eleven = ten + [TxSample(timestamp_ms=ten[-1].timestamp_ms - 3_600_000)]
        assert len(ten) == 10 and len(eleven) == 11
        assert burst_trading_rule(_evidence(ten)) is None
        assert burst_trading_rule(_evidence(eleven)) == RuleHit(
            "burst_trading", HolderType.BOT, 0.9
        )

    def test_slow_trader_is_human(self):
        p = classify_holder("x", 1.0, _spaced(20, 3600), None, None)
        assert p.type == HolderType.HUMAN


class TestTokenDiversity:
    @pytest.mark.parametrize(
        ("count", "signal"),
        [(21, "MEGA_DEGEN"), (20, "DEGEN"), (11, "DEGEN"), (3, "FOCUSED"), (0, "FOCUSED")],
    )
    def test_tiers(self, count, signal):
        assert token_diversity_rule(_evidence(token_count=count)).signal == signal

    @pytest.mark.parametrize("count", [4, 7, 10])
    def test_neutral_band(self, count):
        assert token_diversity_rule(_evidence(token_count=count)) is None

    def test_unknown_count_skipped(self):
        assert token_diversity_rule(_evidence(token_count=None)) is None


class TestWealthTier:
    @pytest.mark.parametrize(
        ("balance", "signal"),
        [
            (100.01, "WHALE"),
            (100.0, "MID_CAP"),
            (10.5, "MID_CAP"),
            (10.0, "RETAIL"),
            (1.01, "RETAIL"),
            (1.0, "DUST"),
            (0.0, "DUST"),
        ],
    )
    def test_tiers(self, balance, signal):
        assert wealth_tier_rule(_evidence(sol_balance=balance)).signal == signal

    def test_unknown_balance_skipped(self):
        assert wealth_tier_rule(_evidence(sol_balance=None)) is None


class TestFullProfile:
    def test_signals_in_rule_order(self):
        p = classify_holder("x", 3.0, _spaced(15, 1), 25, 250.0)
        assert p.signals == ["burst_trading", "MEGA_DEGEN", "WHALE"]

    def test_timezone_attached_for_bots_and_humans(self):
        bot = classify_holder("b", 1.0, _spaced(15, 1), None, None)
        human = classify_holder("h", 1.0, _spaced(3, 600), None, None)
        assert bot.timezone == "US"  # 14:00 UTC
        assert human.timezone == "US"

    def test_profile_carries_inputs(self):
        p = classify_holder("addr1", 4.2, _spaced(2, 60), 8, 42.0)
        assert p.address == "addr1"
        assert p.holding_pct == 4.2
        assert p.token_count == 8
        assert p.sol_balance == 42.0
        assert p.signals == ["MID_CAP"]

    def test_custom_rule_order(self):
        """Rules are applied in the order given."""
        p = classify_holder(
            "x", 1.0, _spaced(3, 600), 2, 500.0,
            rules=(wealth_tier_rule, token_diversity_rule),
        )
        assert p.signals == ["WHALE", "FOCUSED"]

    def test_default_rules(self):
        assert CLASSIFICATION_RULES == (burst_trading_rule, token_diversity_rule, wealth_tier_rule)

    @pytest.mark.parametrize("count", [0, 1, 2, 11, 20])
    @pytest.mark.parametrize("gap", [0.5, 4, 3600])
    def test_confidence_in_range(self, count, gap):
        p = classify_holder("x", 2.0, _spaced(count, gap), 5, 5.0)
        assert 0.0 <= p.confidence <= 1.0
        assert p.type in set(HolderType)
