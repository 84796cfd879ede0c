"""Roll per-holder profiles up into the token-level summary."""

from collections import Counter

from src.models.holder import HolderProfile, HolderReport, HolderSummary, HolderType, TokenContext


def summarize_holders(profiles: list[HolderProfile], total_holders: int) -> HolderSummary:
    """Counts by type, mean known SOL balance and timezone distribution.

    Holders whose balance lookup failed are left out of the average
    entirely rather than counted as 0 SOL.
    """
    types = Counter(p.type for p in profiles)
    balances = [p.sol_balance for p in profiles if p.sol_balance is not None]
    avg_sol = round(sum(balances) / len(balances), 2) if balances else 0.0

    return HolderSummary(
        total_holders=total_holders,
        bots=types[HolderType.BOT],
        humans=types[HolderType.HUMAN],
        dead=types[HolderType.DEAD] + types[HolderType.LP_POOL],
        average_sol_balance=avg_sol,
        timezone_distribution=dict(Counter(p.timezone for p in profiles if p.timezone)),
    )


def build_report(
    token: TokenContext, profiles: list[HolderProfile], total_holders: int
) -> HolderReport:
    return HolderReport(
        token=token,
        holders=list(profiles),
        summary=summarize_holders(profiles, total_holders),
    )
