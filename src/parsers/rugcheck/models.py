"""Pydantic models for Rugcheck.xyz API responses."""

from pydantic import BaseModel


class RugcheckHolder(BaseModel):
    """One entry of the report's ``topHolders`` list."""

    owner: str
    pct: float = 0.0  # % of total supply


class RugcheckHolderReport(BaseModel):
    """Full token report from Rugcheck.xyz, reduced to what holder analysis reads.

    score: normalised risk score, 0 when Rugcheck omits it.
    top_holders: in the order Rugcheck ranks them (largest first).
    """

    mint: str = ""
    score: int = 0
    top_holders: list[RugcheckHolder] = []
