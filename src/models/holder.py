"""Holder intelligence report models.

Built fresh per invocation and serialised with camelCase aliases
(``report.model_dump(by_alias=True)``).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HolderType(str, Enum):
    HUMAN = "HUMAN"
    BOT = "BOT"
    DEAD = "DEAD"
    LP_POOL = "LP_POOL"


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenContext(_ReportModel):
    """Display/risk snapshot of the analysed token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    mint: str
    price: str | None = None  # DexScreener returns priceUsd as a string
    mc: float | None = None
    vol24h: float | None = Field(default=None, alias="vol24h")
    risk_score: int = 0


class HolderRecord(_ReportModel):
    """Raw holder row after percentage filtering."""

    address: str
    holding_pct: float


class HolderProfile(_ReportModel):
    address: str
    holding_pct: float
    type: HolderType
    confidence: float = Field(ge=0.0, le=1.0)
    sol_balance: float | None = None  # None = lookup failed, not zero
    token_count: int | None = None  # None = lookup failed, not zero
    timezone: str | None = None
    signals: list[str] = Field(default_factory=list)


class HolderSummary(_ReportModel):
    total_holders: int  # all holders passing the pct filter, not just the analysed ones
    bots: int = 0
    humans: int = 0
    dead: int = 0  # DEAD + LP_POOL
    average_sol_balance: float = 0.0
    timezone_distribution: dict[str, int] = Field(default_factory=dict)


class HolderReport(_ReportModel):
    token: TokenContext
    holders: list[HolderProfile] = Field(default_factory=list)
    summary: HolderSummary
