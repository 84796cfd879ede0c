"""Market lookup models (DexScreener-backed, no classification).

Fields ending in a period suffix (``24h``, ``1h``, ``5m``) carry explicit
aliases because ``to_camel`` upper-cases the letter after a digit.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MarketSnapshotEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    address: str
    chain: str
    price: str | None = None
    mc: float = 0.0
    vol24h: float = Field(default=0.0, alias="vol24h")
    buys24h: int = Field(default=0, alias="buys24h")
    sells24h: int = Field(default=0, alias="sells24h")
    buys_sell_ratio: float = 0.0
    liquidity: float = 0.0
    price_change24h: float = Field(default=0.0, alias="priceChange24h")


class TokenPrice(BaseModel):
    """Price, volume and flow data from a token's highest-liquidity pair."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    address: str
    symbol: str
    name: str
    price_usd: str | None = None
    market_cap: float = 0.0
    volume24h: float = Field(default=0.0, alias="volume24h")
    volume1h: float = Field(default=0.0, alias="volume1h")
    volume5m: float = Field(default=0.0, alias="volume5m")
    price_change24h: float = Field(default=0.0, alias="priceChange24h")
    price_change1h: float = Field(default=0.0, alias="priceChange1h")
    liquidity: float = 0.0
    buys24h: int = Field(default=0, alias="buys24h")
    sells24h: int = Field(default=0, alias="sells24h")
    chain: str = ""
    dex: str = ""
    pair_address: str = ""
