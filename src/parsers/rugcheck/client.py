"""Rugcheck.xyz API client — free token report with top holders for Solana tokens."""

import httpx
from loguru import logger

from src.parsers.rugcheck.models import RugcheckHolder, RugcheckHolderReport

BASE_URL = "https://api.rugcheck.xyz/v1"


class RugcheckClient:
    """Async HTTP client for Rugcheck.xyz (free, no API key)."""

    def __init__(self, base_url: str = BASE_URL, timeout: float = 15.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "RugcheckClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def get_holder_report(self, mint: str) -> RugcheckHolderReport | None:
        """Fetch the full token report (risk score + top holders).

        Returns None if token not found or API error.
        """
        url = f"{self._base_url}/tokens/{mint}/report"

        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"[RUGCHECK] {type(e).__name__} for {mint[:12]}: {e}")
            return None

        if resp.status_code == 404:
            logger.debug(f"[RUGCHECK] Token {mint[:12]} not indexed")
            return None
        if resp.status_code != 200:
            logger.debug(f"[RUGCHECK] HTTP {resp.status_code} for {mint[:12]}")
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.debug(f"[RUGCHECK] Non-JSON body for {mint[:12]}")
            return None
        if not isinstance(data, dict):
            return None

        return _parse_report(data, mint)


def _parse_report(data: dict, mint: str) -> RugcheckHolderReport:
    """Parse raw JSON into RugcheckHolderReport, skipping unusable holder rows."""
    holders = []
    for row in data.get("topHolders") or []:
        if not isinstance(row, dict):
            continue
        owner = row.get("owner")
        try:
            pct = float(row.get("pct"))
        except (TypeError, ValueError):
            continue
        if not owner:
            continue
        holders.append(RugcheckHolder(owner=owner, pct=pct))

    try:
        score = int(data.get("score") or 0)
    except (TypeError, ValueError):
        score = 0

    return RugcheckHolderReport(mint=mint, score=score, top_holders=holders)
