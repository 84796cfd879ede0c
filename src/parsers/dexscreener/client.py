import httpx
from loguru import logger
from pydantic import ValidationError

from src.parsers.dexscreener.models import DexScreenerPair

BASE_URL = "https://api.dexscreener.com"


class DexScreenerClient:
    """Async REST client for DexScreener public API (no auth required).

    Single-shot calls: pacing is owned by the caller, and any failure
    returns None so one flaky lookup never aborts a batch.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: float = 10.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "DexScreenerClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def _get_pairs(self, path: str, params: dict | None = None) -> list[DexScreenerPair] | None:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.debug(f"[DEXSCREENER] {type(e).__name__} for {path}")
            return None

        if response.status_code != 200:
            logger.debug(f"[DEXSCREENER] HTTP {response.status_code} for {path}")
            return None

        try:
            data = response.json()
        except ValueError:
            logger.debug(f"[DEXSCREENER] Non-JSON body for {path}")
            return None

        if isinstance(data, list):
            raw = data
        elif isinstance(data, dict):
            raw = data.get("pairs") or []
        else:
            raw = []
        if not isinstance(raw, list):
            raw = [raw]

        pairs = []
        for p in raw:
            try:
                pairs.append(DexScreenerPair.model_validate(p))
            except ValidationError:
                logger.debug(f"[DEXSCREENER] Skipping malformed pair from {path}")
        return pairs

    async def get_token_pairs(self, token_address: str) -> list[DexScreenerPair] | None:
        """Get all pairs for a token across chains."""
        return await self._get_pairs(f"/latest/dex/tokens/{token_address}")

    async def search_pairs(self, query: str) -> list[DexScreenerPair] | None:
        """Free-text search by name, symbol or address."""
        return await self._get_pairs("/latest/dex/search", params={"q": query})

    async def close(self) -> None:
        await self._client.aclose()
