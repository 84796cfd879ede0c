"""Solana JSON-RPC client — balance, signature history and token accounts."""

from typing import Any

import httpx
from loguru import logger

from src.parsers.solana_rpc.models import LAMPORTS_PER_SOL, SPL_TOKEN_PROGRAM_ID, TxSample

PUBLIC_RPC_URL = "https://api.mainnet-beta.solana.com"


class SolanaRpcClient:
    """Async JSON-RPC 2.0 client against a single Solana endpoint.

    Every method returns None when the call fails (HTTP error, timeout,
    RPC ``error`` member or unexpected payload). None means unknown, not zero.
    """

    def __init__(self, rpc_url: str = PUBLIC_RPC_URL, timeout: float = 10.0) -> None:
        self._rpc_url = rpc_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "SolanaRpcClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: list[Any]) -> Any | None:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            resp = await self._client.post(self._rpc_url, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[SOLANA-RPC] {method} {type(e).__name__}: {e}")
            return None

        if resp.status_code != 200:
            logger.debug(f"[SOLANA-RPC] {method} HTTP {resp.status_code}")
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.debug(f"[SOLANA-RPC] {method} non-JSON body")
            return None
        if not isinstance(data, dict):
            return None
        if data.get("error"):
            logger.debug(f"[SOLANA-RPC] {method} RPC error: {data['error']}")
            return None
        return data.get("result")

    async def get_balance(self, address: str) -> float | None:
        """Native balance in SOL."""
        result = await self._call("getBalance", [address])
        if not isinstance(result, dict) or not isinstance(result.get("value"), int):
            return None
        return result["value"] / LAMPORTS_PER_SOL

    async def get_signatures(self, address: str, *, limit: int = 20) -> list[TxSample] | None:
        """Most recent signatures, newest first. Entries without blockTime are dropped."""
        result = await self._call("getSignaturesForAddress", [address, {"limit": limit}])
        if not isinstance(result, list):
            return None
        samples = []
        for sig in result:
            block_time = sig.get("blockTime") if isinstance(sig, dict) else None
            if block_time is None:
                continue
            try:
                timestamp_ms = int(block_time) * 1000
            except (TypeError, ValueError):
                logger.debug(f"[SOLANA-RPC] Skipping signature with blockTime={block_time!r}")
                continue
            samples.append(TxSample(timestamp_ms=timestamp_ms, failed=sig.get("err") is not None))
        return samples

    async def get_token_account_count(self, owner: str) -> int | None:
        """Number of SPL token accounts with a positive balance."""
        result = await self._call(
            "getTokenAccountsByOwner",
            [owner, {"programId": SPL_TOKEN_PROGRAM_ID}, {"encoding": "jsonParsed"}],
        )
        if not isinstance(result, dict) or not isinstance(result.get("value"), list):
            return None
        return sum(1 for acc in result["value"] if _ui_amount(acc) > 0)


def _ui_amount(account: Any) -> float:
    """Parsed UI amount of a jsonParsed token account, 0 when unreadable."""
    try:
        raw = account["account"]["data"]["parsed"]["info"]["tokenAmount"]["uiAmountString"]
        return float(raw)
    except (KeyError, TypeError, ValueError):
        return 0.0
