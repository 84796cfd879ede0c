"""Models for Solana JSON-RPC results used by holder analysis."""

from pydantic import BaseModel

LAMPORTS_PER_SOL = 1_000_000_000
SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class TxSample(BaseModel):
    """One signature of an address: block time and whether the tx failed."""

    timestamp_ms: int
    failed: bool = False
