"""Inter-transaction gap analysis — bots trade in tight bursts."""

import math
from dataclasses import dataclass

from src.parsers.solana_rpc.models import TxSample

BURST_GAP_SEC = 5.0


@dataclass(frozen=True)
class ActivityGaps:
    """Gap statistics over consecutive transaction samples."""

    sample_count: int
    min_gap_sec: float  # inf with fewer than 2 samples
    burst_count: int  # consecutive gaps strictly under BURST_GAP_SEC


def analyze_gaps(samples: list[TxSample]) -> ActivityGaps:
    """Compute gaps between consecutive samples (most-recent-first order).

    Absolute differences, so an out-of-order entry from the RPC node
    cannot produce a negative gap.
    """
    gaps = [
        abs(newer.timestamp_ms - older.timestamp_ms) / 1000
        for newer, older in zip(samples, samples[1:])
    ]
    return ActivityGaps(
        sample_count=len(samples),
        min_gap_sec=min(gaps) if gaps else math.inf,
        burst_count=sum(1 for g in gaps if g < BURST_GAP_SEC),
    )
