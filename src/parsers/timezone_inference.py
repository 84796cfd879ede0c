"""Operating-region inference from the hour-of-day a wallet transacts at.

The peak UTC hour is mapped onto overlapping bands checked in a fixed
order: US [13, 22], Europe [8, 17], Asia [0, 9]. First match wins, so
hours 13-17 resolve to US and 8-9 to Europe. Anything else is Ambiguous.
"""

from collections import Counter
from datetime import datetime, timezone

from src.parsers.solana_rpc.models import TxSample

TZ_US = "US"
TZ_EUROPE = "Europe"
TZ_ASIA = "Asia"
TZ_AMBIGUOUS = "Ambiguous"

# Order matters: bands overlap at 8-9 and 13-17.
TIMEZONE_BANDS: tuple[tuple[str, int, int], ...] = (
    (TZ_US, 13, 22),
    (TZ_EUROPE, 8, 17),
    (TZ_ASIA, 0, 9),
)


def utc_hour(timestamp_ms: int) -> int:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).hour


def peak_hour(samples: list[TxSample]) -> int | None:
    """Most frequent UTC hour. Ties go to the lowest hour; None without samples."""
    if not samples:
        return None
    counts = Counter(utc_hour(s.timestamp_ms) for s in samples)
    return min(counts, key=lambda hour: (-counts[hour], hour))


def region_for_hour(hour: int) -> str:
    for region, start, end in TIMEZONE_BANDS:
        if start <= hour <= end:
            return region
    return TZ_AMBIGUOUS


def infer_timezone(samples: list[TxSample]) -> str | None:
    hour = peak_hour(samples)
    if hour is None:
        return None
    return region_for_hour(hour)
