from src.models.holder import (
    HolderProfile,
    HolderRecord,
    HolderReport,
    HolderSummary,
    HolderType,
    TokenContext,
)
from src.models.market import MarketSnapshotEntry, TokenPrice

__all__ = [
    "HolderType",
    "TokenContext",
    "HolderRecord",
    "HolderProfile",
    "HolderSummary",
    "HolderReport",
    "MarketSnapshotEntry",
    "TokenPrice",
]
