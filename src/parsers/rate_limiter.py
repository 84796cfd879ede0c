"""Fixed-delay pacing for sequential calls to rate-limited public APIs.

Every pause goes through an injectable ``sleep`` coroutine so tests can
record the delay schedule instead of waiting on the wall clock. Each
pause is also the point where a caller can cancel a running analysis.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from config.settings import Settings

SleepFunc = Callable[[float], Awaitable[None]]


class FixedDelay:
    """Sleeps a fixed interval every time ``wait()`` is awaited."""

    def __init__(self, delay_sec: float, *, name: str = "", sleep: SleepFunc | None = None) -> None:
        if delay_sec < 0:
            raise ValueError(f"delay must be >= 0, got {delay_sec}")
        self.delay_sec = delay_sec
        self.name = name
        self._sleep = sleep

    async def wait(self) -> None:
        if self.delay_sec <= 0:
            return
        logger.trace(f"[RATE-LIMIT] {self.name or 'delay'} {self.delay_sec}s")
        sleep = self._sleep or asyncio.sleep
        await sleep(self.delay_sec)


@dataclass(frozen=True)
class DelayPolicy:
    """Per-source delays for one pipeline invocation."""

    holder_report: FixedDelay
    market_search: FixedDelay
    rpc_call: FixedDelay

    @classmethod
    def from_settings(cls, cfg: Settings | None = None, *, sleep: SleepFunc | None = None) -> DelayPolicy:
        if cfg is None:
            from config.settings import settings as cfg
        return cls(
            holder_report=FixedDelay(cfg.holder_report_delay_sec, name="holder_report", sleep=sleep),
            market_search=FixedDelay(cfg.market_search_delay_sec, name="market_search", sleep=sleep),
            rpc_call=FixedDelay(cfg.rpc_call_delay_sec, name="rpc_call", sleep=sleep),
        )

    @classmethod
    def disabled(cls) -> DelayPolicy:
        """Zero delays — for private RPC endpoints without throughput caps."""
        return cls(
            holder_report=FixedDelay(0, name="holder_report"),
            market_search=FixedDelay(0, name="market_search"),
            rpc_call=FixedDelay(0, name="rpc_call"),
        )
