"""Shared test fixtures."""

import pytest

from config.settings import Settings
from src.parsers.rate_limiter import DelayPolicy


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting.

    Shares an ``events`` list with fakes so call/delay interleaving can be asserted.
    """

    def __init__(self, events: list) -> None:
        self.events = events

    async def __call__(self, seconds: float) -> None:
        self.events.append(("sleep", seconds))

    @property
    def delays(self) -> list[float]:
        return [e[1] for e in self.events if e[0] == "sleep"]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def recording_sleep(events: list) -> RecordingSleep:
    return RecordingSleep(events)


@pytest.fixture
def delays(test_settings: Settings, recording_sleep: RecordingSleep) -> DelayPolicy:
    return DelayPolicy.from_settings(test_settings, sleep=recording_sleep)
