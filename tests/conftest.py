"""Pytest configuration and fixtures."""

import os

# Settings are validated at import time; give them something to read first.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("DISCORD_TOKEN", "test-token")

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from model.intent import NotificationIntent
from repository.ledger_store import LedgerStore


class InMemoryRedis:
    """The handful of redis.asyncio calls the ledger uses, kept in dicts."""

    def __init__(self) -> None:
        self.values: Dict[str, bytes] = {}
        self.hashes: Dict[str, Dict[str, bytes]] = {}

    @staticmethod
    def _b(value: Any) -> bytes:
        return value if isinstance(value, bytes) else str(value).encode("utf-8")

    async def ping(self) -> bool:
        return True

    async def get(self, name: str) -> Optional[bytes]:
        return self.values.get(name)

    async def set(self, name: str, value: Any, ex: Any = None, nx: bool = False):
        if nx and name in self.values:
            return None
        self.values[name] = self._b(value)
        return True

    async def hget(self, name: str, key: str) -> Optional[bytes]:
        return self.hashes.get(name, {}).get(key)

    async def hset(self, name: str, key: Any = None, value: Any = None, mapping=None):
        h = self.hashes.setdefault(name, {})
        items = dict(mapping or {})
        if key is not None:
            items[key] = value
        added = sum(1 for k in items if k not in h)
        h.update({k: self._b(v) for k, v in items.items()})
        return added

    async def aclose(self) -> None:
        return None


class RecordingDispatcher:
    """Stands in for NotificationDispatcher; optionally fails every delivery."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: List[NotificationIntent] = []
        self.fail = fail

    async def dispatch(self, intent: NotificationIntent) -> bool:
        self.sent.append(intent)
        return not self.fail

    async def aclose(self) -> None:
        return None


T0 = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)
REGISTRY = ["a.txt", "b.txt"]


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def redis_client() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def store(redis_client: InMemoryRedis) -> LedgerStore:
    return LedgerStore(seed_filenames=REGISTRY, client=redis_client)


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()
