"""Shared pytest fixtures for the shmcache test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from shmcache.interfaces.shared_store import ISharedStore
from shmcache.main import reset_default_store
from shmcache.providers.cache.shared_memory_cache import SharedMemoryCache
from shmcache.providers.store.memory_store import MemoryStore


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Payload:
    """Plain mutable object used to check copy isolation."""

    def __init__(self, test_field: str = "test_value") -> None:
        self.test_field = test_field

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Payload) and other.test_field == self.test_field


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryStore:
    return MemoryStore(max_entries=1000, timer=clock)


@pytest.fixture
def cache(store: MemoryStore) -> SharedMemoryCache:
    return SharedMemoryCache(store=store)


@pytest.fixture
def mock_store() -> MagicMock:
    """A store double that reports success for every primitive."""
    store = MagicMock(spec=ISharedStore)
    store.fetch.return_value = (None, False)
    store.fetch_many.return_value = {}
    store.store.return_value = True
    store.store_many.return_value = []
    store.delete.return_value = True
    store.delete_many.return_value = []
    store.exists.return_value = False
    store.clear.return_value = True
    return store


@pytest.fixture
def mock_cache(mock_store: MagicMock) -> SharedMemoryCache:
    return SharedMemoryCache(store=mock_store)


@pytest.fixture(autouse=True)
def _fresh_default_store():
    """Keep the process-wide store from leaking entries between tests."""
    reset_default_store()
    yield
    reset_default_store()


@pytest.fixture
def sample_data() -> dict[str, object]:
    """Key/value pairs covering every value type the cache must round-trip."""
    return {
        "test_integer": 1,
        "test_double": 1.1,
        "test_string": "a",
        "test_boolean_true": True,
        "test_boolean_false": False,
        "test_object": Payload(),
        "test_array": {"test_key": "test_value"},
        "test_null": None,
        "AZaz09_.": "b",
        "bVGEIeslJXtDPrtK.hgo6HL25_.1BGmzo4VA25YKHveHh7v9tUP8r5BNCyLhx4zy": "c",
        "111": 11,
        "022": 22,
    }
