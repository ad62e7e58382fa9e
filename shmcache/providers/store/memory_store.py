"""In-process shared store backed by ``cachetools.TLRUCache``.

One ``MemoryStore`` instance is the process-wide "segment": every cache
adapter bound to it sees the same entries.  Values are pickled on the way in
and unpickled on the way out, so a caller can never mutate a stored value
through a reference it holds or receives.

Each entry carries its own TTL; the ``TLRUCache`` time-to-use function turns
that into an absolute expiry on the store's timer.  A ``threading.RLock``
makes every primitive, batch primitives included, atomic with respect to
other threads.
"""

from __future__ import annotations

import math
import pickle
import threading
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

import structlog
from cachetools import TLRUCache

from shmcache.interfaces.shared_store import ISharedStore
from shmcache.utils.errors import StoreError

logger = structlog.get_logger(logger_name=__name__)

_PROVIDER_NAME = "memory_store"
_MISSING = object()


class _Entry(NamedTuple):
    payload: bytes
    ttl: int


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    # ttl 0 never expires; negative ttls never reach the cache.
    if entry.ttl <= 0:
        return math.inf
    try:
        return now + entry.ttl
    except OverflowError:
        # Too large for a float clock: expires no sooner than never.
        return math.inf


class MemoryStore(ISharedStore):
    """Lock-guarded, pickling key-value segment with per-entry expiry.

    Parameters
    ----------
    max_entries:
        Capacity of the segment.  When full, the entry closest to expiry
        is evicted to make room.
    timer:
        Clock used for expiry, ``time.monotonic`` by default.
    """

    def __init__(
        self,
        max_entries: int = 65536,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_entries = max_entries
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_entries, ttu=_time_to_use, timer=timer
        )
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._inserts = 0
        self._deletes = 0

    # ------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # ------------------------------------------------------------------

    def _read(self, key: str) -> Any:
        entry = self._cache.get(key, _MISSING)
        if entry is _MISSING:
            self._misses += 1
            return _MISSING
        self._hits += 1
        return pickle.loads(entry.payload)

    def _write(self, key: str, value: Any, ttl: int) -> bool:
        if ttl < 0:
            self._cache.pop(key, None)
            logger.debug("store_expired_write", key=key, ttl=ttl)
            return False

        try:
            payload = pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            logger.warning("store_unpicklable_value", key=key, error=str(exc))
            return False

        self._cache[key] = _Entry(payload=payload, ttl=ttl)
        self._inserts += 1
        return True

    def _remove(self, key: str) -> bool:
        if self._cache.pop(key, _MISSING) is _MISSING:
            return False
        self._deletes += 1
        return True

    # ------------------------------------------------------------------
    # ISharedStore implementation
    # ------------------------------------------------------------------

    def fetch(self, key: str) -> tuple[Any, bool]:
        with self._lock:
            value = self._read(key)
        if value is _MISSING:
            return None, False
        return value, True

    def fetch_many(self, keys: Sequence[str]) -> dict[Any, Any] | None:
        found: dict[Any, Any] = {}
        with self._lock:
            for key in keys:
                value = self._read(key)
                if value is not _MISSING:
                    found[key] = value
        return found

    def store(self, key: str, value: Any, ttl: int = 0) -> bool:
        with self._lock:
            stored = self._write(key, value, ttl)
        logger.debug("store_set", key=key, ttl=ttl, stored=stored)
        return stored

    def store_many(self, values: Mapping[str, Any], ttl: int = 0) -> list[str]:
        if not isinstance(values, Mapping):
            raise StoreError(
                f"Batch store expects a mapping, got {type(values).__name__}",
                provider_name=_PROVIDER_NAME,
            )

        with self._lock:
            failed = [key for key, value in values.items() if not self._write(key, value, ttl)]
        logger.debug("store_set_many", count=len(values), failed=len(failed), ttl=ttl)
        return failed

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._remove(key)

    def delete_many(self, keys: Sequence[str]) -> list[str]:
        with self._lock:
            return [key for key in keys if not self._remove(key)]

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def clear(self) -> bool:
        with self._lock:
            self._cache.clear()
        logger.info("store_cleared")
        return True

    def info(self) -> dict[str, Any]:
        with self._lock:
            self._cache.expire()
            return {
                "type": _PROVIDER_NAME,
                "entries": len(self._cache),
                "max_entries": self._max_entries,
                "hits": self._hits,
                "misses": self._misses,
                "inserts": self._inserts,
                "deletes": self._deletes,
            }
