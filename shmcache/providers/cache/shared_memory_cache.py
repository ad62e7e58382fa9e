"""Simple cache adapter over a shared in-process store.

Validates keys, normalizes TTLs and maps the simple cache contract onto the
store's single-key and batch primitives.  The adapter itself is stateless;
every entry lives in the bound :class:`ISharedStore`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from shmcache.interfaces.shared_store import ISharedStore
from shmcache.interfaces.simple_cache import ISimpleCache
from shmcache.utils.errors import InvalidInputError
from shmcache.utils.keys import normalize_key, normalize_keys
from shmcache.utils.ttl import TTL, TTL_EXPIRED, normalize_ttl

logger = structlog.get_logger(logger_name=__name__)


def _iterable_to_list(iterable: Any) -> list[Any]:
    """Materialize *iterable* into a list, rejecting non-iterables and strings."""
    if isinstance(iterable, (str, bytes)) or not isinstance(iterable, Iterable):
        raise InvalidInputError(f"Iterable is expected, got {type(iterable).__name__}")
    return list(iterable)


def _pairs_to_dict(values: Any) -> dict[Any, Any]:
    """Materialize a mapping or an iterable of ``(key, value)`` pairs."""
    if isinstance(values, Mapping):
        return dict(values.items())

    result: dict[Any, Any] = {}
    for item in _iterable_to_list(values):
        if not isinstance(item, tuple) or len(item) != 2:
            raise InvalidInputError(
                f"Key/value pairs are expected, got {type(item).__name__}"
            )
        key, value = item
        result[key] = value
    return result


class SharedMemoryCache(ISimpleCache):
    """Simple cache backed by a shared key-value segment.

    Parameters
    ----------
    store:
        The segment to operate on.  When omitted, the process-wide default
        store from :func:`shmcache.main.get_default_store` is used, so all
        default-constructed caches share their entries.
    """

    def __init__(self, store: ISharedStore | None = None) -> None:
        if store is None:
            from shmcache.main import get_default_store

            store = get_default_store()
        self._store = store

    @property
    def store(self) -> ISharedStore:
        return self._store

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    def get(self, key: str | int, default: Any = None) -> Any:
        key = normalize_key(key)
        value, found = self._store.fetch(key)
        if not found:
            logger.debug("cache_miss", key=key)
            return default
        logger.debug("cache_hit", key=key)
        return value

    def set(self, key: str | int, value: Any, ttl: TTL = None) -> bool:
        key = normalize_key(key)
        seconds = normalize_ttl(ttl)

        if seconds <= TTL_EXPIRED:
            return self.delete(key)

        stored = self._store.store(key, value, seconds)
        logger.debug("cache_set", key=key, ttl=seconds, stored=stored)
        return stored

    def delete(self, key: str | int) -> bool:
        key = normalize_key(key)
        deleted = self._store.delete(key)
        logger.debug("cache_delete", key=key, deleted=deleted)
        return deleted

    def clear(self) -> bool:
        cleared = self._store.clear()
        logger.debug("cache_clear", cleared=cleared)
        return cleared

    def has(self, key: str | int) -> bool:
        return self._store.exists(normalize_key(key))

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[str, Any]:
        str_keys = normalize_keys(_iterable_to_list(keys))
        # Missing keys share the one default object.
        values = dict.fromkeys(str_keys, default)

        found = self._store.fetch_many(str_keys)
        if found is None:
            logger.debug("cache_fetch_many_failed", count=len(str_keys))
            return values

        # The store may echo "111" back as 111; match on the string form.
        from_store = {str(key): value for key, value in found.items()}
        for key in values:
            if key in from_store:
                values[key] = from_store[key]
        return values

    def set_multiple(
        self,
        values: Mapping[str | int, Any] | Iterable[tuple[str | int, Any]],
        ttl: TTL = None,
    ) -> bool:
        items = _pairs_to_dict(values)
        normalize_keys(items)
        seconds = normalize_ttl(ttl)

        # Integer keys are written one by one: a single batch does not keep
        # 111 and "111" apart reliably.
        with_str_keys = {key: value for key, value in items.items() if isinstance(key, str)}
        with_int_keys = {key: value for key, value in items.items() if not isinstance(key, str)}

        if with_str_keys:
            failed = self._store.store_many(with_str_keys, seconds)
            if failed:
                logger.warning("set_multiple_failed", failed_keys=failed, ttl=seconds)
                return False

        for key, value in with_int_keys.items():
            if not self._store.store(str(key), value, seconds):
                logger.warning("set_multiple_failed", failed_keys=[str(key)], ttl=seconds)
                return False

        return True

    def delete_multiple(self, keys: Iterable[str | int]) -> bool:
        str_keys = normalize_keys(_iterable_to_list(keys))
        failed = self._store.delete_many(str_keys)
        logger.debug("cache_delete_many", count=len(str_keys), failed=len(failed))
        return not failed
