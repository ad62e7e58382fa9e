"""Factories wiring settings, the shared store and the cache adapter.

The process-wide default store is the in-process equivalent of a shared
memory segment: every ``SharedMemoryCache()`` constructed without an explicit
store reads and writes the same entries.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog

from shmcache.config.loader import load_config
from shmcache.interfaces.shared_store import ISharedStore
from shmcache.providers.cache.shared_memory_cache import SharedMemoryCache
from shmcache.providers.store.memory_store import MemoryStore
from shmcache.utils.errors import ConfigurationError
from shmcache.utils.logging import configure_logging

logger = structlog.get_logger(logger_name=__name__)

_default_store: MemoryStore | None = None
_default_store_lock = threading.Lock()


def build_store(config: dict[str, Any] | None = None) -> MemoryStore:
    """Create a :class:`MemoryStore` from a resolved configuration dict.

    Raises
    ------
    ConfigurationError
        If ``store.max_entries`` is not a positive integer.
    """
    if config is None:
        config = load_config()

    raw = (config.get("store") or {}).get("max_entries", 65536)
    try:
        max_entries = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"store.max_entries must be an integer, got {raw!r}",
            provider_name="memory_store",
        ) from exc
    if max_entries < 1:
        raise ConfigurationError(
            f"store.max_entries must be at least 1, got {max_entries}",
            provider_name="memory_store",
        )

    logger.debug("store_built", max_entries=max_entries)
    return MemoryStore(max_entries=max_entries)


def get_default_store() -> MemoryStore:
    """Return the process-wide store, creating it on first use."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = build_store()
        return _default_store


def reset_default_store() -> None:
    """Drop the process-wide store so the next access builds a fresh one."""
    global _default_store
    with _default_store_lock:
        _default_store = None


def build_cache(
    config: dict[str, Any] | None = None,
    store: ISharedStore | None = None,
) -> SharedMemoryCache:
    """Create a cache on *store*, or on a store built from *config*.

    With neither argument the cache binds to the process-wide default store.
    """
    if store is None:
        store = build_store(config) if config is not None else get_default_store()
    return SharedMemoryCache(store=store)


def bootstrap(config_path: str = "config/config.yaml") -> SharedMemoryCache:
    """Load configuration, configure logging and return a cache on the default store."""
    config = load_config(config_path)
    app_env = (config.get("app") or {}).get("env", "development")
    log_level = (config.get("logging") or {}).get("level", "INFO")
    configure_logging(log_level=log_level, json_output=(app_env == "production"))

    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = build_store(config)
        store = _default_store

    logger.info("cache_bootstrapped", app_env=app_env, max_entries=store.info()["max_entries"])
    return SharedMemoryCache(store=store)
