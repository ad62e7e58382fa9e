"""shmcache -- a simple cache adapter over a shared in-process key-value store.

Typical use::

    from shmcache import SharedMemoryCache

    cache = SharedMemoryCache()
    cache.set("user.42", {"name": "Ada"}, ttl=300)
    cache.get("user.42")
"""

from shmcache.interfaces import ISharedStore, ISimpleCache
from shmcache.main import bootstrap, build_cache, build_store, get_default_store
from shmcache.providers.cache import SharedMemoryCache
from shmcache.providers.store import MemoryStore
from shmcache.utils.errors import (
    InvalidArgumentError,
    InvalidInputError,
    InvalidKeyError,
    ShmCacheError,
    StoreError,
)

__version__ = "0.1.0"

__all__ = [
    "ISharedStore",
    "ISimpleCache",
    "InvalidArgumentError",
    "InvalidInputError",
    "InvalidKeyError",
    "MemoryStore",
    "SharedMemoryCache",
    "ShmCacheError",
    "StoreError",
    "bootstrap",
    "build_cache",
    "build_store",
    "get_default_store",
]
