"""Cache providers.

SharedMemoryCache implements the simple cache contract on top of a shared
store.  Swapping the store (e.g. for a test double reproducing a backend's
quirks) needs no change to callers.
"""

from shmcache.providers.cache.shared_memory_cache import SharedMemoryCache

__all__ = ["SharedMemoryCache"]
