"""Shared store providers.

MemoryStore is a lock-guarded ``cachetools.TLRUCache`` holding pickled
values with per-entry TTLs.  It is shared by every cache bound to it inside
one process, but not across processes.
"""

from shmcache.providers.store.memory_store import MemoryStore

__all__ = ["MemoryStore"]
