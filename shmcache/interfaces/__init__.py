"""Public interface definitions for shmcache.

Concrete classes implement these abstract bases and are wired together in
``shmcache/main.py``:

    Interface      ->  Concrete implementation
    ---------------------------------------------------------------------
    ISimpleCache   ->  SharedMemoryCache  (shmcache/providers/cache/)
    ISharedStore   ->  MemoryStore        (shmcache/providers/store/)

Tests inject a ``MagicMock(spec=ISharedStore)`` to reproduce store quirks
without a real segment.
"""

from shmcache.interfaces.shared_store import ISharedStore
from shmcache.interfaces.simple_cache import ISimpleCache

__all__ = [
    "ISharedStore",
    "ISimpleCache",
]
