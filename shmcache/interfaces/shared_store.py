"""Abstract base class for shared key-value stores.

A shared store is the process-wide segment a cache adapter sits on.  It
offers atomic single-key and batch primitives and owns serialization,
expiry and memory management.  Keys reaching the store have already been
validated and stringified by the adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class ISharedStore(ABC):
    """Contract for shared-memory key-value stores.

    TTL arguments are integer seconds: ``0`` never expires, a positive value
    expires after that many seconds, a negative value is already expired.
    """

    @abstractmethod
    def fetch(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` for a single key."""

    @abstractmethod
    def fetch_many(self, keys: Sequence[str]) -> dict[Any, Any] | None:
        """Return the found subset of *keys* mapped to their values.

        Missing keys are simply absent.  ``None`` signals that the batch
        fetch failed as a whole.  Implementations may echo keys back in a
        different type than requested (``111`` for ``"111"``).
        """

    @abstractmethod
    def store(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store one entry; return ``True`` on success."""

    @abstractmethod
    def store_many(self, values: Mapping[str, Any], ttl: int = 0) -> list[str]:
        """Store every entry; return the keys that could not be stored.

        An empty list means full success.

        Raises
        ------
        StoreError
            If the batch call could not be carried out at all.
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove one entry; ``True`` if it existed."""

    @abstractmethod
    def delete_many(self, keys: Sequence[str]) -> list[str]:
        """Remove every key; return the keys that could not be removed."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present, without counting a hit or miss."""

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry from the segment."""

    @abstractmethod
    def info(self) -> dict[str, Any]:
        """Return segment statistics (entries, capacity, hit/miss counters)."""
