"""Abstract base class for simple key-value caches.

Defines the conventional "simple cache" operation set (get / set / delete /
clear / has and their batch variants).  Any implementation of this contract
can be substituted for another, so the key rules and TTL conventions below
are fixed and must not be relaxed by subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from shmcache.utils.ttl import TTL


class ISimpleCache(ABC):
    """Contract for synchronous key-value caches.

    Keys are non-empty strings (integers are accepted and stringified) that
    contain none of ``{}()/\\@:``.  Every method that takes a key raises
    :class:`~shmcache.utils.errors.InvalidKeyError` for a bad key before
    touching the backend.
    """

    @abstractmethod
    def get(self, key: str | int, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if absent.

        Parameters
        ----------
        key:
            The cache key to look up.
        default:
            Returned when the key is missing or expired.
        """

    @abstractmethod
    def set(self, key: str | int, value: Any, ttl: TTL = None) -> bool:
        """Store *value* under *key*.

        Parameters
        ----------
        key:
            The cache key.
        value:
            Any picklable value.
        ttl:
            ``None`` for no expiry, seconds, or a duration.  A TTL that
            normalizes to a negative value deletes the key instead.

        Returns
        -------
        bool
            ``True`` on success.
        """

    @abstractmethod
    def delete(self, key: str | int) -> bool:
        """Remove *key*; return ``True`` if it existed and was removed."""

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry from the cache."""

    @abstractmethod
    def has(self, key: str | int) -> bool:
        """Return ``True`` if *key* is present and not expired."""

    @abstractmethod
    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[str, Any]:
        """Return a mapping of each key to its value, or *default* if absent.

        The result preserves the iteration order of *keys*.  Like
        ``dict.get``, every missing key maps to the same *default* object;
        a mutable default is shared, not copied.
        """

    @abstractmethod
    def set_multiple(
        self,
        values: Mapping[str | int, Any] | Iterable[tuple[str | int, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Store every key/value pair; ``True`` only if all writes succeeded.

        Writes are not transactional: a ``False`` result may mean some of
        the pairs were stored.
        """

    @abstractmethod
    def delete_multiple(self, keys: Iterable[str | int]) -> bool:
        """Remove every key; ``True`` only if all were removed."""
