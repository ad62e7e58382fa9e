"""Cache key normalization and validation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shmcache.utils.errors import InvalidKeyError

RESERVED_CHARACTERS = "{}()/\\@:"

_RESERVED = frozenset(RESERVED_CHARACTERS)


def normalize_key(key: Any) -> str:
    """Return *key* in its string form after validating it.

    ``int`` keys are accepted and stringified (``111`` -> ``"111"``).
    ``bool`` is rejected even though it subclasses ``int``.

    Raises
    ------
    InvalidKeyError
        If the key is not a ``str``/``int``, is empty, or contains any of
        ``{}()/\\@:``.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        key = str(key)
    if not isinstance(key, str) or key == "" or not _RESERVED.isdisjoint(key):
        raise InvalidKeyError(f"Invalid key value: {key!r}")
    return key


def normalize_keys(keys: Iterable[Any]) -> list[str]:
    """Normalize every key; the first invalid one raises before any is used."""
    return [normalize_key(key) for key in keys]
