"""Utility modules for shmcache.

- **errors** -- Exception hierarchy rooted at ShmCacheError; validation
  failures raise InvalidKeyError / InvalidInputError before the store is
  touched.
- **keys** -- Key stringification and reserved-character validation.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **ttl** -- TTL normalization to the 0 / positive / negative convention.
"""

# -- Exception hierarchy ---------------------------------------------------
from shmcache.utils.errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidInputError,
    InvalidKeyError,
    ShmCacheError,
    StoreError,
)

# -- Key validation ----------------------------------------------------------
from shmcache.utils.keys import RESERVED_CHARACTERS, normalize_key, normalize_keys

# -- Structured logging setup ----------------------------------------------
from shmcache.utils.logging import configure_logging, get_logger

# -- TTL normalization -------------------------------------------------------
from shmcache.utils.ttl import TTL_EXPIRED, TTL_INFINITY, duration_to_seconds, normalize_ttl

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidInputError",
    "InvalidKeyError",
    "RESERVED_CHARACTERS",
    "ShmCacheError",
    "StoreError",
    "TTL_EXPIRED",
    "TTL_INFINITY",
    "configure_logging",
    "duration_to_seconds",
    "get_logger",
    "normalize_key",
    "normalize_keys",
    "normalize_ttl",
]
