"""Custom exception hierarchy for shmcache.

All library exceptions inherit from :class:`ShmCacheError`, which carries an
optional ``provider_name`` so callers can tell which backend (e.g.
"memory_store") raised the failure.

    ShmCacheError  (base -- catch-all for any shmcache error)
    +-- InvalidArgumentError   (bad argument passed to a cache operation)
    |   +-- InvalidKeyError    (empty key, wrong type, reserved character)
    |   +-- InvalidInputError  (batch argument is not iterable)
    +-- StoreError             (a store primitive failed outright)
    +-- ConfigurationError     (invalid settings at build time)

Store-level misses and partial batch failures are reported as ``False`` by
the cache, never as exceptions.  Only the classes above are raised.
"""


class ShmCacheError(Exception):
    """Base exception for all shmcache errors.

    The ``__str__`` method prefixes the provider name in brackets for log
    output, e.g. ``[memory_store] Batch store failed``.
    """

    def __init__(
        self,
        message: str = "An unexpected cache error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class InvalidArgumentError(ShmCacheError, ValueError):
    """Raised when a cache operation receives an argument it cannot accept.

    Also a :class:`ValueError`, so generic callers that only know the
    standard library hierarchy still catch it.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidKeyError(InvalidArgumentError):
    """Raised when a cache key is empty, of the wrong type, or contains a reserved character."""

    def __init__(
        self,
        message: str = "Invalid key value.",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidInputError(InvalidArgumentError):
    """Raised when a batch operation receives something that is not iterable."""

    def __init__(
        self,
        message: str = "Iterable is expected",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Backend / configuration errors
# ---------------------------------------------------------------------------

class StoreError(ShmCacheError):
    """Raised when a store primitive fails as a whole rather than per key.

    A batch store that rejects some keys reports them as failed keys; this
    exception is reserved for the call itself not completing.
    """

    def __init__(
        self,
        message: str = "Shared store operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(ShmCacheError):
    """Raised when configuration is invalid or missing at build time."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
