"""Custom exception hierarchy for asidecache.

All library exceptions inherit from :class:`AsideCacheError`, which
carries an optional ``provider_name`` so error handlers can identify which
storage backend (e.g. "memory", "sqlite") caused the failure.

The hierarchy is organized by where in a cache call the failure happens:

    AsideCacheError  (base -- catch-all for any asidecache error)
    +-- CacheMissError       (storage read found no entry; not a failure)
    +-- StorageError         (backend malfunction on get/set/invalidate)
    +-- BuildError           (the miss-fill builder raised)
    +-- EncodeError          (value could not be serialised for a write)
    +-- DecodeError          (stored payload could not be deserialised)
    +-- ConfigurationError   (invalid client or settings)

Callers can tell "the data source failed" (:class:`BuildError`) apart from
"the cache failed" (anything the storage backend raised) without string
matching.
"""

from __future__ import annotations


class AsideCacheError(Exception):
    """Base exception for all asidecache errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which backend triggered the error.  The
    ``__str__`` method prefixes the provider name in brackets for log
    output, e.g. ``[sqlite] database is locked``.
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
# Storage signals and failures
# ---------------------------------------------------------------------------

class CacheMissError(AsideCacheError):
    """Raised by a storage provider when no entry exists for a key.

    This is the distinguished "not found" signal.  The client treats it as
    a cue to run the builder, never as an operational failure.
    """

    def __init__(
        self,
        message: str = "Cache miss",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class StorageError(AsideCacheError):
    """Raised when a storage backend fails to read, write or delete."""

    def __init__(
        self,
        message: str = "Cache storage operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Builder failures
# ---------------------------------------------------------------------------

class BuildError(AsideCacheError):
    """Raised when the builder fails to produce a value on a cache miss.

    The original exception is available as :attr:`cause` and is also
    chained as ``__cause__``.
    """

    def __init__(
        self,
        cause: BaseException,
        message: str | None = None,
    ) -> None:
        self._cause = cause
        super().__init__(message=message or f"cache miss build failed: {cause}")

    @property
    def cause(self) -> BaseException:
        return self._cause


# ---------------------------------------------------------------------------
# Value codec failures
# ---------------------------------------------------------------------------

class EncodeError(AsideCacheError):
    """Raised when a value cannot be serialised to bytes."""

    def __init__(
        self,
        message: str = "Value serialisation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class DecodeError(AsideCacheError):
    """Raised when stored bytes cannot be deserialised into the target value."""

    def __init__(
        self,
        message: str = "Value deserialisation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(AsideCacheError):
    """Raised when a client or its settings are invalid."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
