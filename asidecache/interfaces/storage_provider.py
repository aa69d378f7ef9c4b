"""Abstract base class for cache storage backends.

Defines the contract the cache client relies on to read, write and remove
raw byte payloads keyed by string.  Implementations may use an in-memory
map, SQLite, Redis, a disk cache, or anything else that can honour these
three operations.  Swapping backends never touches the client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IStorageProvider(ABC):
    """Contract for byte-oriented key-value storage.

    All operations are async so network-backed stores do not block the
    event loop.  Implementations must be safe for concurrent use; the
    client performs no locking around them.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes:
        """Return the payload stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        bytes
            The stored payload.

        Raises
        ------
        CacheMissError
            When no entry exists for *key*.  Any other exception is treated
            by the client as an operational failure of the backend.
        """

    @abstractmethod
    async def set(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, overwriting any existing entry.

        Parameters
        ----------
        key:
            The cache key.
        data:
            The serialised payload.
        """

    @abstractmethod
    async def invalidate(self, key: str) -> None:
        """Remove any entry stored under *key*.

        Succeeds silently when *key* is already absent.

        Parameters
        ----------
        key:
            The cache key to remove.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this backend."""
