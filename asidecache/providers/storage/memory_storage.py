"""In-memory storage provider using cachetools.

Simple, fast storage suitable for development and single-process
deployments.  Eviction (size bound, optional TTL) is handled entirely by
the underlying ``cachetools`` container.
"""

from __future__ import annotations

import threading

import structlog
from cachetools import Cache, LRUCache, TTLCache

from asidecache.interfaces.storage_provider import IStorageProvider
from asidecache.utils.errors import CacheMissError

logger = structlog.get_logger(logger_name=__name__)


class MemoryStorageProvider(IStorageProvider):
    """In-memory byte store backed by ``cachetools``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds applied to every entry.  ``None`` keeps
        entries until they are evicted for space or invalidated.
    """

    def __init__(self, max_size: int = 1000, ttl: float | None = None) -> None:
        if ttl is None:
            self._cache: Cache[str, bytes] = LRUCache(maxsize=max_size)
        else:
            self._cache = TTLCache(maxsize=max_size, ttl=ttl)
        # cachetools containers are not thread-safe on their own.
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # IStorageProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> bytes:
        """Return the payload for *key* or raise :class:`CacheMissError`."""
        with self._lock:
            data = self._cache.get(key)
        if data is None:
            logger.debug("storage_miss", key=key)
            raise CacheMissError(f"no entry for key '{key}'", provider_name=self.get_provider_name())
        logger.debug("storage_hit", key=key, size=len(data))
        return data

    async def set(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, replacing any previous payload."""
        with self._lock:
            self._cache[key] = bytes(data)
        logger.debug("storage_set", key=key, size=len(data))

    async def invalidate(self, key: str) -> None:
        """Remove *key* (no-op if absent)."""
        with self._lock:
            self._cache.pop(key, None)
        logger.debug("storage_invalidate", key=key)

    def get_provider_name(self) -> str:
        return "memory"

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache
