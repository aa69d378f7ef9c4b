"""Storage providers.

MemoryStorageProvider keeps payloads in a ``cachetools`` cache inside the
current process; it is fast but not shared across workers.
SQLiteStorageProvider persists payloads to a local SQLite file via
``aiosqlite`` and survives restarts.  For multi-host deployments, add a
Redis or memcached adapter implementing IStorageProvider; the client does
not change.
"""

from asidecache.providers.storage.memory_storage import MemoryStorageProvider
from asidecache.providers.storage.sqlite_storage import SQLiteStorageProvider

__all__ = ["MemoryStorageProvider", "SQLiteStorageProvider"]
