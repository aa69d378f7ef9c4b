"""SQLite-backed storage provider.

Persists cache payloads to a local SQLite database at
``data/cache.db``.  Uses ``aiosqlite`` for async I/O.  Driver errors are
re-raised as :class:`StorageError` so callers see one failure type
regardless of backend.
"""

from __future__ import annotations

from pathlib import Path

import aiosqlite
import structlog

from asidecache.interfaces.storage_provider import IStorageProvider
from asidecache.utils.errors import CacheMissError, StorageError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_DB_PATH = Path("data/cache.db")

_CREATE_TABLE_SQL = """\
CREATE TABLE IF NOT EXISTS cache_entries (
    cache_key   TEXT PRIMARY KEY,
    payload     BLOB NOT NULL,
    updated_at  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
);
"""

_UPSERT_SQL = """\
INSERT INTO cache_entries (cache_key, payload)
VALUES (?, ?)
ON CONFLICT(cache_key)
DO UPDATE SET payload    = excluded.payload,
              updated_at = strftime('%Y-%m-%dT%H:%M:%fZ', 'now');
"""

_SELECT_SQL = "SELECT payload FROM cache_entries WHERE cache_key = ?;"

_DELETE_SQL = "DELETE FROM cache_entries WHERE cache_key = ?;"


class SQLiteStorageProvider(IStorageProvider):
    """SQLite-backed byte store.

    Call :meth:`initialize` once before first use to create the table.
    Each operation opens its own connection, so one provider can be shared
    by many concurrent tasks.
    """

    def __init__(self, db_path: str | Path = _DEFAULT_DB_PATH) -> None:
        self._db_path = Path(db_path)

    async def initialize(self) -> None:
        """Create the cache table if it doesn't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(str(self._db_path)) as db:
            await db.execute(_CREATE_TABLE_SQL)
            await db.commit()
        logger.info("cache_db_initialized", path=str(self._db_path))

    async def get(self, key: str) -> bytes:
        """Return the payload for *key* or raise :class:`CacheMissError`."""
        try:
            async with aiosqlite.connect(str(self._db_path)) as db:
                cursor = await db.execute(_SELECT_SQL, (key,))
                row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            raise StorageError(f"get '{key}' failed: {exc}", provider_name=self.get_provider_name()) from exc

        if row is None:
            logger.debug("storage_miss", key=key)
            raise CacheMissError(f"no entry for key '{key}'", provider_name=self.get_provider_name())
        return bytes(row[0])

    async def set(self, key: str, data: bytes) -> None:
        """Upsert *data* under *key*."""
        try:
            async with aiosqlite.connect(str(self._db_path)) as db:
                await db.execute(_UPSERT_SQL, (key, bytes(data)))
                await db.commit()
        except aiosqlite.Error as exc:
            raise StorageError(f"set '{key}' failed: {exc}", provider_name=self.get_provider_name()) from exc
        logger.debug("storage_set", key=key, size=len(data))

    async def invalidate(self, key: str) -> None:
        """Delete the row for *key* (no-op if absent)."""
        try:
            async with aiosqlite.connect(str(self._db_path)) as db:
                await db.execute(_DELETE_SQL, (key,))
                await db.commit()
        except aiosqlite.Error as exc:
            raise StorageError(
                f"invalidate '{key}' failed: {exc}", provider_name=self.get_provider_name()
            ) from exc
        logger.debug("storage_invalidate", key=key)

    async def count(self) -> int:
        """Return the number of stored entries."""
        async with aiosqlite.connect(str(self._db_path)) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM cache_entries")
            row = await cursor.fetchone()
        return int(row[0]) if row else 0

    def get_provider_name(self) -> str:
        return "sqlite"
