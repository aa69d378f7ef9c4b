"""Cache-aside client.

Given a key, :meth:`CacheClient.get` returns the stored value or, on a
miss, runs a caller-supplied builder, hands the fresh value back at once
and persists it in the background for future reads.

# ─── HOW A GET FLOWS ──────────────────────────────────────────────────
#
#   get(key, dest, builder)
#     └─ storage.get(key)
#          ├─ bytes ──────────→ dest.unmarshal_binary()
#          │                      ├─ ok ──────→ HIT
#          │                      └─ error ───→ UNMARSHAL_ERROR, invalidate(key), raise
#          ├─ CacheMissError ─→ MISS, builder.build(key, dest)
#          │                      ├─ ok ──────→ serialise dest, spawn write of the bytes
#          │                      └─ error ───→ BUILD_ERROR, raise BuildError
#          └─ other error ────→ GET_ERROR, raise unchanged
#
# The write task runs on its own asyncio.Task, so cancelling the caller
# after get() returns never cancels the write.  Concurrent misses on the
# same key each build and each write; there is no call coalescing.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

from asidecache.interfaces.builder import IBuilder
from asidecache.interfaces.encodable import IBinaryEncoder
from asidecache.interfaces.logger_provider import ILogger
from asidecache.interfaces.metrics_provider import CacheEvent, IMetrics
from asidecache.interfaces.storage_provider import IStorageProvider
from asidecache.providers.logger.noop_logger import NOOP_LOGGER
from asidecache.providers.metrics.noop_metrics import NOOP_METRICS
from asidecache.utils.concurrency import PendingWriteCounter, WriteTaskSet
from asidecache.utils.errors import BuildError, CacheMissError, ConfigurationError

if TYPE_CHECKING:
    from asidecache.config.settings import CacheSettings

DEFAULT_WRITE_TIMEOUT = 3.0


class CacheClient:
    """A cache instance in front of one storage backend.

    One client can serve a whole system or a single use-case/type.  If it
    is shared between unrelated uses, the caller must keep keys unique;
    no namespacing is applied.

    Configuration is fixed at construction and exposed read-only.

    Parameters
    ----------
    storage:
        The storage backend (required).
    logger:
        Sink for failure messages.  Defaults to a no-op logger.
    metrics:
        Sink for hit/miss/error events.  Defaults to a no-op sink.
    write_timeout:
        Seconds a single cache write may take.  ``None`` or a non-positive
        value selects the default of 3 seconds.
    """

    def __init__(
        self,
        storage: IStorageProvider,
        logger: ILogger | None = None,
        metrics: IMetrics | None = None,
        write_timeout: float | None = None,
    ) -> None:
        if storage is None:
            raise ConfigurationError("CacheClient requires a storage backend")

        self._storage = storage
        self._logger: ILogger = logger if logger is not None else NOOP_LOGGER
        self._metrics: IMetrics = metrics if metrics is not None else NOOP_METRICS
        self._write_timeout = (
            float(write_timeout) if write_timeout is not None and write_timeout > 0 else DEFAULT_WRITE_TIMEOUT
        )
        self._pending = PendingWriteCounter()
        self._writes = WriteTaskSet()

    @classmethod
    def from_settings(
        cls,
        storage: IStorageProvider,
        settings: CacheSettings | None = None,
        logger: ILogger | None = None,
        metrics: IMetrics | None = None,
    ) -> CacheClient:
        """Create a client whose write timeout comes from :class:`CacheSettings`."""
        if settings is None:
            from asidecache.config.settings import CacheSettings

            settings = CacheSettings()
        return cls(storage, logger=logger, metrics=metrics, write_timeout=settings.write_timeout)

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def storage(self) -> IStorageProvider:
        return self._storage

    @property
    def logger(self) -> ILogger:
        """The configured logger, or the shared no-op logger."""
        return self._logger

    @property
    def metrics(self) -> IMetrics:
        """The configured metrics sink, or the shared no-op sink."""
        return self._metrics

    @property
    def write_timeout(self) -> float:
        return self._write_timeout

    @property
    def pending_writes(self) -> int:
        """Number of writes scheduled but not yet settled."""
        return self._pending.value

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get(self, key: str, dest: IBinaryEncoder, builder: IBuilder) -> None:
        """Populate *dest* with the value for *key*.

        On a miss the builder fills *dest*, and the value is written back
        to storage in the background; this method does not wait for that
        write.

        Raises
        ------
        BuildError
            The builder failed.  The original exception is ``.cause``.
        Exception
            Any non-miss storage error, or the decode error for a corrupt
            payload, is re-raised unchanged.
        """
        try:
            data = await self._storage.get(key)
        except CacheMissError:
            self._metrics.track(CacheEvent.MISS)
            await self._on_cache_miss(key, dest, builder)
            return
        except Exception as exc:
            self._logger.log("cache get error. key: '%s' error: %s", key, exc)
            self._metrics.track(CacheEvent.GET_ERROR)
            raise

        await self._on_cache_hit(key, dest, data)

    async def set(self, key: str, value: IBinaryEncoder) -> None:
        """Write *value* under *key*.

        Generally there is no need to call this; :meth:`get` does it after
        a successful build.  The write runs on its own task, so cancelling
        the caller does not abort it.  Failures are reported only through
        the logger and metrics.
        """
        data = self._marshal(key, value)
        if data is None:
            return

        self._pending.increment()
        task = self._writes.spawn(self._store(key, data), name=f"asidecache-set:{key}")
        await asyncio.shield(task)

    async def invalidate(self, key: str) -> None:
        """Remove any entry for *key* from storage."""
        try:
            await self._storage.invalidate(key)
        except Exception as exc:
            self._logger.log("cache invalidate error. key: '%s' error: %s", key, exc)
            self._metrics.track(CacheEvent.INVALIDATE_ERROR)
            raise

    async def drain(self) -> None:
        """Wait for every background write spawned so far to settle."""
        await self._writes.drain()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _on_cache_miss(self, key: str, dest: IBinaryEncoder, builder: IBuilder) -> None:
        try:
            await builder.build(key, dest)
        except Exception as exc:
            self._logger.log("cache miss build error. key: '%s' error: %s", key, exc)
            self._metrics.track(CacheEvent.BUILD_ERROR)
            raise BuildError(exc) from exc

        # serialise now: the caller may reuse or edit dest once get() returns
        data = self._marshal(key, dest)
        if data is None:
            return

        self._pending.increment()
        self._writes.spawn(self._store(key, data), name=f"asidecache-writeback:{key}")

    async def _on_cache_hit(self, key: str, dest: IBinaryEncoder, data: bytes) -> None:
        try:
            dest.unmarshal_binary(data)
        except Exception as exc:
            self._logger.log("cache hit unmarshal error. key: '%s' error: %s", key, exc)
            self._metrics.track(CacheEvent.UNMARSHAL_ERROR)

            # remove the bad payload; a failure here is already logged and tracked
            with contextlib.suppress(Exception):
                await self.invalidate(key)

            raise

        self._metrics.track(CacheEvent.HIT)

    def _marshal(self, key: str, value: IBinaryEncoder) -> bytes | None:
        """Serialise *value*, or log and track the failure and return ``None``."""
        try:
            return value.marshal_binary()
        except Exception as exc:
            self._logger.log("cache update marshal error. key: '%s' error: %s", key, exc)
            self._metrics.track(CacheEvent.MARSHAL_ERROR)
            return None

    async def _store(self, key: str, data: bytes) -> None:
        """Write one payload within the write timeout; releases its pending-write slot on every path."""
        try:
            write = asyncio.ensure_future(self._storage.set(key, data))
            try:
                done, _ = await asyncio.wait({write}, timeout=self._write_timeout)
            except asyncio.CancelledError:
                write.cancel()
                raise

            if not done:
                write.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await write
                self._logger.log(
                    "cache update set error. key: '%s' error: %s", key, f"timed out after {self._write_timeout}s"
                )
                self._metrics.track(CacheEvent.SET_ERROR)
                return

            exc = write.exception()
            if exc is not None:
                self._logger.log("cache update set error. key: '%s' error: %s", key, exc)
                self._metrics.track(CacheEvent.SET_ERROR)
        finally:
            self._pending.decrement()
