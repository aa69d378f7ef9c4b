"""Builds storage providers and clients from CacheSettings."""

from __future__ import annotations

from asidecache.client import CacheClient
from asidecache.config.settings import CacheSettings
from asidecache.interfaces.logger_provider import ILogger
from asidecache.interfaces.metrics_provider import IMetrics
from asidecache.interfaces.storage_provider import IStorageProvider
from asidecache.providers.logger.structlog_logger import StructlogLogger
from asidecache.providers.storage.memory_storage import MemoryStorageProvider
from asidecache.providers.storage.sqlite_storage import SQLiteStorageProvider
from asidecache.utils.errors import ConfigurationError
from asidecache.utils.logging import configure_logging_from_settings


async def build_storage(settings: CacheSettings) -> IStorageProvider:
    """Instantiate (and, for SQLite, initialize) the configured backend."""
    if settings.storage_backend == "memory":
        return MemoryStorageProvider(max_size=settings.memory_max_size, ttl=settings.memory_ttl)
    if settings.storage_backend == "sqlite":
        provider = SQLiteStorageProvider(db_path=settings.sqlite_path)
        await provider.initialize()
        return provider
    raise ConfigurationError(f"unknown storage backend: {settings.storage_backend!r}")


async def build_client(
    settings: CacheSettings | None = None,
    logger: ILogger | None = None,
    metrics: IMetrics | None = None,
) -> CacheClient:
    """Create a CacheClient wired to the backend named in *settings*.

    Logging is configured from the settings' logging fields.  Without an
    explicit *logger* the client reports failures through structlog.
    """
    if settings is None:
        settings = CacheSettings()
    configure_logging_from_settings(settings)
    if logger is None:
        logger = StructlogLogger()
    storage = await build_storage(settings)
    return CacheClient.from_settings(storage, settings=settings, logger=logger, metrics=metrics)
