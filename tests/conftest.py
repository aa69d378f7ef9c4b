"""Shared pytest fixtures for the asidecache test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from asidecache.client import CacheClient
from asidecache.interfaces.builder import BuilderFunc, IBuilder
from asidecache.interfaces.storage_provider import IStorageProvider
from asidecache.providers.metrics.counter_metrics import CounterMetrics
from asidecache.providers.storage.memory_storage import MemoryStorageProvider
from asidecache.utils.errors import CacheMissError
from tests.helpers import RecordingLogger, User

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_storage() -> IStorageProvider:
    """Mock IStorageProvider that misses by default and accepts writes.

    Override ``mock_storage.get.return_value`` / ``side_effect`` per test.
    """
    mock = MagicMock(spec=IStorageProvider)
    mock.get_provider_name.return_value = "mock-storage"
    mock.get = AsyncMock(side_effect=CacheMissError("no entry", provider_name="mock-storage"))
    mock.set = AsyncMock(return_value=None)
    mock.invalidate = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def memory_storage() -> MemoryStorageProvider:
    return MemoryStorageProvider(max_size=100)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def metrics() -> CounterMetrics:
    return CounterMetrics()


@pytest.fixture
def client(mock_storage: IStorageProvider, recording_logger: RecordingLogger, metrics: CounterMetrics) -> CacheClient:
    return CacheClient(mock_storage, logger=recording_logger, metrics=metrics)


@pytest.fixture
def ann_builder() -> IBuilder:
    """Builder that fills a User with id 42 / name Ann, recording every call."""

    calls: list[str] = []

    async def build(key: str, dest: User) -> None:
        calls.append(key)
        dest.id = 42
        dest.name = "Ann"

    builder = BuilderFunc(build)
    builder.calls = calls  # type: ignore[attr-defined]
    return builder
