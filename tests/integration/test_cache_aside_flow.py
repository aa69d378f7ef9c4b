"""End-to-end cache-aside flows against real storage providers.

Covers the four canonical scenarios:
    A. miss → build → background write lands in storage
    B. corrupt payload → decode error + single invalidation
    C. builder failure → BuildError, nothing written
    D. storage read failure → error passed through, builder never runs
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from asidecache.client import CacheClient
from asidecache.interfaces.builder import BuilderFunc
from asidecache.interfaces.metrics_provider import CacheEvent
from asidecache.providers.metrics.counter_metrics import CounterMetrics
from asidecache.providers.storage.memory_storage import MemoryStorageProvider
from asidecache.providers.storage.sqlite_storage import SQLiteStorageProvider
from asidecache.utils.errors import BuildError, CacheMissError, DecodeError, StorageError
from tests.helpers import RecordingLogger, User


@pytest_asyncio.fixture
async def sqlite_storage(tmp_path: Path) -> SQLiteStorageProvider:
    provider = SQLiteStorageProvider(db_path=tmp_path / "cache.db")
    await provider.initialize()
    return provider


def _counting_builder(calls: list[str]) -> BuilderFunc:
    async def load_user(key: str, dest: User) -> None:
        calls.append(key)
        dest.id = int(key.split(":")[1])
        dest.name = "Ann"

    return BuilderFunc(load_user)


class TestScenarios:
    @pytest.mark.asyncio
    async def test_scenario_a_miss_then_write_back(
        self, memory_storage: MemoryStorageProvider, metrics: CounterMetrics
    ) -> None:
        client = CacheClient(memory_storage, metrics=metrics)
        calls: list[str] = []

        dest = User()
        await client.get("user:42", dest, _counting_builder(calls))
        assert dest == User(id=42, name="Ann")

        await client.drain()
        assert await memory_storage.get("user:42") == User(id=42, name="Ann").marshal_binary()
        assert metrics.count(CacheEvent.MISS) == 1

        # Second read is served from storage without rebuilding.
        again = User()
        await client.get("user:42", again, _counting_builder(calls))
        assert again == User(id=42, name="Ann")
        assert calls == ["user:42"]
        assert metrics.count(CacheEvent.HIT) == 1

    @pytest.mark.asyncio
    async def test_scenario_b_corrupt_payload_is_invalidated(
        self, memory_storage: MemoryStorageProvider, metrics: CounterMetrics
    ) -> None:
        await memory_storage.set("user:42", b'{"id": "forty-two"}')
        spy = AsyncMock(wraps=memory_storage.invalidate)
        memory_storage.invalidate = spy  # type: ignore[method-assign]
        client = CacheClient(memory_storage, metrics=metrics)
        calls: list[str] = []

        with pytest.raises(DecodeError):
            await client.get("user:42", User(), _counting_builder(calls))

        spy.assert_awaited_once_with("user:42")
        assert calls == []
        with pytest.raises(CacheMissError):
            await memory_storage.get("user:42")

        # The next read misses cleanly and rebuilds.
        dest = User()
        await client.get("user:42", dest, _counting_builder(calls))
        assert dest.name == "Ann"

    @pytest.mark.asyncio
    async def test_scenario_c_build_failure_writes_nothing(
        self, memory_storage: MemoryStorageProvider, metrics: CounterMetrics
    ) -> None:
        logger = RecordingLogger()
        client = CacheClient(memory_storage, logger=logger, metrics=metrics)

        async def unreachable(key: str, dest: User) -> None:
            raise ConnectionError("db unreachable")

        with pytest.raises(BuildError) as exc_info:
            await client.get("user:7", User(), BuilderFunc(unreachable))

        assert isinstance(exc_info.value.cause, ConnectionError)
        assert str(exc_info.value.cause) == "db unreachable"

        await client.drain()
        assert "user:7" not in memory_storage
        assert metrics.count(CacheEvent.BUILD_ERROR) == 1
        assert logger.lines == ["cache miss build error. key: 'user:7' error: db unreachable"]

    @pytest.mark.asyncio
    async def test_scenario_d_storage_timeout_passes_through(self, metrics: CounterMetrics) -> None:
        storage = MemoryStorageProvider()
        timeout = TimeoutError("read timed out")
        storage.get = AsyncMock(side_effect=timeout)  # type: ignore[method-assign]
        storage.set = AsyncMock()  # type: ignore[method-assign]
        client = CacheClient(storage, metrics=metrics)
        calls: list[str] = []

        with pytest.raises(TimeoutError) as exc_info:
            await client.get("user:9", User(), _counting_builder(calls))

        assert exc_info.value is timeout
        assert calls == []
        await client.drain()
        storage.set.assert_not_awaited()
        assert metrics.count(CacheEvent.GET_ERROR) == 1


class TestSQLiteBackedFlow:
    @pytest.mark.asyncio
    async def test_round_trip_through_sqlite(self, sqlite_storage: SQLiteStorageProvider) -> None:
        metrics = CounterMetrics()
        client = CacheClient(sqlite_storage, metrics=metrics)
        calls: list[str] = []

        await client.get("user:3", User(), _counting_builder(calls))
        await client.drain()

        dest = User()
        await client.get("user:3", dest, _counting_builder(calls))
        assert dest == User(id=3, name="Ann")
        assert calls == ["user:3"]
        assert metrics.snapshot()["miss"] == 1
        assert metrics.snapshot()["hit"] == 1

    @pytest.mark.asyncio
    async def test_many_concurrent_misses_settle_to_zero_pending(
        self, sqlite_storage: SQLiteStorageProvider
    ) -> None:
        client = CacheClient(sqlite_storage)
        calls: list[str] = []

        await asyncio.gather(*(client.get(f"user:{i}", User(), _counting_builder(calls)) for i in range(20)))
        await client.drain()

        assert client.pending_writes == 0
        assert await sqlite_storage.count() == 20

    @pytest.mark.asyncio
    async def test_invalidate_then_rebuild(self, sqlite_storage: SQLiteStorageProvider) -> None:
        client = CacheClient(sqlite_storage)
        calls: list[str] = []

        await client.set("user:5", User(id=5, name="Old"))
        await client.invalidate("user:5")

        dest = User()
        await client.get("user:5", dest, _counting_builder(calls))
        assert dest == User(id=5, name="Ann")
        assert calls == ["user:5"]


class TestStorageErrorTypes:
    @pytest.mark.asyncio
    async def test_storage_error_is_not_mistaken_for_build_error(self, metrics: CounterMetrics) -> None:
        storage = MemoryStorageProvider()
        storage.get = AsyncMock(side_effect=StorageError("down", provider_name="memory"))  # type: ignore[method-assign]
        client = CacheClient(storage, metrics=metrics)

        with pytest.raises(StorageError) as exc_info:
            await client.get("k", User(), _counting_builder([]))

        assert not isinstance(exc_info.value, BuildError)
        assert str(exc_info.value) == "[memory] down"
