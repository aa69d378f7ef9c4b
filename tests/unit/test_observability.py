"""Unit tests for logger and metrics providers and the logging setup."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import structlog

from asidecache.interfaces.metrics_provider import CacheEvent
from asidecache.providers.logger.noop_logger import NOOP_LOGGER, NoopLogger
from asidecache.providers.logger.structlog_logger import StructlogLogger
from asidecache.providers.metrics.counter_metrics import CounterMetrics
from asidecache.providers.metrics.noop_metrics import NOOP_METRICS, NoopMetrics
from asidecache.utils.logging import configure_logging, get_logger


class TestNoopProviders:
    def test_noop_logger_accepts_any_arguments(self) -> None:
        assert isinstance(NOOP_LOGGER, NoopLogger)
        assert NOOP_LOGGER.log("key: '%s' error: %s", "k", RuntimeError("x")) is None

    def test_noop_metrics_accepts_every_event(self) -> None:
        assert isinstance(NOOP_METRICS, NoopMetrics)
        for event in CacheEvent:
            assert NOOP_METRICS.track(event) is None


class TestStructlogLogger:
    def test_renders_format_and_args(self) -> None:
        bound = MagicMock()
        logger = StructlogLogger(logger=bound)

        logger.log("cache get error. key: '%s' error: %s", "user:9", TimeoutError("timed out"))

        bound.warning.assert_called_once_with(
            "cache_event", message="cache get error. key: 'user:9' error: timed out"
        )

    def test_message_without_args_is_not_formatted(self) -> None:
        bound = MagicMock()
        StructlogLogger(logger=bound, level="error").log("100% cached")
        bound.error.assert_called_once_with("cache_event", message="100% cached")

    def test_default_logger_is_structlog(self) -> None:
        logger = StructlogLogger()
        logger.log("smoke %s", "test")  # should not raise


class TestCounterMetrics:
    def test_counts_each_event_kind(self) -> None:
        metrics = CounterMetrics()
        metrics.track(CacheEvent.HIT)
        metrics.track(CacheEvent.HIT)
        metrics.track(CacheEvent.MISS)

        assert metrics.count(CacheEvent.HIT) == 2
        assert metrics.count(CacheEvent.MISS) == 1
        assert metrics.count(CacheEvent.SET_ERROR) == 0
        assert metrics.total() == 3

    def test_snapshot_lists_every_event(self) -> None:
        metrics = CounterMetrics()
        metrics.track(CacheEvent.MARSHAL_ERROR)
        snapshot = metrics.snapshot()
        assert set(snapshot) == {event.value for event in CacheEvent}
        assert snapshot["marshal_error"] == 1
        assert snapshot["hit"] == 0

    def test_reset_clears_counts(self) -> None:
        metrics = CounterMetrics()
        metrics.track(CacheEvent.HIT)
        metrics.reset()
        assert metrics.total() == 0

    def test_concurrent_tracking_from_threads(self) -> None:
        metrics = CounterMetrics()

        def worker() -> None:
            for _ in range(1000):
                metrics.track(CacheEvent.HIT)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert metrics.count(CacheEvent.HIT) == 8000

    def test_log_events_emits_debug_event(self) -> None:
        metrics = CounterMetrics(log_events=True)
        metrics._logger = MagicMock()
        metrics.track(CacheEvent.MISS)
        metrics._logger.debug.assert_called_once_with("cache_metric", cache_event="miss")


class TestConfigureLogging:
    def test_configure_returns_logger(self) -> None:
        logger = configure_logging(log_level="DEBUG", app_env="development")
        assert logger is not None
        assert structlog.is_configured()

    def test_json_output_in_production(self, capsys) -> None:
        configure_logging(log_level="INFO", app_env="production")
        get_logger("test").info("json_check", key="user:1")
        out = capsys.readouterr().out
        assert '"event": "json_check"' in out
        assert '"key": "user:1"' in out
        configure_logging(log_level="INFO", app_env="development")
