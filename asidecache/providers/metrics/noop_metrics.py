"""Metrics sink that discards every event."""

from __future__ import annotations

from asidecache.interfaces.metrics_provider import CacheEvent, IMetrics


class NoopMetrics(IMetrics):
    def track(self, event: CacheEvent) -> None:
        pass


# Shared default used by every client constructed without a metrics sink.
NOOP_METRICS = NoopMetrics()
