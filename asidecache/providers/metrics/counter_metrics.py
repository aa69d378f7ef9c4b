"""In-process event counters.

Useful for tests, health endpoints and as a bridge to a real metrics
system: poll :meth:`CounterMetrics.snapshot` and export the numbers.
"""

from __future__ import annotations

import threading
from collections import Counter

import structlog

from asidecache.interfaces.metrics_provider import CacheEvent, IMetrics
from asidecache.utils.logging import get_logger


class CounterMetrics(IMetrics):
    """Thread-safe tally of :class:`CacheEvent` occurrences.

    Parameters
    ----------
    log_events:
        When ``True``, every tracked event is also emitted as a structlog
        debug event.
    """

    def __init__(self, log_events: bool = False) -> None:
        self._counts: Counter[CacheEvent] = Counter()
        self._lock = threading.Lock()
        self._log_events = log_events
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def track(self, event: CacheEvent) -> None:
        with self._lock:
            self._counts[event] += 1
        if self._log_events:
            self._logger.debug("cache_metric", cache_event=event.value)

    def count(self, event: CacheEvent) -> int:
        """Return how many times *event* has been tracked."""
        with self._lock:
            return self._counts[event]

    def snapshot(self) -> dict[str, int]:
        """Return every event kind with its current count (zeros included)."""
        with self._lock:
            return {event.value: self._counts[event] for event in CacheEvent}

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
