"""Metrics providers.

NoopMetrics discards events and is the client's default.
CounterMetrics keeps an in-process tally per event kind.
"""

from asidecache.providers.metrics.counter_metrics import CounterMetrics
from asidecache.providers.metrics.noop_metrics import NOOP_METRICS, NoopMetrics

__all__ = ["NOOP_METRICS", "CounterMetrics", "NoopMetrics"]
