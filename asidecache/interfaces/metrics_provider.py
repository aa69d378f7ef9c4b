"""Metrics capability consumed by the cache client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class CacheEvent(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """Events the client reports to its metrics sink."""

    HIT = "hit"
    MISS = "miss"
    GET_ERROR = "get_error"
    BUILD_ERROR = "build_error"
    UNMARSHAL_ERROR = "unmarshal_error"
    SET_ERROR = "set_error"
    MARSHAL_ERROR = "marshal_error"
    INVALIDATE_ERROR = "invalidate_error"


class IMetrics(ABC):
    """Fire-and-forget sink for cache events."""

    @abstractmethod
    def track(self, event: CacheEvent) -> None:
        """Record one occurrence of *event*."""
