"""Logger capability consumed by the cache client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Fire-and-forget sink for printf-style log lines."""

    @abstractmethod
    def log(self, fmt: str, *args: Any) -> None:
        """Record one message built from *fmt* and *args*."""
