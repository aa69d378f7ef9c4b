"""Logger that discards every message."""

from __future__ import annotations

from typing import Any

from asidecache.interfaces.logger_provider import ILogger


class NoopLogger(ILogger):
    def log(self, fmt: str, *args: Any) -> None:
        pass


# Shared default used by every client constructed without a logger.
NOOP_LOGGER = NoopLogger()
