"""ILogger adapter that writes through structlog.

The client formats its messages printf-style; this adapter renders the
line and emits it as a single structlog event so it flows through the
same processor chain (timestamps, JSON in production) as everything else.
"""

from __future__ import annotations

from typing import Any

import structlog

from asidecache.interfaces.logger_provider import ILogger
from asidecache.utils.logging import get_logger


class StructlogLogger(ILogger):
    """Forward cache log lines to a structlog logger.

    Parameters
    ----------
    logger:
        Logger to write to.  Defaults to one named after this module.
    level:
        structlog method used for every line (``"warning"`` by default,
        since the client only logs failures).
    """

    def __init__(
        self,
        logger: structlog.BoundLogger | None = None,
        level: str = "warning",
    ) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)
        self._level = level

    def log(self, fmt: str, *args: Any) -> None:
        message = fmt % args if args else fmt
        getattr(self._logger, self._level)("cache_event", message=message)
