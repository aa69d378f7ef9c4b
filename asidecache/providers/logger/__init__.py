"""Logger providers.

NoopLogger discards everything and is the client's default.
StructlogLogger forwards each line to structlog as a warning event.
"""

from asidecache.providers.logger.noop_logger import NOOP_LOGGER, NoopLogger
from asidecache.providers.logger.structlog_logger import StructlogLogger

__all__ = ["NOOP_LOGGER", "NoopLogger", "StructlogLogger"]
