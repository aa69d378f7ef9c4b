"""Utility modules for asidecache.

- **errors** -- Exception hierarchy rooted at AsideCacheError; the miss
  signal, storage failures, build failures and codec failures each get
  their own subclass so callers never need string matching.
- **concurrency** -- The pending-write counter and the task set that owns
  detached cache writes.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Exception hierarchy ---------------------------------------------------
from asidecache.utils.errors import (
    AsideCacheError,
    BuildError,
    CacheMissError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    StorageError,
)

# -- Detached write bookkeeping --------------------------------------------
from asidecache.utils.concurrency import PendingWriteCounter, WriteTaskSet

# -- Structured logging setup ----------------------------------------------
from asidecache.utils.logging import configure_logging, configure_logging_from_settings, get_logger

__all__ = [
    "AsideCacheError",
    "BuildError",
    "CacheMissError",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "PendingWriteCounter",
    "StorageError",
    "WriteTaskSet",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
