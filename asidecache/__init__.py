"""asidecache: a cache-aside access layer for asyncio applications.

Wrap any byte-oriented key/value backend in a :class:`CacheClient` and
read through it with a builder that computes values on a miss::

    client = CacheClient(MemoryStorageProvider(), metrics=CounterMetrics())
    user = User()
    await client.get("user:42", user, BuilderFunc(load_user))
"""

from asidecache.client import DEFAULT_WRITE_TIMEOUT, CacheClient
from asidecache.interfaces import (
    BuilderFunc,
    CacheEvent,
    IBinaryEncoder,
    IBuilder,
    ILogger,
    IMetrics,
    IStorageProvider,
)
from asidecache.models import BytesValue, JSONModel
from asidecache.providers.logger import NOOP_LOGGER, NoopLogger, StructlogLogger
from asidecache.providers.metrics import NOOP_METRICS, CounterMetrics, NoopMetrics
from asidecache.providers.storage import MemoryStorageProvider, SQLiteStorageProvider
from asidecache.utils.errors import (
    AsideCacheError,
    BuildError,
    CacheMissError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    StorageError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_WRITE_TIMEOUT",
    "NOOP_LOGGER",
    "NOOP_METRICS",
    "AsideCacheError",
    "BuildError",
    "BuilderFunc",
    "BytesValue",
    "CacheClient",
    "CacheEvent",
    "CacheMissError",
    "ConfigurationError",
    "CounterMetrics",
    "DecodeError",
    "EncodeError",
    "IBinaryEncoder",
    "IBuilder",
    "ILogger",
    "IMetrics",
    "IStorageProvider",
    "JSONModel",
    "MemoryStorageProvider",
    "NoopLogger",
    "NoopMetrics",
    "SQLiteStorageProvider",
    "StorageError",
    "StructlogLogger",
    "__version__",
]
