"""Public interface definitions for every collaborator of the cache client.

The client depends only on the abstract base classes in this package.
Concrete adapters implement them and are passed in at construction time,
so a backend, a logger or a metrics sink can be swapped without touching
the hit/miss orchestration.

CONCRETE PROVIDER MAP:
    Interface           →  Concrete implementations (in asidecache/providers/)
    ─────────────────────────────────────────────────────────────────────
    IStorageProvider    →  MemoryStorageProvider, SQLiteStorageProvider
    ILogger             →  NoopLogger, StructlogLogger
    IMetrics            →  NoopMetrics, CounterMetrics
    IBinaryEncoder      →  JSONModel, BytesValue (in asidecache/models/)
    IBuilder            →  BuilderFunc (any callable)

Re-exports
----------
IStorageProvider
    Byte-payload storage contract; raises ``CacheMissError`` on absence.
IBuilder, BuilderFunc
    Miss-fill contract and its callable adapter.
IBinaryEncoder
    Self-serialising value contract.
ILogger
    printf-style log sink.
IMetrics, CacheEvent
    Event counter sink and the closed set of events it receives.
"""

from asidecache.interfaces.builder import BuilderFunc, IBuilder
from asidecache.interfaces.encodable import IBinaryEncoder
from asidecache.interfaces.logger_provider import ILogger
from asidecache.interfaces.metrics_provider import CacheEvent, IMetrics
from asidecache.interfaces.storage_provider import IStorageProvider

__all__ = [
    "BuilderFunc",
    "CacheEvent",
    "IBinaryEncoder",
    "IBuilder",
    "ILogger",
    "IMetrics",
    "IStorageProvider",
]
