"""Cache value types implementing IBinaryEncoder."""

from asidecache.models.value import BytesValue, JSONModel

__all__ = ["BytesValue", "JSONModel"]
