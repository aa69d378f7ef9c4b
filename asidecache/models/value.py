"""Ready-made cache value types.

The client accepts any object with ``marshal_binary`` / ``unmarshal_binary``.
These two cover the common cases:

    JSONModel   → subclass it to cache a Pydantic v2 model as JSON bytes
    BytesValue  → cache an opaque payload unchanged

Unlike most models in this package family, JSONModel must stay mutable:
the client hands the caller's instance to the builder and to
``unmarshal_binary`` and expects it to be filled in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from asidecache.interfaces.encodable import IBinaryEncoder
from asidecache.utils.errors import DecodeError, EncodeError


class JSONModel(BaseModel, IBinaryEncoder):
    """Pydantic model that serialises itself to and from UTF-8 JSON.

    Example::

        class User(JSONModel):
            id: int = 0
            name: str = ""

        user = User()
        await client.get("user:42", user, BuilderFunc(load_user))
    """

    def marshal_binary(self) -> bytes:
        try:
            return self.model_dump_json().encode("utf-8")
        except PydanticSerializationError as exc:
            raise EncodeError(f"{type(self).__name__}: {exc}") from exc

    def unmarshal_binary(self, data: bytes) -> None:
        try:
            parsed = type(self).model_validate_json(data)
        except ValidationError as exc:
            raise DecodeError(f"{type(self).__name__}: {exc}") from exc
        # Copy onto the receiver so references held by the caller see the value.
        for name in type(self).model_fields:
            setattr(self, name, getattr(parsed, name))


class BytesValue(IBinaryEncoder):
    """Opaque byte payload stored and returned as-is."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = data

    def marshal_binary(self) -> bytes:
        return bytes(self.data)

    def unmarshal_binary(self, data: bytes) -> None:
        self.data = bytes(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BytesValue):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BytesValue({self.data!r})"
