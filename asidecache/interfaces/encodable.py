"""Abstract base class for values that can round-trip through bytes.

The cache client never inspects a value.  It only asks the value to
serialise itself before a write and to repopulate itself from stored
bytes on a hit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IBinaryEncoder(ABC):
    """Contract for self-serialising cache values.

    The client relies on duck typing, so any object exposing these two
    methods works; subclassing documents the intent.
    """

    @abstractmethod
    def marshal_binary(self) -> bytes:
        """Serialise the receiver to bytes."""

    @abstractmethod
    def unmarshal_binary(self, data: bytes) -> None:
        """Populate the receiver in place from *data*.

        Raises
        ------
        Exception
            Any exception signals a malformed or incompatible payload.
        """
