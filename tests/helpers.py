"""Test doubles shared by unit and integration tests."""

from __future__ import annotations

from typing import Any

from asidecache.interfaces.encodable import IBinaryEncoder
from asidecache.interfaces.logger_provider import ILogger
from asidecache.models.value import JSONModel


class User(JSONModel):
    """Small cached value used across the suite."""

    id: int = 0
    name: str = ""


class RecordingLogger(ILogger):
    """ILogger that keeps every rendered line for assertions."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, fmt: str, *args: Any) -> None:
        self.lines.append(fmt % args)


class UnmarshalableValue(IBinaryEncoder):
    """Value whose serialisation always fails."""

    def marshal_binary(self) -> bytes:
        raise ValueError("cannot encode")

    def unmarshal_binary(self, data: bytes) -> None:
        raise ValueError("cannot decode")
