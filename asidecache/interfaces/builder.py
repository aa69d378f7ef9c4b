"""Builder contract: produces a fresh value for a key on a cache miss."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from asidecache.interfaces.encodable import IBinaryEncoder


class IBuilder(ABC):
    """Contract for miss-fill computations.

    The client calls :meth:`build` at most once per ``get`` and never
    retries it.
    """

    @abstractmethod
    async def build(self, key: str, dest: IBinaryEncoder) -> None:
        """Populate *dest* with the value for *key*.

        Parameters
        ----------
        key:
            The cache key that missed.
        dest:
            The value object to fill in place.
        """


class BuilderFunc(IBuilder):
    """Adapts a plain callable ``fn(key, dest)`` to :class:`IBuilder`.

    Both sync and async callables are accepted; an awaitable result is
    awaited.
    """

    def __init__(self, fn: Callable[[str, IBinaryEncoder], Any]) -> None:
        self._fn = fn

    async def build(self, key: str, dest: IBinaryEncoder) -> None:
        result = self._fn(key, dest)
        if inspect.isawaitable(result):
            await result

    def __repr__(self) -> str:
        return f"BuilderFunc({getattr(self._fn, '__qualname__', self._fn)!r})"
