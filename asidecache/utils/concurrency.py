"""Concurrency primitives for detached cache writes.

Two pieces live here:

1. **PendingWriteCounter** -- a lock-guarded integer counting writes that
   have been scheduled but not yet settled.  It is purely observational:
   nothing blocks on it and it never throttles callers.

2. **WriteTaskSet** -- spawns write coroutines as independent
   ``asyncio.Task`` objects and holds strong references to them until they
   finish.  The event loop only keeps weak references to tasks, so a
   fire-and-forget task with no other owner can be garbage collected
   mid-flight.
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Coroutine
from typing import Any


class PendingWriteCounter:
    """Thread-safe counter of in-flight cache writes."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        with self._lock:
            self._value -= 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class WriteTaskSet:
    """Owns detached write tasks until they complete.

    Tasks are created with :func:`asyncio.create_task`, so they run under
    their own cancellation scope: cancelling the coroutine that spawned a
    task does not cancel the task.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def spawn(self, coro: Coroutine[Any, Any, None], name: str | None = None) -> asyncio.Task[None]:
        """Schedule *coro* on the running loop and keep it referenced."""
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every task spawned so far (and any they spawn) has settled."""
        while self._tasks:
            # gather() on a snapshot; tasks added meanwhile are picked up next round.
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def __len__(self) -> int:
        return len(self._tasks)
