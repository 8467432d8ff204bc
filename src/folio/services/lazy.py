"""Lazy, memoized, single-flight async value.

``LazyResult`` runs its loader at most once per instance. The first
caller starts the load as a task; callers arriving while it is in flight
await the same task; once it finishes the value is kept for good.

There is no await between checking and setting the state, so on a
single event loop the not-started -> in-flight transition happens once
no matter how many callers race for it.
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum


class LoadState(Enum):
    """Lifecycle of a lazy value."""

    NOT_STARTED = "not-started"
    IN_FLIGHT = "in-flight"
    RESOLVED = "resolved"


class LazyResult[T]:
    """Hold the outcome of a one-shot async loader.

    The loader is expected to handle its own failures and always return a
    value. Callers that get cancelled while waiting do not cancel the load.
    """

    def __init__(self, loader: Callable[[], Awaitable[T]]) -> None:
        self._loader = loader
        self._state = LoadState.NOT_STARTED
        self._task: asyncio.Future[T] | None = None
        self._value: T | None = None

    @property
    def state(self) -> LoadState:
        return self._state

    async def get(self) -> T:
        """Return the loaded value, starting the load on first use."""
        if self._state is LoadState.RESOLVED:
            return self._value  # type: ignore[return-value]

        if self._task is None:
            self._task = asyncio.ensure_future(self._loader())
            self._task.add_done_callback(self._settle)
            self._state = LoadState.IN_FLIGHT

        return await asyncio.shield(self._task)

    def _settle(self, task: asyncio.Future[T]) -> None:
        """Keep the result once the shared task finishes."""
        if task.cancelled() or task.exception() is not None:
            return
        self._value = task.result()
        self._state = LoadState.RESOLVED
