"""Async-to-sync bridge utilities.

Lets the synchronous CLI commands drive the async services and
components without caring whether an event loop is already running.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

import nest_asyncio


def run_async_in_sync[T](coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a sync context safely."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    # Re-entering a running loop (e.g. the CLI invoked from a notebook)
    nest_asyncio.apply(loop)
    return loop.run_until_complete(coro)
