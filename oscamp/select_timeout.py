"""Racing awaitables against each other and against a deadline."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def with_timeout(awaitable: Awaitable[T], timeout_ms: int) -> T | None:
    """Return the result of ``awaitable`` if it finishes within ``timeout_ms``, else None."""
    try:
        return await asyncio.wait_for(awaitable, timeout_ms / 1000)
    except asyncio.TimeoutError:
        return None


async def race(f1: Awaitable[T], f2: Awaitable[T]) -> T:
    """Return the result of whichever awaitable finishes first; cancel the other."""
    first = asyncio.ensure_future(f1)
    second = asyncio.ensure_future(f2)
    try:
        done, _ = await asyncio.wait(
            {first, second}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in (first, second):
            if not task.done():
                task.cancel()
        await asyncio.gather(first, second, return_exceptions=True)
    winner = first if first in done else second
    return winner.result()