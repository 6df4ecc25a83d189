"""Running work concurrently as asyncio tasks."""

from __future__ import annotations

import asyncio


async def _square(i: int) -> int:
    return i * i


async def concurrent_squares(n: int) -> list[int]:
    """Compute ``i * i`` for each ``i`` in ``range(n)`` in separate tasks, in order."""
    tasks = [asyncio.create_task(_square(i)) for i in range(n)]
    return [await task for task in tasks]


async def parallel_sleep_tasks(n: int, duration_ms: int) -> list[int]:
    """Run ``n`` tasks that each sleep ``duration_ms`` and return their id; sorted ids."""

    async def sleeper(ident: int) -> int:
        await asyncio.sleep(duration_ms / 1000)
        return ident

    tasks = [asyncio.create_task(sleeper(i)) for i in range(n)]
    return sorted(await asyncio.gather(*tasks))