"""Producer/consumer patterns over bounded asyncio queues."""

from __future__ import annotations

import asyncio

_CLOSED = object()


async def _consume(queue: asyncio.Queue) -> list:
    received = []
    while (item := await queue.get()) is not _CLOSED:
        received.append(item)
    return received


async def producer_consumer(items: list[str]) -> list[str]:
    """Send ``items`` from one task to another and return them in order."""
    queue: asyncio.Queue = asyncio.Queue(maxsize=max(len(items), 1))

    async def produce() -> None:
        for item in items:
            await queue.put(item)
        await queue.put(_CLOSED)

    consumer = asyncio.create_task(_consume(queue))
    producer = asyncio.create_task(produce())
    await producer
    return await consumer


async def fan_in(n_producers: int) -> list[str]:
    """Collect one message from each of ``n_producers`` tasks, sorted."""
    queue: asyncio.Queue = asyncio.Queue(maxsize=max(n_producers, 1))

    async def produce(ident: int) -> None:
        await queue.put(f"producer {ident}: message")

    async def close_when_done(producers: list[asyncio.Task]) -> None:
        await asyncio.gather(*producers)
        await queue.put(_CLOSED)

    consumer = asyncio.create_task(_consume(queue))
    producers = [asyncio.create_task(produce(i)) for i in range(n_producers)]
    await close_when_done(producers)
    return sorted(await consumer)