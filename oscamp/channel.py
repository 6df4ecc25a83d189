"""Passing messages between threads over queues."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable

_DONE = object()


def simple_send_recv(items: Iterable[str]) -> list[str]:
    """Send ``items`` from a producer thread and return what the caller receives."""
    channel: queue.Queue = queue.Queue()
    values = list(items)

    def produce() -> None:
        for item in values:
            channel.put(item)
        channel.put(_DONE)

    producer = threading.Thread(target=produce)
    producer.start()
    received = list(iter(channel.get, _DONE))
    producer.join()
    return received


def multi_producer(n_producers: int) -> list[str]:
    """Receive ``"msg from {id}"`` from each of ``n_producers`` threads, sorted."""
    channel: queue.Queue = queue.Queue()

    def produce(ident: int) -> None:
        try:
            channel.put(f"msg from {ident}")
        finally:
            channel.put(_DONE)

    producers = [
        threading.Thread(target=produce, args=(i,)) for i in range(n_producers)
    ]
    for producer in producers:
        producer.start()

    received: list[str] = []
    remaining = n_producers
    while remaining:
        message = channel.get()
        if message is _DONE:
            remaining -= 1
        else:
            received.append(message)

    for producer in producers:
        producer.join()
    return sorted(received)