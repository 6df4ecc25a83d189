"""Shared state guarded by a mutex across several threads."""

from __future__ import annotations

import threading


def _run_threads(targets) -> None:
    threads = [threading.Thread(target=t) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def concurrent_counter(n_threads: int, count_per_thread: int) -> int:
    """Have each of ``n_threads`` threads add ``count_per_thread`` to a shared counter."""
    lock = threading.Lock()
    total = 0

    def work() -> None:
        nonlocal total
        with lock:
            total += count_per_thread

    _run_threads(work for _ in range(n_threads))
    return total


def concurrent_collect(n_threads: int) -> list[int]:
    """Have each thread push its id into a shared list; return the sorted list."""
    lock = threading.Lock()
    collected: list[int] = []

    def work(ident: int) -> None:
        with lock:
            collected.append(ident)

    _run_threads((lambda i=i: work(i)) for i in range(n_threads))
    return sorted(collected)