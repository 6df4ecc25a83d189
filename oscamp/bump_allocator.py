"""A bump-pointer allocator over a simulated address range."""

from __future__ import annotations

import threading
from dataclasses import dataclass


class AllocError(MemoryError):
    """Raised when an allocation cannot be satisfied."""


@dataclass(frozen=True)
class Layout:
    """Size and alignment of a requested memory block."""

    size: int
    align: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")
        if self.align <= 0 or self.align & (self.align - 1):
            raise ValueError(f"align must be a power of two, got {self.align}")


def _align_up(address: int, align: int) -> int:
    return (address + align - 1) & ~(align - 1)


class BumpAllocator:
    """Hands out addresses from ``heap_start`` upwards; individual frees are no-ops."""

    def __init__(self, heap_start: int, heap_end: int) -> None:
        if heap_end < heap_start:
            raise ValueError("heap_end must not be below heap_start")
        self.heap_start = heap_start
        self.heap_end = heap_end
        self._next = heap_start
        self._lock = threading.Lock()

    @property
    def next(self) -> int:
        """Address at which the next allocation search begins."""
        return self._next

    def reset(self) -> None:
        """Forget every allocation made so far."""
        with self._lock:
            self._next = self.heap_start

    def alloc(self, layout: Layout) -> int:
        """Return the address of a block fitting ``layout``.

        Raises AllocError when the heap cannot hold the block.
        """
        with self._lock:
            start = _align_up(self._next, layout.align)
            end = start + layout.size
            if end > self.heap_end:
                raise AllocError(
                    f"cannot allocate {layout.size} bytes aligned to {layout.align}"
                )
            self._next = end
            return start

    def dealloc(self, address: int, layout: Layout) -> None:
        """Individual blocks are never reclaimed."""