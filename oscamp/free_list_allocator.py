"""A first-fit free-list allocator over a simulated address range."""

from __future__ import annotations

import threading

from oscamp.bump_allocator import AllocError, Layout

# A freed block must be able to hold its own header: a size and a next pointer.
_HEADER_SIZE = 16
_HEADER_ALIGN = 8


class FreeListAllocator:
    """Reuses freed blocks first-fit, falling back to a bump region."""

    def __init__(self, heap_start: int, heap_end: int) -> None:
        if heap_end < heap_start:
            raise ValueError("heap_end must not be below heap_start")
        self.heap_start = heap_start
        self.heap_end = heap_end
        self._bump_next = heap_start
        # (address, size) pairs, most recently freed first.
        self._free: list[tuple[int, int]] = []
        self._lock = threading.Lock()

    @property
    def free_blocks(self) -> list[tuple[int, int]]:
        """Freed blocks as ``(address, size)``, in list order."""
        with self._lock:
            return list(self._free)

    def alloc(self, layout: Layout) -> int:
        """Return the address of a block fitting ``layout``.

        Raises AllocError when neither the free list nor the heap can hold it.
        """
        size = max(layout.size, _HEADER_SIZE)
        align = max(layout.align, _HEADER_ALIGN)
        with self._lock:
            for position, (address, block_size) in enumerate(self._free):
                if block_size >= size:
                    del self._free[position]
                    return address
            start = (self._bump_next + align - 1) & ~(align - 1)
            end = start + size
            if end > self.heap_end:
                raise AllocError(
                    f"cannot allocate {layout.size} bytes aligned to {layout.align}"
                )
            self._bump_next = end
            return start

    def dealloc(self, address: int, layout: Layout) -> None:
        """Put the block at ``address`` at the head of the free list."""
        size = max(layout.size, _HEADER_SIZE)
        with self._lock:
            self._free.insert(0, (address, size))