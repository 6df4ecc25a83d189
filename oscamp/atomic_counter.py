"""A thread-safe 64-bit counter with atomic read-modify-write operations."""

from __future__ import annotations

import threading

_U64_LIMIT = 1 << 64


class AtomicCounter:
    """An unsigned 64-bit counter whose updates are indivisible."""

    def __init__(self, init: int) -> None:
        if not 0 <= init < _U64_LIMIT:
            raise ValueError(f"initial value out of range for u64: {init}")
        self._value = init
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one, wrapping at 2**64, and return the previous value."""
        with self._lock:
            before = self._value
            self._value = (before + 1) % _U64_LIMIT
            return before

    def decrement(self) -> int:
        """Subtract one, wrapping at zero, and return the previous value."""
        with self._lock:
            before = self._value
            self._value = (before - 1) % _U64_LIMIT
            return before

    def get(self) -> int:
        """Current value."""
        with self._lock:
            return self._value

    def compare_and_swap(self, expected: int, new_val: int) -> tuple[bool, int]:
        """Set to ``new_val`` if the value equals ``expected``.

        Returns ``(True, expected)`` on success, ``(False, actual)`` otherwise.
        """
        if not 0 <= new_val < _U64_LIMIT:
            raise ValueError(f"value out of range for u64: {new_val}")
        with self._lock:
            if self._value == expected:
                self._value = new_val
                return True, expected
            return False, self._value

    def fetch_multiply(self, multiplier: int) -> int:
        """Multiply the value and return the previous one.

        Raises OverflowError if the product does not fit in 64 bits.
        """
        while True:
            current = self.get()
            product = current * multiplier
            if not 0 <= product < _U64_LIMIT:
                raise OverflowError(f"{current} * {multiplier} overflows u64")
            swapped, _ = self.compare_and_swap(current, product)
            if swapped:
                return current