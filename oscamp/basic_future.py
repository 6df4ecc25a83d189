"""Hand-written awaitables that yield to the event loop before finishing."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any


class CountDown:
    """Yields to the loop once per remaining count, then returns ``"liftoff!"``."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.count = count

    def __await__(self) -> Generator[Any, None, str]:
        while self.count > 0:
            self.count -= 1
            yield
        return "liftoff!"


class YieldOnce:
    """Yields to the loop exactly once, then completes."""

    def __init__(self) -> None:
        self.yielded = False

    def __await__(self) -> Generator[Any, None, None]:
        if not self.yielded:
            self.yielded = True
            yield