"""Operating-system and concurrency building blocks: allocators, descriptor tables, atomics, channels, pipes, async tasks and paging."""

__version__ = "0.1.0"