"""A per-process file descriptor table."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import count


class File(ABC):
    """Anything a descriptor can refer to: regular files, pipes, sockets."""

    @abstractmethod
    def read(self, buf: bytearray) -> int:
        """Fill ``buf`` and return the number of bytes read."""

    @abstractmethod
    def write(self, buf: bytes) -> int:
        """Write ``buf`` and return the number of bytes written."""


class FdTable:
    """Maps small integers to open files, reusing the lowest free number."""

    def __init__(self) -> None:
        self._files: dict[int, File] = {}

    def alloc(self, file: File) -> int:
        """Store ``file`` under the smallest unused descriptor and return it."""
        fd = next(n for n in count() if n not in self._files)
        self._files[fd] = file
        return fd

    def get(self, fd: int) -> File | None:
        """Return the file behind ``fd``, or None if it is not open."""
        return self._files.get(fd)

    def close(self, fd: int) -> bool:
        """Close ``fd``; return False if it was not open."""
        return self._files.pop(fd, None) is not None

    def count(self) -> int:
        """Number of open descriptors."""
        return len(self._files)