"""Address translation through a simulated single-level page table."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZE = 4096
PAGE_OFFSET_BITS = 12

PTE_VALID = 1 << 0
PTE_READ = 1 << 1
PTE_WRITE = 1 << 2


class PageFault(LookupError):
    """Raised when a virtual page is unmapped or its entry is not valid."""


class PermissionDenied(PermissionError):
    """Raised when a write targets a page without write permission."""


@dataclass(frozen=True)
class PageTableEntry:
    """Physical page number and flag bits for one virtual page."""

    ppn: int
    flags: int


def va_to_vpn(va: int) -> int:
    """Virtual page number of ``va``."""
    return va >> PAGE_OFFSET_BITS


def va_to_offset(va: int) -> int:
    """Offset of ``va`` within its page."""
    return va & ((1 << PAGE_OFFSET_BITS) - 1)


def make_pa(ppn: int, offset: int) -> int:
    """Physical address of ``offset`` within physical page ``ppn``."""
    return ppn * PAGE_SIZE + offset


class SingleLevelPageTable:
    """A flat table mapping up to ``max_pages`` virtual pages."""

    def __init__(self, max_pages: int) -> None:
        if max_pages < 0:
            raise ValueError(f"max_pages must be non-negative, got {max_pages}")
        self._entries: list[PageTableEntry | None] = [None] * max_pages

    def __len__(self) -> int:
        return len(self._entries)

    def _check_vpn(self, vpn: int) -> None:
        if not 0 <= vpn < len(self._entries):
            raise IndexError(f"vpn {vpn} outside table of {len(self._entries)} pages")

    def map(self, vpn: int, ppn: int, flags: int) -> None:
        """Map virtual page ``vpn`` to physical page ``ppn`` with ``flags``."""
        self._check_vpn(vpn)
        self._entries[vpn] = PageTableEntry(ppn, flags)

    def unmap(self, vpn: int) -> None:
        """Remove the mapping of virtual page ``vpn``."""
        self._check_vpn(vpn)
        self._entries[vpn] = None

    def lookup(self, vpn: int) -> PageTableEntry | None:
        """Entry for ``vpn``, or None if it is unmapped or out of range."""
        if not 0 <= vpn < len(self._entries):
            return None
        return self._entries[vpn]

    def translate(self, va: int, is_write: bool) -> int:
        """Return the physical address for ``va``.

        Raises PageFault for unmapped or invalid pages and PermissionDenied
        for writes to pages without write permission.
        """
        entry = self.lookup(va_to_vpn(va))
        if entry is None or not entry.flags & PTE_VALID:
            raise PageFault(f"page fault at {va:#x}")
        if is_write and not entry.flags & PTE_WRITE:
            raise PermissionDenied(f"write to read-only page at {va:#x}")
        return make_pa(entry.ppn, va_to_offset(va))