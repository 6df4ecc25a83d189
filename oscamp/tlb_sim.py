"""A translation lookaside buffer with FIFO replacement, and an MMU built on it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TlbEntry:
    """One cached translation, tagged with the address space it belongs to."""

    valid: bool = False
    asid: int = 0
    vpn: int = 0
    ppn: int = 0
    flags: int = 0

    def matches(self, vpn: int, asid: int) -> bool:
        """Whether this entry is a live translation of ``vpn`` in ``asid``."""
        return self.valid and self.vpn == vpn and self.asid == asid


@dataclass
class TlbStats:
    """Hit and miss counters."""

    hits: int = 0
    misses: int = 0

    def hit_rate(self) -> float:
        """Fraction of lookups that hit; 0.0 before any lookup."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class Tlb:
    """Fixed-size TLB that replaces entries in first-in, first-out order."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.entries = [TlbEntry() for _ in range(capacity)]
        self._fifo_ptr = 0
        self.stats = TlbStats()

    def lookup(self, vpn: int, asid: int) -> int | None:
        """Return the cached PPN for ``vpn`` in ``asid``, or None on a miss."""
        entry = next((e for e in self.entries if e.matches(vpn, asid)), None)
        if entry is None:
            self.stats.misses += 1
            return None
        self.stats.hits += 1
        return entry.ppn

    def insert(self, vpn: int, ppn: int, asid: int, flags: int) -> None:
        """Cache a translation, updating an existing one or evicting the oldest slot."""
        for entry in self.entries:
            if entry.matches(vpn, asid):
                entry.ppn = ppn
                entry.flags = flags
                return
        if not self.entries:
            raise ValueError("cannot insert into a TLB with no slots")
        self.entries[self._fifo_ptr] = TlbEntry(True, asid, vpn, ppn, flags)
        self._fifo_ptr = (self._fifo_ptr + 1) % self.capacity

    def flush_all(self) -> None:
        """Invalidate every entry."""
        for entry in self.entries:
            entry.valid = False

    def flush_by_vpn(self, vpn: int) -> None:
        """Invalidate entries for ``vpn`` in every address space."""
        for entry in self.entries:
            if entry.vpn == vpn:
                entry.valid = False

    def flush_by_asid(self, asid: int) -> None:
        """Invalidate every entry of address space ``asid``."""
        for entry in self.entries:
            if entry.asid == asid:
                entry.valid = False

    def valid_count(self) -> int:
        """Number of live entries."""
        return sum(entry.valid for entry in self.entries)


@dataclass(frozen=True)
class PageMapping:
    """A page table entry as the MMU model sees it."""

    vpn: int
    ppn: int
    flags: int


@dataclass
class Mmu:
    """Looks translations up in the TLB first, then walks the page table and refills."""

    tlb: Tlb
    current_asid: int = 0
    _page_table: list[tuple[int, PageMapping]] = field(default_factory=list)

    def __init__(self, tlb_capacity: int) -> None:
        self.tlb = Tlb(tlb_capacity)
        self.current_asid = 0
        self._page_table = []

    def add_mapping(self, asid: int, vpn: int, ppn: int, flags: int) -> None:
        """Add a mapping to the page table of address space ``asid``."""
        self._page_table.append((asid, PageMapping(vpn, ppn, flags)))

    def switch_asid(self, new_asid: int) -> None:
        """Make ``new_asid`` the current address space."""
        self.current_asid = new_asid

    def translate(self, vpn: int) -> int | None:
        """Return the PPN for ``vpn`` in the current address space, or None on a page fault."""
        ppn = self.tlb.lookup(vpn, self.current_asid)
        if ppn is not None:
            return ppn
        mapping = next(
            (
                m
                for asid, m in self._page_table
                if asid == self.current_asid and m.vpn == vpn
            ),
            None,
        )
        if mapping is None:
            return None
        self.tlb.insert(vpn, mapping.ppn, self.current_asid, mapping.flags)
        return mapping.ppn