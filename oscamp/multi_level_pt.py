"""A simulated RISC-V SV39 three-level page table."""

from __future__ import annotations

PAGE_SIZE = 4096
PT_ENTRIES = 512

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3

PPN_SHIFT = 10
_PAGE_OFFSET_BITS = 12
_VPN_BITS = 9
_VPN_MASK = PT_ENTRIES - 1
_PPN_MASK = (1 << 44) - 1
_SUPERPAGE_SIZE = PAGE_SIZE * PT_ENTRIES


class PageFault(LookupError):
    """Raised when a virtual address has no valid translation."""


class PageTableNode:
    """One page-table page: 512 raw 64-bit entries."""

    def __init__(self) -> None:
        self.entries: list[int] = [0] * PT_ENTRIES


def _is_leaf(pte: int) -> bool:
    return bool(pte & (PTE_R | PTE_W | PTE_X))


def _pte_ppn(pte: int) -> int:
    return (pte >> PPN_SHIFT) & _PPN_MASK


def _make_pte(ppn: int, flags: int) -> int:
    return (ppn << PPN_SHIFT) | flags


class Sv39PageTable:
    """Three-level page table whose pages live in a dictionary keyed by PPN."""

    def __init__(self) -> None:
        self.root_ppn = 0x80000
        self._next_ppn = 0x80001
        self._nodes: dict[int, PageTableNode] = {self.root_ppn: PageTableNode()}

    def _alloc_node(self) -> int:
        ppn = self._next_ppn
        self._next_ppn += 1
        self._nodes[ppn] = PageTableNode()
        return ppn

    @staticmethod
    def extract_vpn(va: int, level: int) -> int:
        """Return the 9-bit VPN index of ``va`` for page-table ``level`` (0, 1 or 2)."""
        if level not in (0, 1, 2):
            raise ValueError(f"level must be 0, 1 or 2, got {level}")
        return (va >> (_PAGE_OFFSET_BITS + level * _VPN_BITS)) & _VPN_MASK

    def _walk_to(self, va: int, leaf_level: int) -> PageTableNode:
        """Return the node at ``leaf_level`` for ``va``, creating intermediate nodes."""
        node = self._nodes[self.root_ppn]
        for level in range(2, leaf_level, -1):
            index = self.extract_vpn(va, level)
            pte = node.entries[index]
            if not pte & PTE_V:
                child = self._alloc_node()
                node.entries[index] = _make_pte(child, PTE_V)
                node = self._nodes[child]
            elif _is_leaf(pte):
                raise ValueError(
                    f"address {va:#x} is already covered by a leaf at level {level}"
                )
            else:
                node = self._nodes[_pte_ppn(pte)]
        return node

    def map_page(self, va: int, pa: int, flags: int) -> None:
        """Map the 4 KiB page holding ``va`` to the page holding ``pa``."""
        node = self._walk_to(va, 0)
        node.entries[self.extract_vpn(va, 0)] = _make_pte(
            pa >> _PAGE_OFFSET_BITS, flags
        )

    def map_superpage(self, va: int, pa: int, flags: int) -> None:
        """Map a 2 MiB superpage; ``va`` and ``pa`` must both be 2 MiB aligned."""
        if va % _SUPERPAGE_SIZE:
            raise ValueError("va must be 2MB-aligned")
        if pa % _SUPERPAGE_SIZE:
            raise ValueError("pa must be 2MB-aligned")
        node = self._walk_to(va, 1)
        node.entries[self.extract_vpn(va, 1)] = _make_pte(
            pa >> _PAGE_OFFSET_BITS, flags
        )

    def translate(self, va: int) -> int:
        """Walk the table and return the physical address for ``va``.

        Raises PageFault when the walk hits an invalid or missing entry.
        """
        node = self._nodes[self.root_ppn]
        for level in (2, 1, 0):
            pte = node.entries[self.extract_vpn(va, level)]
            if not pte & PTE_V:
                raise PageFault(f"no valid entry for {va:#x} at level {level}")
            if _is_leaf(pte):
                offset_bits = _PAGE_OFFSET_BITS + level * _VPN_BITS
                offset = va & ((1 << offset_bits) - 1)
                return (_pte_ppn(pte) << _PAGE_OFFSET_BITS) | offset
            if level == 0:
                raise PageFault(f"level-0 entry for {va:#x} is not a leaf")
            child = self._nodes.get(_pte_ppn(pte))
            if child is None:
                raise PageFault(f"entry for {va:#x} points to a missing table")
            node = child
        raise PageFault(f"no translation for {va:#x}")