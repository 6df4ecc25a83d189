"""Building and inspecting RISC-V SV39 page table entries."""

from __future__ import annotations

PTE_V = 1 << 0  # valid
PTE_R = 1 << 1  # readable
PTE_W = 1 << 2  # writable
PTE_X = 1 << 3  # executable
PTE_U = 1 << 4  # user accessible
PTE_G = 1 << 5  # global
PTE_A = 1 << 6  # accessed
PTE_D = 1 << 7  # dirty

PPN_SHIFT = 10
PPN_MASK = (1 << 44) - 1
FLAGS_MASK = 0xFF


def make_pte(ppn: int, flags: int) -> int:
    """Entry with ``ppn`` in bits 53..10 and ``flags`` in the low bits."""
    return (ppn << PPN_SHIFT) | flags


def extract_ppn(pte: int) -> int:
    """Physical page number held in ``pte``."""
    return (pte >> PPN_SHIFT) & PPN_MASK


def extract_flags(pte: int) -> int:
    """The low eight flag bits of ``pte``."""
    return pte & FLAGS_MASK


def is_valid(pte: int) -> bool:
    """Whether the V bit is set."""
    return bool(pte & PTE_V)


def is_leaf(pte: int) -> bool:
    """Whether any of R, W or X is set, i.e. the entry maps a page."""
    return bool(pte & (PTE_R | PTE_W | PTE_X))


def check_permission(pte: int, read: bool, write: bool, execute: bool) -> bool:
    """Whether ``pte`` is valid and grants every requested access."""
    if not is_valid(pte):
        return False
    required = (
        (PTE_R if read else 0) | (PTE_W if write else 0) | (PTE_X if execute else 0)
    )
    return pte & required == required