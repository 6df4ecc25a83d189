"""The classic C memory and string primitives over Python byte buffers."""

from __future__ import annotations


def _check_length(name: str, buffer: bytes | bytearray, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    if n > len(buffer):
        raise IndexError(f"{name} holds {len(buffer)} bytes, {n} requested")


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_length("dst", dst, n)
    _check_length("src", src, n)
    dst[:n] = src[:n]
    return dst


def memset(dst: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``dst`` to ``c`` and return ``dst``."""
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    _check_length("dst", dst, n)
    dst[:n] = bytes([c]) * n
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes at offset ``src`` to offset ``dst`` within ``buffer``.

    The regions may overlap. Returns ``buffer``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must be non-negative")
    _check_length("buffer", buffer, max(dst, src) + n)
    buffer[dst : dst + n] = buffer[src : src + n]
    return buffer


def _c_string(s: bytes | bytearray) -> bytes:
    end = s.find(0)
    if end < 0:
        raise ValueError("byte string is not NUL-terminated")
    return bytes(s[:end])


def strlen(s: bytes | bytearray) -> int:
    """Length of the NUL-terminated string ``s``, without the terminator."""
    return len(_c_string(s))


def strcmp(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two NUL-terminated strings.

    Returns zero if equal, and otherwise the difference of the first
    differing bytes: negative if ``s1`` sorts first, positive if ``s2`` does.
    """
    a = _c_string(s1) + b"\0"
    b = _c_string(s2) + b"\0"
    return next((x - y for x, y in zip(a, b) if x != y), 0)