"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(name: str, length: int, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > length:
        raise ValueError(
            f"{name}: range {start}..{start + n} lies outside a buffer of {length} bytes"
        )


def memset(buffer: MutableBytes, value: int, n: int) -> MutableBytes:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span("memset", len(buffer), 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: MutableBytes, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(
    dest: Optional[MutableBytes], src: Optional[BytesLike], n: int
) -> Optional[MutableBytes]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both are None nothing is copied and None comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span("memcpy source", len(src), 0, n)
    _check_span("memcpy destination", len(dest), 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: MutableBytes, dest: int, src: int, n: int) -> MutableBytes:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` within one buffer.

    Overlapping ranges are handled as if through a temporary copy.
    """
    _check_span("memmove source", len(buffer), src, n)
    _check_span("memmove destination", len(buffer), dest, n)
    if dest != src:
        buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in the first ``n`` bytes, or None."""
    _check_span("memchr", len(data), 0, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first unequal bytes in the first ``n``, or 0 if all match."""
    _check_span("memcmp first operand", len(a), 0, n)
    _check_span("memcmp second operand", len(b), 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the product would not fit in a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"{count} x {size} bytes overflows the address space")
    return bytearray(count * size)