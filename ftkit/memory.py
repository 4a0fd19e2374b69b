"""Byte-buffer helpers: search, compare, copy, fill and zeroed allocation.

Buffers are bytes-like objects; functions that write need a mutable one
such as a ``bytearray``. Byte values given as ints are truncated to eight
bits. Ranges that run past the end of a buffer raise ValueError.
"""

from __future__ import annotations

import operator
import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _count(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _within(buf, start: int, n: int, what: str) -> None:
    if start + n > len(buf):
        raise ValueError(
            f"{what}: range {start}..{start + n} exceeds buffer of {len(buf)} bytes"
        )


def _byte(c: int) -> int:
    return operator.index(c) & 0xFF


def memchr(buf: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to *c* among the first *n*, else None."""
    n = _count("n", n)
    _within(buf, 0, n, "memchr")
    index = bytes(buf[:n]).find(_byte(c))
    return index if index >= 0 else None


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first *n* bytes; the difference at the first mismatch, or 0."""
    n = _count("n", n)
    _within(a, 0, n, "memcmp")
    _within(b, 0, n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview, n: int
) -> bytearray | memoryview:
    """Copy the first *n* bytes of *src* to the start of *dst*; return *dst*."""
    n = _count("n", n)
    _within(dst, 0, n, "memcpy")
    _within(src, 0, n, "memcpy")
    if dst is not src:
        dst[:n] = bytes(src[:n])
    return dst


def memmove(
    buf: bytearray | memoryview, dst: int, src: int, n: int
) -> bytearray | memoryview:
    """Move *n* bytes inside *buf* from offset *src* to offset *dst*.

    The ranges may overlap; the bytes land as they were before the move.
    Returns *buf*.
    """
    dst = _count("dst", dst)
    src = _count("src", src)
    n = _count("n", n)
    if n == 0 or dst == src:
        return buf
    _within(buf, dst, n, "memmove")
    _within(buf, src, n, "memmove")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray | memoryview, c: int, n: int) -> bytearray | memoryview:
    """Fill the first *n* bytes of *buf* with the byte *c*; return *buf*."""
    n = _count("n", n)
    _within(buf, 0, n, "memset")
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product does not fit in a size.
    """
    count = _count("count", count)
    size = _count("size", size)
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)