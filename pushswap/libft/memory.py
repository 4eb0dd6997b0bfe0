"""Byte-buffer operations in the style of the C memory and bounded-string routines.

Buffers that are written to must be ``bytearray`` objects; sources may be any
bytes-like object. Strings handled by :func:`strlcpy` and :func:`strlcat` are
NUL-terminated: only the bytes before the first NUL count.
"""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer of {size} bytes")


def _c_len(data: bytes | bytearray | memoryview) -> int:
    """Length of the NUL-terminated string held in ``data``."""
    raw = bytes(data)
    end = raw.find(b"\x00")
    return len(raw) if end == -1 else end


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``nmemb`` elements of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if SIZE_MAX // size < nmemb:
        raise MemoryError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) in the first ``n`` bytes."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, or 0."""
    _check_count(n, len(s1), len(s2))
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied aside first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def strlcpy(dst: bytearray, src: bytes | bytearray | memoryview, size: int) -> int:
    """Copy at most ``size - 1`` bytes of the string ``src`` into ``dst`` and terminate it.

    Returns the length of ``src``, so truncation happened when the result is ``>= size``.
    """
    src_len = _c_len(src)
    if size < 1:
        return src_len
    count = min(src_len, size - 1)
    _check_count(count + 1, len(dst))
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: bytes | bytearray | memoryview, size: int) -> int:
    """Append the string ``src`` to the string in ``dst``, which has room for ``size`` bytes.

    Returns the length the result would have had without truncation.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = min(_c_len(dst), size)
    src_len = _c_len(src)
    if size <= dst_len:
        return size + src_len
    count = min(src_len, size - 1 - dst_len)
    _check_count(dst_len + count + 1, len(dst))
    dst[dst_len:dst_len + count] = bytes(src[:count])
    dst[dst_len + count] = 0
    return dst_len + src_len