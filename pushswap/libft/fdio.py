"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from pushswap.libft.conversions import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character, or one byte given as an integer, to ``fd``."""
    if isinstance(c, bool):
        raise TypeError("expected a character or a byte value, got bool")
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; a missing string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the 32-bit integer ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode())