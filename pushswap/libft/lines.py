"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional, Union

DEFAULT_BUFFER_SIZE = 64

_NEWLINE = b"\n"


def find_char(s: Union[str, bytes], c: Union[str, bytes, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None`` when it does not occur."""
    index = s.find(c)
    return None if index == -1 else index


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes; whatever follows the
    newline of a returned line is kept for the next call. Lines are returned
    as bytes, newline included; the last line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once the input is exhausted.

        A failed read discards any buffered data and raises ``OSError``.
        """
        pending = self._pending
        while find_char(pending, _NEWLINE) is None:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            pending += chunk
        end = find_char(pending, _NEWLINE)
        if end is None:
            line, self._pending = pending, b""
        else:
            line, self._pending = pending[:end + 1], pending[end + 1:]
        return line or None

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)