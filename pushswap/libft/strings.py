"""String helpers in the style of the classic C string routines.

Searching functions return indices instead of pointers, and ``None`` where the
C routine would return a null pointer. As in C, the terminator can be searched
for: looking for ``"\\0"`` finds the position just past the last character.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

Char = Union[int, str]

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Turn ``c`` into a one-character string, taking integer codes modulo 256."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string has length 0."""
    return 0 if s is None else len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for the terminator returns ``len(s)``.
    """
    char = _as_char(c)
    if char == _NUL and _NUL not in s:
        return len(s)
    index = s.find(char)
    return None if index == -1 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for the terminator returns ``len(s)``.
    """
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end of
    a string counting as code 0, or 0 when the compared parts are equal.
    """
    _check_non_negative("n", n)
    for a, b in zip(s1[:n] + _NUL, s2[:n] + _NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index == -1 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty fields."""
    char = _as_char(sep)
    if char == _NUL:
        return [s] if s else []
    return [word for word in s.split(char) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to every character of ``s``."""
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` for each character, in place.

    When ``f`` returns a value, it replaces the character at that index.
    """
    if not callable(f):
        raise TypeError("f must be callable")
    for index, char in enumerate(list(chars)):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement