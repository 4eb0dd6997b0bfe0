"""Turning command-line arguments into the initial contents of stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.libft.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """An argument is not a valid, distinct 32-bit integer."""


def parse_int(text: str) -> int:
    """Parse one argument as a signed 32-bit integer.

    Only an optional leading ``-`` followed by ASCII digits is accepted; a
    ``+`` sign, spaces, an empty string, a value out of range, or a leading
    zero before another digit (as in ``"01"``) are rejected. A lone ``"-"``
    reads as 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    if not text:
        raise InputError("empty argument")
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not all(is_digit(char) for char in digits):
        raise InputError(f"not an integer: {text!r}")
    if text[0] == "0" and len(text) > 1 and is_digit(text[1]):
        raise InputError(f"leading zero in {text!r}")
    magnitude = int(digits) if digits else 0
    value = -magnitude if negative else magnitude
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of the 32-bit range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument, in order, and reject repeated values."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values