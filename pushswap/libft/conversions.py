"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = " \t\r\n\v\f"
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; text with no digits yields 0. When the
    magnitude grows too large for a 64-bit long, the result is -1 for a
    positive number and 0 for a negative one. Otherwise the value is wrapped
    to a signed 32-bit integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + ord(char) - ord("0")
        if _LONG_MAX // 10 < value * 10:
            return 0 if sign < 0 else -1
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of the 32-bit integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)