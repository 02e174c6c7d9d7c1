"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    """Reduce ``value`` to the 32-bit two's-complement range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and digits are read until the first non-digit. Text with no digits gives
    0. The result wraps around like a 32-bit signed integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"atoi needs a string, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = _wrap32(result * 10 + (ord(ch) - ord("0")))
    return _wrap32(result * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa needs an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)