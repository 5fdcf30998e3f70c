"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

import operator

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit value.

    Leading whitespace is skipped. One sign is allowed; a run of more than
    one sign character gives 0. Parsing stops at the first non-digit, and
    the result wraps around as 32-bit arithmetic does.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    signs = 0
    while pos < len(text) and text[pos] in "+-":
        signs += 1
        if text[pos] == "-":
            sign = -1
        pos += 1
    if signs > 1:
        sign = 0

    total = 0
    while pos < len(text) and text[pos] in _DIGITS:
        total = (total * 10 + int(text[pos])) & 0xFFFFFFFF
        pos += 1
    return _wrap_int32(sign * total)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)