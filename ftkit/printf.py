"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %.

Conversions that are not recognised produce nothing and take no argument.
A lone ``%`` at the end of the format is ignored. Numbers follow the C
widths: ``d``, ``i``, ``u``, ``x`` and ``X`` work on 32-bit values, and
pointers on 64-bit addresses.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable

from ftkit.numbers import itoa
from ftkit.output import put_str

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    value = operator.index(value) & _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _signed(arg: Any, spec: str) -> str:
    return itoa(_as_int32(arg))


def _unsigned(arg: Any, spec: str) -> str:
    return str(operator.index(arg) & _UINT32_MASK)


def _hexadecimal(arg: Any, spec: str) -> str:
    return format(operator.index(arg) & _UINT32_MASK, spec)


def _string(arg: Any, spec: str) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string or None, got {type(arg).__name__}")
    return arg


def _character(arg: Any, spec: str) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _pointer(arg: Any, spec: str) -> str:
    if arg is None:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    address &= _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any, str], str]] = {
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hexadecimal,
    "X": _hexadecimal,
    "s": _string,
    "c": _character,
    "p": _pointer,
}


def format_string(fmt: str, *args: Any) -> str:
    """The text that ``printf`` would write for ``fmt`` and ``args``.

    Raises TypeError when the format asks for more arguments than given.
    Extra arguments are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string {fmt!r}"
            ) from None
        pieces.append(convert(arg, spec))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    put_str(text, sys.stdout)
    return len(text)