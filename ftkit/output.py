"""Writing characters, strings and numbers to a text stream.

Every function writes to ``stream``, which defaults to standard output
looked up at call time. Each returns the number of characters written.
"""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa

CharLike = Union[str, int]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character, given as a string or as a byte code."""
    return _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> int:
    """Write ``s`` as it is."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline."""
    written = put_str(s, stream)
    return written + _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of a 32-bit signed integer."""
    return _target(stream).write(itoa(n))