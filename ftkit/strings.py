"""String helpers: searching, comparing, bounded copying, slicing and splitting.

Positions are returned as indices (or None when nothing is found) rather
than as references into the string. The end of a string counts as a
position that holds the NUL character, so searching for ``"\\0"`` finds
``len(s)``.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL gives the index of the string's end.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL gives the index of the string's end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference of the first
    differing character codes. The end of a string compares as code 0.
    """
    n = _check_non_negative("n", n)
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    length = _check_non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Bounded copy into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    full length of ``src``, which exceeds the copied length on truncation.
    """
    size = _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Bounded append of ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``size`` does not exceed ``len(dst)``, ``dst`` is left as it
    is and the reported length is ``size + len(src)``.
    """
    size = _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    start = _check_non_negative("start", start)
    length = _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without any of the characters in ``charset`` at either end."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Pieces of ``s`` between occurrences of ``sep``, empty pieces dropped."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string built from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    s: Union[str, MutableSequence[str], None],
    f: Callable[[int, str], Optional[str]],
) -> Union[str, MutableSequence[str], None]:
    """Call ``f(index, char)`` on every character, in order.

    Where ``f`` returns a character it replaces the one it was given;
    returning None leaves the character alone. A mutable sequence is
    updated in place and returned; a str yields a new str. None is
    passed straight back.
    """
    if s is None:
        return None
    if isinstance(s, str):
        chars = list(s)
        striteri(chars, f)
        return "".join(chars)
    for i, ch in enumerate(list(s)):
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = replacement
    return s