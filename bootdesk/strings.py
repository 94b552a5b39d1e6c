"""C-style string comparison.

Strings end at their first NUL character or at their end, whichever comes
first. ``bytes`` are compared as signed 8-bit characters; ``str`` values are
compared by code point.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain, islice

__all__ = ["strcmp", "strncmp"]


def _codes(s: str | bytes) -> Iterator[int]:
    if isinstance(s, (bytes, bytearray)):
        codes: Iterator[int] = (b - 256 if b > 127 else b for b in s)
    elif isinstance(s, str):
        codes = (ord(c) for c in s)
    else:
        raise TypeError(f"expected str or bytes, got {type(s).__name__}")
    return chain(codes, (0,))


def _compare(pairs: Iterator[tuple[int, int]]) -> int:
    for a, b in pairs:
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strcmp(s1: str | bytes, s2: str | bytes) -> int:
    """Return a negative, zero or positive value as ``s1`` sorts before, with or after ``s2``."""
    return _compare(zip(_codes(s1), _codes(s2)))


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(islice(zip(_codes(s1), _codes(s2)), n))