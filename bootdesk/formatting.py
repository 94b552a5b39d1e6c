"""A small printf-style formatter supporting %c, %d, %p, %s, %x, %X and %%.

Numbers are handled as 32-bit machine words: %d reads a signed int,
%x, %X and %p read an unsigned value. Unlike the usual C library, a zero
number with no width produces no digits at all. When zero padding is
requested for a negative number, the padding goes in front of the minus
sign.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["sprintf", "vsprintf"]

_WORD_MASK = 0xFFFFFFFF
_DIGITS = "0123456789abcdef"


def _to_signed32(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_unsigned32(value: int) -> int:
    return value & _WORD_MASK


def _render_number(num: int, base: int, width: int, pad: str,
                   negative: bool, uppercase: bool) -> str:
    digits: list[str] = []
    while num > 0:
        num, pos = divmod(num, base)
        digits.append(_DIGITS[pos])
    text = "".join(reversed(digits))
    if uppercase:
        text = text.upper()
    if negative:
        text = "-" + text
    return text.rjust(width, pad)


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for conversion '%{conversion}'"
        ) from None


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        raise TypeError(
            f"conversion '%{conversion}' needs an integer, got {type(value).__name__}"
        )
    return value


def vsprintf(fmt: str, args: Iterable[Any]) -> str:
    """Format ``fmt`` with the values taken in order from ``args``."""
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []

    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue

        width = 0
        pad = " "
        spec = next(chars, None)
        while spec is not None and spec in "0123456789":
            if spec == "0" and width == 0:
                pad = "0"
            else:
                width = width * 10 + int(spec)
            spec = next(chars, None)

        if spec is None:
            break

        if spec == "c":
            value = _next_arg(values, spec)
            out.append(chr(_as_int(value, spec) & 0xFF))
        elif spec == "d":
            num = _to_signed32(_as_int(_next_arg(values, spec), spec))
            out.append(_render_number(abs(num), 10, width, pad, num < 0, False))
        elif spec == "p":
            num = _to_unsigned32(_as_int(_next_arg(values, spec), spec))
            out.append("0x" + _render_number(num, 16, width, pad, False, True))
        elif spec == "s":
            value = _next_arg(values, spec)
            out.append("<null>" if value is None else str(value))
        elif spec in "xX":
            num = _to_unsigned32(_as_int(_next_arg(values, spec), spec))
            out.append(_render_number(num, 16, width, pad, False, spec == "X"))
        elif spec == "%":
            out.append("%")
        # Any other conversion character is consumed and produces nothing.

    return "".join(out)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args``; see :func:`vsprintf`."""
    return vsprintf(fmt, args)