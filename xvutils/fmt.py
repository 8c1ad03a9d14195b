"""Minimal printf supporting ``%d %l %x %p %s %c %%``."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, TextIO

_DIGITS = "0123456789ABCDEF"
_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & _U32_MASK) - 0x80000000


def _format_int(value: int, base: int, signed: bool) -> str:
    xx = _to_int32(value)
    negative = signed and xx < 0
    x = -xx if negative else xx & _U32_MASK
    digits = []
    while True:
        x, rem = divmod(x, base)
        digits.append(_DIGITS[rem])
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _format_ptr(value: int) -> str:
    x = value & _U64_MASK
    return "0x" + "".join(_DIGITS[(x >> shift) & 0xF] for shift in range(60, -4, -4))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    values = iter(args)
    out = []
    pending_percent = False
    for c in fmt:
        if not pending_percent:
            if c == "%":
                pending_percent = True
            else:
                out.append(c)
            continue
        pending_percent = False
        if c == "d":
            out.append(_format_int(operator.index(_next_arg(values)), 10, True))
        elif c == "l":
            out.append(_format_int(operator.index(_next_arg(values)), 10, False))
        elif c == "x":
            out.append(_format_int(operator.index(_next_arg(values)), 16, False))
        elif c == "p":
            out.append(_format_ptr(operator.index(_next_arg(values))))
        elif c == "s":
            s = _next_arg(values)
            out.append("(null)" if s is None else str(s))
        elif c == "c":
            out.append(_format_char(_next_arg(values)))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write formatted text to ``stream``."""
    stream.write(sprintf(fmt, *args))


def printf(fmt: str, *args: Any) -> None:
    """Write formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)