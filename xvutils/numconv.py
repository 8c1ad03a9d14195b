"""Integer parsing, 64-by-32 division and bit-twiddling helpers."""

from __future__ import annotations

from typing import Union

_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF
_SPACE = " \t\n\v\f\r"
_LOG2_MASKS = (
    (0xAAAAAAAA, 1),
    (0xCCCCCCCC, 2),
    (0xF0F0F0F0, 4),
    (0xFF00FF00, 8),
    (0xFFFF0000, 16),
)

StrLike = Union[str, bytes, bytearray]


def _to_int32(value: int) -> int:
    """Wrap an integer to the range of a signed 32-bit int."""
    return ((value + 0x80000000) & _U32_MASK) - 0x80000000


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value <= _U64_MASK:
        raise ValueError(f"{name} must be an unsigned 64-bit value, got {value}")


def _check_divisor(value: int) -> None:
    if value == 0:
        raise ZeroDivisionError("division by zero")
    if not 0 < value <= _U32_MASK:
        raise ValueError(f"divisor must be an unsigned 32-bit value, got {value}")


def _take_digits(text: str) -> int:
    total = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        total = total * 10 + (ord(ch) - ord("0"))
    return total


def atoi(s: str) -> int:
    """Parse leading decimal digits; no whitespace or sign is accepted."""
    return _to_int32(_take_digits(s))


def strtoint(s: str) -> int:
    """Parse an integer after optional whitespace and an optional sign."""
    text = s.lstrip(_SPACE)
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    total = _take_digits(text)
    return _to_int32(-total if negative else total)


def div64_32(n: int, base: int) -> tuple[int, int]:
    """Divide a 64-bit value by a 32-bit one by shift and subtract.

    Returns ``(quotient, remainder)``.
    """
    _check_u64("dividend", n)
    _check_divisor(base)
    rem = n
    b = base
    d = 1
    res = 0
    high = rem >> 32
    if high >= base:
        high //= base
        res = high << 32
        rem -= (high * base) << 32

    while b < (1 << 63) and b < rem:
        b += b
        d += d

    while d:
        if rem >= b:
            rem -= b
            res += d
        b >>= 1
        d >>= 1
    return res, rem


def do_div(n: int, base: int) -> tuple[int, int]:
    """Divide an unsigned 64-bit value by a 32-bit base.

    Returns ``(quotient, remainder)``.
    """
    _check_u64("dividend", n)
    _check_divisor(base)
    if n >> 32 == 0:
        return n // base, n % base
    return div64_32(n, base)


def lldiv(dividend: int, divisor: int) -> int:
    """Return the quotient of an unsigned 64-bit division."""
    quotient, _ = do_div(dividend, divisor)
    return quotient


def div_u64_rem(dividend: int, divisor: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` of an unsigned 64-bit division."""
    _check_u64("dividend", dividend)
    _check_divisor(divisor)
    return divmod(dividend, divisor)


def genmask(h: int, l: int, bits_per_long: int = 64) -> int:
    """Return a mask with bits ``l`` through ``h`` (inclusive) set."""
    if not 0 <= l <= h < bits_per_long:
        raise ValueError(f"need 0 <= l <= h < {bits_per_long}, got h={h}, l={l}")
    all_ones = (1 << bits_per_long) - 1
    low = (all_ones - (1 << l) + 1) & all_ones
    high = all_ones >> (bits_per_long - 1 - h)
    return low & high


def roundup(x: int, y: int) -> int:
    """Round ``x`` up to a multiple of ``y``."""
    if y == 0:
        raise ZeroDivisionError("roundup by zero")
    return ((x + (y - 1)) // y) * y


def align(x: int, a: int) -> int:
    """Round ``x`` up to a multiple of the power of two ``a``."""
    mask = a - 1
    return (x + mask) & ~mask


def div_round_up(n: int, d: int) -> int:
    """Divide ``n`` by ``d``, rounding the quotient up."""
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return (n + d - 1) // d


def swab32(x: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes((x & _U32_MASK).to_bytes(4, "little"), "big")


def log2(x: int) -> int:
    """Base-2 logarithm of a 32-bit power of two, computed from bit masks."""
    return sum(weight for mask, weight in _LOG2_MASKS if x & mask)


def memcmp(a: bytes, b: bytes, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first mismatch."""
    if count < 0:
        raise ValueError("count must not be negative")
    if len(a) < count or len(b) < count:
        raise ValueError("buffers are shorter than count")
    for x, y in zip(a[:count], b[:count]):
        if x != y:
            return x - y
    return 0


def _as_bytes(value: StrLike) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def strcmp(p: StrLike, q: StrLike) -> int:
    """Compare two NUL-terminated strings as unsigned bytes."""
    left = _as_bytes(p).split(b"\0", 1)[0]
    right = _as_bytes(q).split(b"\0", 1)[0]
    for x, y in zip(left, right):
        if x != y:
            return x - y
    tail_left = left[len(right)] if len(left) > len(right) else 0
    tail_right = right[len(left)] if len(right) > len(left) else 0
    return tail_left - tail_right