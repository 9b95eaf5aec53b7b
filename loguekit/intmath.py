"""Integer helpers: clipping and powers of two for 32-bit unsigned values."""

from __future__ import annotations

_U32_MASK = 0xFFFFFFFF


def clipmax(x: int, m: int) -> int:
    """Return ``m`` when ``x >= m``, otherwise ``x``."""
    return m if x >= m else x


def clipmin(m: int, x: int) -> int:
    """Return ``m`` when ``x <= m``, otherwise ``x``."""
    return m if x <= m else x


def clipminmax(lo: int, x: int, hi: int) -> int:
    """Clip ``x`` into ``[lo, hi]``; the upper bound is checked first."""
    if x >= hi:
        return hi
    if x <= lo:
        return lo
    return x


def _check_u32(x: int) -> int:
    if not 0 <= x <= _U32_MASK:
        raise ValueError(f"{x!r} is not a 32-bit unsigned value")
    return x


def nextpow2_u32(x: int) -> int:
    """Smallest power of two not below ``x``, with 32-bit wrap-around.

    Zero and values above 2**31 wrap to 0, as unsigned 32-bit arithmetic does.
    """
    x = (_check_u32(x) - 1) & _U32_MASK
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return (x + 1) & _U32_MASK


def ispow2_u32(x: int) -> bool:
    """True when ``x`` is a non-zero power of two."""
    x = _check_u32(x)
    return x != 0 and (x & (x - 1)) == 0