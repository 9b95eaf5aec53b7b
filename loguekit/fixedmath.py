"""Fixed point (Q15/Q31) arithmetic with saturating integer primitives."""

from __future__ import annotations

import math
from collections.abc import Iterable

Q15_MAX = 0x7FFF
Q15_MIN = -0x8000
Q31_MAX = 0x7FFFFFFF
Q31_MIN = -0x80000000

Q15_TO_F32_C = 2.0**-15
Q31_TO_F32_C = 2.0**-31
# 0x7FFFFFFF rounded to single precision.
_F32_TO_Q31_SCALE = 2147483648.0
_F32_TO_Q15_SCALE = float((1 << 15) - 1)

M_HALPI_Q1_14 = 0x6488
M_HALPI_Q1_30 = 0x6487ED51
M_PI_Q2_13 = 0x6488
M_PI_Q2_29 = 0x6487ED51
M_1OVERPI_Q15 = 0x28BE
M_1OVERPI_Q31 = 0x28BE60DC
M_TWOPI_Q3_12 = 0x6488
M_TWOPI_Q3_28 = 0x6487ED51

M_1OVER48K_Q31 = 0x0000AEC3
M_1OVER44K_Q31 = 0x0000BE38
M_1OVER22K_Q31 = 0x00017C70

_U32_MASK = 0xFFFFFFFF


# --- Core integer primitives -------------------------------------------------


def wrap_i32(x: int) -> int:
    """Reduce ``x`` to a signed 32-bit value with two's complement wrap."""
    return ((int(x) + 0x80000000) & _U32_MASK) - 0x80000000


def _wrap_i16(x: int) -> int:
    return ((int(x) + 0x8000) & 0xFFFF) - 0x8000


def ssat(x: int, bits: int) -> int:
    """Saturate ``x`` to a signed range of ``bits`` bits (1 to 32)."""
    if not 1 <= bits <= 32:
        raise ValueError(f"signed saturation width must be 1..32, got {bits}")
    hi = (1 << (bits - 1)) - 1
    lo = -(1 << (bits - 1))
    return min(max(int(x), lo), hi)


def usat(x: int, bits: int) -> int:
    """Saturate ``x`` to an unsigned range of ``bits`` bits (0 to 31)."""
    if not 0 <= bits <= 31:
        raise ValueError(f"unsigned saturation width must be 0..31, got {bits}")
    return min(max(int(x), 0), (1 << bits) - 1)


def qadd(a: int, b: int) -> int:
    """Saturating signed 32-bit addition."""
    return ssat(wrap_i32(a) + wrap_i32(b), 32)


def qsub(a: int, b: int) -> int:
    """Saturating signed 32-bit subtraction."""
    return ssat(wrap_i32(a) - wrap_i32(b), 32)


def _halves(x: int) -> tuple[int, int]:
    x = int(x) & _U32_MASK
    return _wrap_i16(x & 0xFFFF), _wrap_i16(x >> 16)


def _pack(lo: int, hi: int) -> int:
    return wrap_i32(((hi & 0xFFFF) << 16) | (lo & 0xFFFF))


def _qadd16(a: int, b: int) -> int:
    (al, ah), (bl, bh) = _halves(a), _halves(b)
    return _pack(ssat(al + bl, 16), ssat(ah + bh, 16))


def _qsub16(a: int, b: int) -> int:
    (al, ah), (bl, bh) = _halves(a), _halves(b)
    return _pack(ssat(al - bl, 16), ssat(ah - bh, 16))


# --- Conversions -------------------------------------------------------------


def _f_to_i32(f: float) -> int:
    """Truncating float to int32 conversion that saturates like the FPU does."""
    if math.isnan(f):
        return 0
    if math.isinf(f):
        return Q31_MAX if f > 0 else Q31_MIN
    return ssat(math.trunc(f), 32)


def q15_to_f32(q: int) -> float:
    """Q15 value to float in [-1, 1)."""
    return float(q) * Q15_TO_F32_C


def q31_to_f32(q: int) -> float:
    """Q31 value to float in [-1, 1)."""
    return float(q) * Q31_TO_F32_C


def f32_to_q15(f: float) -> int:
    """Float to saturated Q15."""
    return ssat(_f_to_i32(float(f) * _F32_TO_Q15_SCALE), 16)


def f32_to_q31(f: float) -> int:
    """Float to Q31; out of range values saturate."""
    return _f_to_i32(float(f) * _F32_TO_Q31_SCALE)


# --- Q15 -----------------------------------------------------------------------


def q15add(a: int, b: int) -> int:
    return ssat(_wrap_i16(a) + _wrap_i16(b), 16)


def q15sub(a: int, b: int) -> int:
    return ssat(_wrap_i16(a) - _wrap_i16(b), 16)


def q15mul(a: int, b: int) -> int:
    """Q15 product; the result wraps to 16 bits."""
    return _wrap_i16((_wrap_i16(a) * _wrap_i16(b)) >> 15)


def q15absmul(a: int, b: int) -> int:
    return -q15mul(a, _wrap_i16(-b))


def q15abs(a: int) -> int:
    """Saturated absolute value: the most negative value maps to the maximum."""
    return ssat(abs(_wrap_i16(a)), 16)


def q15max(a: int, b: int) -> int:
    return max(_wrap_i16(a), _wrap_i16(b))


def q15min(a: int, b: int) -> int:
    return min(_wrap_i16(a), _wrap_i16(b))


def q15addp(a: int, b: int) -> int:
    """Saturating add of two packed pairs of Q15 values."""
    return _qadd16(a, b)


def q15subp(a: int, b: int) -> int:
    """Saturating subtract of two packed pairs of Q15 values."""
    return _qsub16(a, b)


def q15absp(a: int) -> int:
    """Packed absolute value, computed with a whole-word sign mask."""
    a = wrap_i32(a)
    sign = a >> 15
    return _qsub16(a ^ sign, sign)


def q15maxp(a: int, b: int) -> int:
    """Halfword-wise maximum of two packed pairs."""
    (al, ah), (bl, bh) = _halves(a), _halves(b)
    return _pack(max(al, bl), max(ah, bh))


def q15minp(a: int, b: int) -> int:
    """Halfword-wise minimum of two packed pairs."""
    (al, ah), (bl, bh) = _halves(a), _halves(b)
    return _pack(min(al, bl), min(ah, bh))


# --- Q31 -----------------------------------------------------------------------


def q31add(a: int, b: int) -> int:
    return qadd(a, b)


def q31sub(a: int, b: int) -> int:
    return qsub(a, b)


def q31mul(a: int, b: int) -> int:
    """Q31 product; the result wraps to 32 bits."""
    return wrap_i32((wrap_i32(a) * wrap_i32(b)) >> 31)


def q31absmul(a: int, b: int) -> int:
    return wrap_i32(-q31mul(a, wrap_i32(-b)))


def q31abs(a: int) -> int:
    """Saturated absolute value: the most negative value maps to the maximum."""
    return ssat(abs(wrap_i32(a)), 32)


def q31max(a: int, b: int) -> int:
    return max(wrap_i32(a), wrap_i32(b))


def q31min(a: int, b: int) -> int:
    return min(wrap_i32(a), wrap_i32(b))


# --- Buffers ---------------------------------------------------------------------


def buf_q31_to_f32(values: Iterable[int]) -> list[float]:
    """Convert a sequence of Q31 samples to floats."""
    return [q31_to_f32(v) for v in values]


def buf_f32_to_q31(values: Iterable[float]) -> list[int]:
    """Convert a sequence of float samples to Q31."""
    return [f32_to_q31(v) for v in values]