"""Floating point helpers: clipping, selection, fast approximations and interpolation."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

M_E = 2.718281828459045
M_LOG2E = 1.44269504088896
M_LOG10E = 0.4342944819032518
M_LN2 = 0.6931471805599453094
M_LN10 = 2.30258509299404568402
M_PI = 3.141592653589793
M_TWOPI = 6.283185307179586
M_PI_2 = 1.5707963267948966
M_PI_4 = 0.7853981633974483
M_1_PI = 0.3183098861837907
M_2_PI = 0.6366197723675814
M_4_PI = 1.2732395447351627
M_1_TWOPI = 0.15915494309189534
M_2_SQRTPI = 1.1283791670955126
M_4_PI2 = 0.40528473456935109
M_SQRT2 = 1.41421356237309504880
M_1_SQRT2 = 0.7071067811865475

F32_FRAC_MASK = (1 << 23) - 1
F32_EXP_MASK = ((1 << 9) - 1) << 23
F32_SIGN_MASK = 0x80000000

_U32_MASK = 0xFFFFFFFF
_U32_MAX = 0xFFFFFFFF


def _f32_bits(x: float) -> int:
    """Bit pattern of ``x`` stored as an IEEE-754 single."""
    return struct.unpack("<I", struct.pack("<f", x))[0]


def _bits_f32(bits: int) -> float:
    """Single precision value with the given bit pattern."""
    return struct.unpack("<f", struct.pack("<I", bits & _U32_MASK))[0]


@dataclass(frozen=True, slots=True)
class F32Pair:
    """A pair of floats, typically a stereo sample."""

    a: float = 0.0
    b: float = 0.0

    def add(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a + other.a, self.b + other.b)

    def sub(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a - other.a, self.b - other.b)

    def mul(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a * other.a, self.b * other.b)

    def add_scalar(self, scalar: float) -> F32Pair:
        return F32Pair(self.a + scalar, self.b + scalar)

    def mul_scalar(self, scalar: float) -> F32Pair:
        return F32Pair(self.a * scalar, self.b * scalar)


def pair_linint(fr: float, p0: F32Pair, p1: F32Pair) -> F32Pair:
    """Linear interpolation between two pairs."""
    frinv = 1.0 - fr
    return F32Pair(frinv * p0.a + fr * p1.a, frinv * p0.b + fr * p1.b)


# --- Selection and bit inspection ------------------------------------------


def fsel(a: float, b: float, c: float) -> float:
    """Return ``b`` when ``a >= 0``, otherwise ``c``."""
    return b if a >= 0 else c


def fselb(a: float) -> int:
    """Return 1 when ``a >= 0``, otherwise 0."""
    return 1 if a >= 0 else 0


def float_is_neg(x: float) -> bool:
    """True when the sign bit of ``x`` is set."""
    return (_f32_bits(x) >> 31) != 0


def float_mantissa(x: float) -> int:
    """Raw 23-bit mantissa field of ``x`` as a single."""
    return _f32_bits(x) & F32_FRAC_MASK


def float_exponent(x: float) -> int:
    """Raw 8-bit biased exponent field of ``x`` as a single."""
    return (_f32_bits(x) >> 23) & 0xFF


def si_copysignf(x: float, y: float) -> float:
    """Magnitude of ``x`` with the sign of ``y``."""
    return math.copysign(x, y)


def si_fabsf(x: float) -> float:
    """Absolute value by clearing the sign."""
    return math.fabs(x)


def _to_u32_saturating(x: float) -> int:
    value = math.trunc(x)
    return min(max(value, 0), _U32_MAX)


def si_floorf(x: float) -> float:
    """Floor for non-negative values (truncation to an unsigned integer)."""
    return float(_to_u32_saturating(x))


def si_ceilf(x: float) -> float:
    """Truncation to an unsigned integer plus one."""
    return float((_to_u32_saturating(x) + 1) & _U32_MASK)


def si_roundf(x: float) -> float:
    """Round half away from zero."""
    return float(math.trunc(x + si_copysignf(0.5, x)))


# --- Clamping --------------------------------------------------------------


def clampfsel(lo: float, x: float, hi: float) -> float:
    x = fsel(x - lo, x, lo)
    return fsel(x - hi, hi, x)


def clampminfsel(lo: float, x: float) -> float:
    return fsel(x - lo, x, lo)


def clampmaxfsel(x: float, hi: float) -> float:
    return fsel(x - hi, hi, x)


def clipmaxf(x: float, m: float) -> float:
    return clampmaxfsel(x, m)


def clipminf(m: float, x: float) -> float:
    return clampminfsel(m, x)


def clipminmaxf(lo: float, x: float, hi: float) -> float:
    return clampfsel(lo, x, hi)


def clip0f(x: float) -> float:
    return clampminfsel(0.0, x)


def clip1f(x: float) -> float:
    return clampmaxfsel(x, 1.0)


def clip01f(x: float) -> float:
    return clampfsel(0.0, x, 1.0)


def clipm1f(x: float) -> float:
    return clampminfsel(-1.0, x)


def clip1m1f(x: float) -> float:
    return clampfsel(-1.0, x, 1.0)


# --- Fast approximations ---------------------------------------------------


def fastersinf(x: float) -> float:
    """Approximate sin(x) for x in [-pi, pi]."""
    q = 0.77633023248007499
    p = math.copysign(0.22308510060189463, x)
    qpprox = M_4_PI * x - M_4_PI2 * x * math.fabs(x)
    return qpprox * (q + p * qpprox)


def fastercosf(x: float) -> float:
    """Approximate cos(x) for x in [-pi, pi]."""
    p = 0.54641335845679634
    qpprox = 1.0 - M_2_PI * math.fabs(x)
    return qpprox + p * qpprox * (1.0 - qpprox * qpprox)


def _half_turn(x: float) -> float:
    k = math.trunc(x * M_1_TWOPI)
    half = -0.5 if x < 0 else 0.5
    return (half + k) * M_TWOPI


def fastersinfullf(x: float) -> float:
    """Approximate sin(x) over the full range."""
    return fastersinf(_half_turn(x) - x)


def fastercosfullf(x: float) -> float:
    """Approximate cos(x) over the full range."""
    return fastersinfullf(x + M_PI_2)


def fastertanfullf(x: float) -> float:
    """Approximate tan(x) over the full range."""
    xnew = x - _half_turn(x)
    return fastersinf(xnew) / fastercosf(xnew)


def fasterpow2f(p: float) -> float:
    """Approximate 2**p by building the float's bit pattern."""
    clipp = -126.0 if p < -126 else p
    bits = int((1 << 23) * (clipp + 126.94269504))
    return _bits_f32(bits)


def fasterexpf(p: float) -> float:
    """Approximate e**p."""
    return fasterpow2f(1.442695040 * p)


def fasterlog2f(x: float) -> float:
    """Approximate log2(x) from the float's bit pattern."""
    y = float(_f32_bits(x)) * 1.1920928955078125e-7
    return y - 126.94269504


def fasterpowf(x: float, p: float) -> float:
    """Approximate x**p."""
    return fasterpow2f(p * fasterlog2f(x))


def fasteratan2f(y: float, x: float) -> float:
    """Approximate atan2(y, x)."""
    coeff_1 = M_PI_4
    coeff_2 = 3 * coeff_1
    abs_y = math.fabs(y) + 1e-10
    if x >= 0:
        r = (x - abs_y) / (x + abs_y)
        angle = coeff_1 - coeff_1 * r
    else:
        r = (x + abs_y) / (abs_y - x)
        angle = coeff_2 - coeff_1 * r
    return -angle if y < 0 else angle


def fastertanhf(x: float) -> float:
    """Rational approximation of tanh(x) for non-negative x."""
    num = -0.67436811832e-5 + (
        0.2468149110712040
        + (0.583691066395175e-1 + 0.3357335044280075e-1 * x) * x
    ) * x
    den = 0.2464845986383725 + (
        0.609347197060491e-1
        + (0.1086202599228572 + 0.2874707922475963e-1 * x) * x
    ) * x
    return num / den


# --- Conversions -----------------------------------------------------------


def ampdbf(amp: float) -> float:
    """Amplitude to decibels; negative amplitudes map to -999."""
    if amp < 0.0:
        return -999.0
    if amp == 0.0:
        return -math.inf
    return 20.0 * math.log10(amp)


def dbampf(db: float) -> float:
    """Decibels to amplitude."""
    return math.pow(10.0, 0.05 * db)


# --- Interpolation ---------------------------------------------------------


def linintf(fr: float, x0: float, x1: float) -> float:
    """Linear interpolation from ``x0`` to ``x1`` by ``fr``."""
    return x0 + fr * (x1 - x0)


def cosintf(fr: float, x0: float, x1: float) -> float:
    """Cosine interpolation from ``x0`` to ``x1`` by ``fr``."""
    tmp = (1.0 - fastercosfullf(fr * M_PI)) * 0.5
    return x0 + tmp * (x1 - x0)