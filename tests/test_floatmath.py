import math

import pytest

from loguekit import floatmath as fm
from loguekit.floatmath import F32Pair


def _grid(lo, hi, n):
    step = (hi - lo) / n
    return [lo + step * i for i in range(n + 1)]


# --- F32Pair ---------------------------------------------------------------


def test_pair_add_sub_roundtrip():
    p = F32Pair(1.5, -2.25)
    q = F32Pair(0.5, 4.0)
    assert p.add(q).sub(q) == p
    assert p.add(q) == F32Pair(2.0, 1.75)


def test_pair_mul_and_scalars():
    p = F32Pair(2.0, -3.0)
    assert p.mul(F32Pair(0.5, 2.0)) == F32Pair(1.0, -6.0)
    assert p.add_scalar(1.0) == F32Pair(3.0, -2.0)
    assert p.mul_scalar(-2.0) == F32Pair(-4.0, 6.0)


def test_pair_linint_endpoints_and_midpoint():
    p0 = F32Pair(0.0, 10.0)
    p1 = F32Pair(4.0, -10.0)
    assert fm.pair_linint(0.0, p0, p1) == p0
    assert fm.pair_linint(1.0, p0, p1) == p1
    mid = fm.pair_linint(0.5, p0, p1)
    assert mid == F32Pair(2.0, 0.0)


# --- selection / bits ------------------------------------------------------


@pytest.mark.parametrize("a,expected", [(0.0, "b"), (1.0, "b"), (-1e-9, "c"), (math.nan, "c")])
def test_fsel(a, expected):
    assert fm.fsel(a, "b", "c") == expected
    assert fm.fselb(a) == (1 if expected == "b" else 0)


def test_float_sign_bit():
    assert fm.float_is_neg(-1.0) is True
    assert fm.float_is_neg(-0.0) is True
    assert fm.float_is_neg(0.0) is False
    assert fm.float_is_neg(3.0) is False


def test_float_fields_of_one_and_a_half():
    assert fm.float_exponent(1.0) == 127
    assert fm.float_mantissa(1.0) == 0
    assert fm.float_mantissa(1.5) == 1 << 22
    assert fm.float_exponent(2.0) == fm.float_exponent(1.0) + 1


def test_copysign_and_fabs():
    assert fm.si_copysignf(2.0, -1.0) == -2.0
    assert fm.si_copysignf(-2.0, 1.0) == 2.0
    assert fm.si_fabsf(-3.25) == 3.25
    assert math.copysign(1.0, fm.si_fabsf(-0.0)) == 1.0


@pytest.mark.parametrize("x", [0.0, 0.4, 3.7, 10.0, 12345.9])
def test_floor_ceil_for_positive(x):
    assert fm.si_floorf(x) == math.floor(x)
    assert fm.si_ceilf(x) == math.floor(x) + 1


@pytest.mark.parametrize("x", [0.4, 2.5, -2.5, 7.49, -7.51])
def test_round_half_away_from_zero(x):
    assert fm.si_roundf(x) == math.copysign(math.floor(abs(x) + 0.5), x)


# --- clamping --------------------------------------------------------------


@pytest.mark.parametrize("x", [-5.0, -1.0, -0.3, 0.0, 0.7, 1.0, 3.0])
def test_clip_ranges(x):
    assert fm.clip0f(x) == max(x, 0.0)
    assert fm.clip1f(x) == min(x, 1.0)
    assert fm.clip01f(x) == min(max(x, 0.0), 1.0)
    assert fm.clipm1f(x) == max(x, -1.0)
    assert fm.clip1m1f(x) == min(max(x, -1.0), 1.0)


@pytest.mark.parametrize("x", [-2.0, 0.1, 0.5, 0.9, 2.0])
def test_clip_min_max(x):
    assert fm.clipminmaxf(0.1, x, 0.9) == min(max(x, 0.1), 0.9)
    assert fm.clipmaxf(x, 0.5) == min(x, 0.5)
    assert fm.clipminf(0.5, x) == max(x, 0.5)
    assert fm.clampfsel(0.1, x, 0.9) == fm.clipminmaxf(0.1, x, 0.9)


# --- approximations --------------------------------------------------------


def test_fastersinf_close_to_sine():
    for x in _grid(-math.pi, math.pi, 200):
        assert fm.fastersinf(x) == pytest.approx(math.sin(x), abs=0.01)


def test_fastercosf_close_to_cosine():
    for x in _grid(-math.pi, math.pi, 200):
        assert fm.fastercosf(x) == pytest.approx(math.cos(x), abs=0.01)


def test_full_range_sine_and_cosine():
    for x in _grid(-20.0, 20.0, 400):
        assert fm.fastersinfullf(x) == pytest.approx(math.sin(x), abs=0.01)
        assert fm.fastercosfullf(x) == pytest.approx(math.cos(x), abs=0.01)


def test_fastertanfullf():
    for x in _grid(-1.0, 1.0, 50):
        assert fm.fastertanfullf(x) == pytest.approx(math.tan(x), abs=0.02)


def test_fasterpow2_and_exp():
    for p in _grid(-10.0, 10.0, 80):
        assert fm.fasterpow2f(p) == pytest.approx(2.0**p, rel=0.1)
        assert fm.fasterexpf(p / 2) == pytest.approx(math.exp(p / 2), rel=0.1)


def test_fasterpow2_clips_low_exponents():
    assert fm.fasterpow2f(-500.0) == fm.fasterpow2f(-126.0)


def test_fasterlog2_and_pow():
    for x in [0.01, 0.3, 1.0, 2.0, 7.5, 1000.0]:
        assert fm.fasterlog2f(x) == pytest.approx(math.log2(x), abs=0.1)
    for x in [0.5, 2.0, 3.0]:
        assert fm.fasterpowf(x, 1.5) == pytest.approx(x**1.5, rel=0.15)


def test_fasteratan2f():
    for i in range(36):
        theta = -math.pi + 0.1 + i * (2 * math.pi - 0.2) / 35
        y, x = math.sin(theta), math.cos(theta)
        assert fm.fasteratan2f(y, x) == pytest.approx(math.atan2(y, x), abs=0.1)


def test_fastertanhf_non_negative():
    for x in _grid(0.0, 3.0, 60):
        assert fm.fastertanhf(x) == pytest.approx(math.tanh(x), abs=0.01)


# --- conversions and interpolation ----------------------------------------


def test_ampdb_negative_sentinel_and_roundtrip():
    assert fm.ampdbf(-1.0) == -999.0
    assert fm.ampdbf(0.0) == -math.inf
    for amp in [0.01, 0.5, 1.0, 4.0]:
        assert fm.dbampf(fm.ampdbf(amp)) == pytest.approx(amp)
    assert fm.ampdbf(1.0) == 0.0
    assert fm.dbampf(0.0) == 1.0


def test_linintf():
    assert fm.linintf(0.0, 2.0, 6.0) == 2.0
    assert fm.linintf(1.0, 2.0, 6.0) == 6.0
    assert fm.linintf(0.25, 2.0, 6.0) == 3.0


def test_cosintf_endpoints_and_monotonic():
    assert fm.cosintf(0.0, 1.0, 5.0) == pytest.approx(1.0, abs=0.01)
    assert fm.cosintf(1.0, 1.0, 5.0) == pytest.approx(5.0, abs=0.01)
    values = [fm.cosintf(fr, 1.0, 5.0) for fr in _grid(0.0, 1.0, 20)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert fm.cosintf(0.5, 1.0, 5.0) == pytest.approx(3.0, abs=0.02)