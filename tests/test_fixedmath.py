import pytest

from loguekit import fixedmath as fm
from loguekit.fixedmath import Q15_MAX, Q15_MIN, Q31_MAX, Q31_MIN


def pack(hi, lo):
    return fm.wrap_i32(((hi & 0xFFFF) << 16) | (lo & 0xFFFF))


def unpack(x):
    x &= 0xFFFFFFFF
    lo = ((x & 0xFFFF) + 0x8000) % 0x10000 - 0x8000
    hi = ((x >> 16) + 0x8000) % 0x10000 - 0x8000
    return hi, lo


@pytest.mark.parametrize("x", [0, 1, -1, Q31_MAX, Q31_MIN, 12345, -98765])
def test_wrap_i32_is_periodic_and_identity_in_range(x):
    assert fm.wrap_i32(x) == x
    assert fm.wrap_i32(x + 2**32) == x
    assert fm.wrap_i32(x - 2**32) == x


def test_wrap_i32_overflow():
    assert fm.wrap_i32(Q31_MAX + 1) == Q31_MIN


def test_ssat_and_usat():
    assert fm.ssat(40000, 16) == Q15_MAX
    assert fm.ssat(-40000, 16) == Q15_MIN
    assert fm.ssat(100, 16) == 100
    assert fm.usat(-5, 8) == 0
    assert fm.usat(300, 8) == 255
    assert fm.usat(17, 8) == 17


@pytest.mark.parametrize("bits", [0, 33])
def test_ssat_bad_width(bits):
    with pytest.raises(ValueError):
        fm.ssat(1, bits)


def test_usat_bad_width():
    with pytest.raises(ValueError):
        fm.usat(1, 32)


def test_qadd_qsub_saturate():
    assert fm.qadd(Q31_MAX, 1) == Q31_MAX
    assert fm.qsub(Q31_MIN, 1) == Q31_MIN
    assert fm.qadd(1234, 4321) == 1234 + 4321
    assert fm.q31add(Q31_MIN, -1) == Q31_MIN
    assert fm.q31sub(Q31_MAX, -1) == Q31_MAX


def test_q31_conversions_pinned():
    assert fm.q31_to_f32(0x40000000) == 0.5
    assert fm.f32_to_q31(0.5) == 0x40000000
    assert fm.f32_to_q31(1.0) == Q31_MAX
    assert fm.f32_to_q31(-1.0) == Q31_MIN
    assert fm.f32_to_q31(float("nan")) == 0


@pytest.mark.parametrize("q", [0, 1, -1, 0x40000000, Q31_MIN, -123456789])
def test_q31_round_trip(q):
    assert fm.f32_to_q31(fm.q31_to_f32(q)) == q


@pytest.mark.parametrize("q", [0, 1, -1, 1000, -1000, Q15_MIN + 1, Q15_MAX])
def test_q15_round_trip(q):
    assert abs(fm.f32_to_q15(fm.q15_to_f32(q)) - q) <= 1


def test_f32_to_q15_saturates():
    assert fm.f32_to_q15(1.0) == Q15_MAX
    assert fm.f32_to_q15(2.0) == Q15_MAX
    assert fm.f32_to_q15(-2.0) == Q15_MIN


def test_q15_add_sub():
    assert fm.q15add(Q15_MAX, 1) == Q15_MAX
    assert fm.q15sub(Q15_MIN, 1) == Q15_MIN
    assert fm.q15add(100, 200) == 300


def test_q15mul():
    assert fm.q15mul(Q15_MIN, Q15_MIN) == Q15_MIN
    for x in (0, 1000, -1000, 12345):
        assert abs(fm.q15mul(x, Q15_MAX) - x) <= 1


def test_q15abs():
    assert fm.q15abs(Q15_MIN) == Q15_MAX
    assert fm.q15abs(-5) == 5
    assert fm.q15abs(7) == 7


def test_q15absmul_matches_mul_for_exact_products():
    a = 1 << 14
    assert fm.q15absmul(a, a) == fm.q15mul(a, a)


def test_q15_min_max():
    assert fm.q15max(-3, 9) == 9
    assert fm.q15min(-3, 9) == -3


def test_packed_add_sub():
    assert unpack(fm.q15addp(pack(Q15_MAX, 1), pack(1, 1))) == (Q15_MAX, 1 + 1)
    assert unpack(fm.q15subp(pack(Q15_MIN, 10), pack(1, 3))) == (Q15_MIN, 10 - 3)


def test_packed_min_max():
    a, b = pack(-7, 40), pack(12, -2)
    assert unpack(fm.q15maxp(a, b)) == (12, 40)
    assert unpack(fm.q15minp(a, b)) == (-7, -2)


def test_q15absp_leaves_small_positive_unchanged():
    assert fm.q15absp(0x1234) == 0x1234


def test_q31mul():
    assert fm.q31mul(0x40000000, 0x40000000) == 0x20000000
    for x in (0, 1 << 20, -(1 << 20), 0x40000000):
        assert abs(fm.q31mul(x, Q31_MAX) - x) <= 1


def test_q31absmul_matches_mul_for_exact_products():
    assert fm.q31absmul(0x40000000, 0x40000000) == fm.q31mul(0x40000000, 0x40000000)


def test_q31abs_and_min_max():
    assert fm.q31abs(Q31_MIN) == Q31_MAX
    assert fm.q31abs(-42) == 42
    assert fm.q31max(Q31_MIN, 0) == 0
    assert fm.q31min(Q31_MIN, 0) == Q31_MIN


def test_buffer_round_trip():
    samples = [0, 0x40000000, -0x40000000, Q31_MIN, 17]
    floats = fm.buf_q31_to_f32(samples)
    assert len(floats) == len(samples)
    assert floats[1] == 0.5
    assert fm.buf_f32_to_q31(floats) == samples


def test_buffer_empty():
    assert fm.buf_q31_to_f32([]) == []
    assert fm.buf_f32_to_q31(iter([])) == []