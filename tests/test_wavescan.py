import math

import pytest

from loguekit.wavescan import softclip, wave_scan, wave_scan_u32

RAMP = [float(i) for i in range(129)]
SINE = [math.sin(2 * math.pi * i / 128) for i in range(129)]


@pytest.mark.parametrize("k", [0, 1, 17, 64, 127])
def test_scan_hits_table_points(k):
    assert wave_scan(RAMP, k / 128) == pytest.approx(RAMP[k])


def test_scan_interpolates_between_points():
    lo = wave_scan(RAMP, 10 / 128)
    hi = wave_scan(RAMP, 11 / 128)
    mid = wave_scan(RAMP, 10.5 / 128)
    assert mid == pytest.approx((lo + hi) / 2)


def test_scan_wraps_last_segment_to_start():
    y = wave_scan(RAMP, 127.5 / 128)
    assert y == pytest.approx((RAMP[127] + RAMP[0]) / 2)


@pytest.mark.parametrize("x", [0.1, 0.33, 0.75, 0.999])
def test_scan_is_periodic(x):
    assert wave_scan(SINE, x + 1.0) == pytest.approx(wave_scan(SINE, x))
    assert wave_scan(SINE, x + 3.0) == pytest.approx(wave_scan(SINE, x))


@pytest.mark.parametrize("x", [0.05, 0.2, 0.6, 0.9])
def test_scan_follows_sine(x):
    assert wave_scan(SINE, x) == pytest.approx(math.sin(2 * math.pi * x), abs=1e-3)


@pytest.mark.parametrize("k", [0, 5, 100, 127])
def test_u32_scan_hits_table_points(k):
    assert wave_scan_u32(RAMP, k << 24) == RAMP[k]


def test_u32_scan_rejects_out_of_range_phase():
    with pytest.raises(ValueError):
        wave_scan_u32(RAMP, -1)
    with pytest.raises(ValueError):
        wave_scan_u32(RAMP, 1 << 32)


def test_short_table_is_rejected():
    with pytest.raises(ValueError):
        wave_scan([0.0] * 10, 0.5)
    with pytest.raises(ValueError):
        wave_scan_u32([0.0] * 10, 0)


@pytest.mark.parametrize("c", [0.0, 0.05, 1 / 3])
def test_softclip_limits(c):
    assert softclip(c, 10.0) == pytest.approx(1.0 - c)
    assert softclip(c, -10.0) == pytest.approx(-(1.0 - c))


@pytest.mark.parametrize("x", [-0.9, -0.3, 0.0, 0.4, 0.8])
def test_softclip_identity_without_coefficient(x):
    assert softclip(0.0, x) == x


@pytest.mark.parametrize("x", [0.1, 0.5, 0.95, 3.0])
def test_softclip_is_odd(x):
    assert softclip(0.05, -x) == pytest.approx(-softclip(0.05, x))


def test_softclip_is_monotonic():
    values = [softclip(0.05, i / 50 - 1.5) for i in range(151)]
    assert values == sorted(values)