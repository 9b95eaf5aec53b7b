"""Wave table scanning and soft clipping for oscillators."""

from __future__ import annotations

from collections.abc import Sequence

from .floatmath import clip1m1f, linintf, si_floorf

WAVES_SIZE_EXP = 7
WAVES_SIZE = 1 << WAVES_SIZE_EXP
WAVES_U32_SHIFT = 24
WAVES_FRRECIP = 1.0 / (1 << WAVES_U32_SHIFT)
WAVES_MASK = WAVES_SIZE - 1
WAVES_LUT_SIZE = WAVES_SIZE + 1

_U32_MAX = 0xFFFFFFFF
_FRAC_MASK = (1 << WAVES_U32_SHIFT) - 1


def _check_table(table: Sequence[float]) -> None:
    if len(table) < WAVES_SIZE:
        raise ValueError(
            f"wave table needs at least {WAVES_SIZE} entries, got {len(table)}"
        )


def wave_scan(table: Sequence[float], x: float) -> float:
    """Sample one period of a wave at phase ``x``, interpolating linearly."""
    _check_table(table)
    p = x - si_floorf(x)
    x0f = p * WAVES_SIZE
    base = int(si_floorf(x0f))
    x0 = base & WAVES_MASK
    x1 = (x0 + 1) & WAVES_MASK
    return linintf(x0f - base, table[x0], table[x1])


def wave_scan_u32(table: Sequence[float], x: int) -> float:
    """Sample a wave at a 32-bit unsigned phase (8.24 fixed point index)."""
    if not 0 <= x <= _U32_MAX:
        raise ValueError(f"{x!r} is not a 32-bit unsigned phase")
    _check_table(table)
    x0 = x >> WAVES_U32_SHIFT
    if x0 >= len(table):
        raise ValueError(f"phase index {x0} is beyond a table of {len(table)}")
    x1 = (x0 + 1) & WAVES_MASK
    fr = WAVES_FRRECIP * float(x & _FRAC_MASK)
    return linintf(fr, table[x0], table[x1])


def softclip(c: float, x: float) -> float:
    """Cubic soft clip; ``c`` in [0, 1/3], output in [-(1-c), 1-c]."""
    x = clip1m1f(x)
    return x - c * (x * x * x)