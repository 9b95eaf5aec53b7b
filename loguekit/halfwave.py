"""Half-wave table lookups, band-limited wave banks and note-to-phase conversion."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .floatmath import clipmaxf, linintf, si_floorf

WT_SIZE_EXP = 7
WT_SIZE = 1 << WT_SIZE_EXP
WT_MASK = WT_SIZE - 1
WT_LUT_SIZE = WT_SIZE + 1
WT_NOTES_CNT = 7

SAMPLERATE = 48000
SAMPLERATE_RECIPF = 2.08333333333333e-005

MIDI_TO_HZ_SIZE = 152
NOTE_MOD_FSCALE = 0.00392156862745098
NOTE_MAX_HZ = 23679.643054

Lookup = Callable[[Sequence[float], float], float]


def _check_len(table: Sequence[float], needed: int) -> None:
    if len(table) < needed:
        raise ValueError(f"table needs at least {needed} entries, got {len(table)}")


def _half_phase(x: float) -> tuple[float, int]:
    """Position in a table holding half a period, and its integer part."""
    p = x - si_floorf(x)
    x0f = 2.0 * p * WT_SIZE
    return x0f, int(x0f)


def sine_lookup(table: Sequence[float], x: float) -> float:
    """sin(2*pi*x) from a table holding the first half period.

    The second half is the first one negated.
    """
    _check_len(table, WT_SIZE)
    x0f, x0p = _half_phase(x)
    x0 = x0p & WT_MASK
    x1 = (x0 + 1) & WT_MASK
    y0 = linintf(x0f - x0p, table[x0], table[x1])
    return y0 if x0p < WT_SIZE else -y0


def cosine_lookup(table: Sequence[float], x: float) -> float:
    """cos(2*pi*x) from a sine half-period table."""
    return sine_lookup(table, x + 0.25)


def mirrored_lookup(table: Sequence[float], x: float) -> float:
    """Odd-symmetric wave (saw, square) from a half-period table.

    The second half reads the table backwards and negates the result.
    """
    _check_len(table, WT_LUT_SIZE)
    x0f, x0p = _half_phase(x)
    x0, x1, sign = x0p, x0p + 1, 1.0
    if x0p >= WT_SIZE:
        x0 = WT_SIZE - (x0p & WT_MASK)
        x1 = x0 - 1
        sign = -1.0
    return sign * linintf(x0f - x0p, table[x0], table[x1])


def parabolic_lookup(table: Sequence[float], x: float) -> float:
    """Even-symmetric parabolic wave from a half-period table.

    The second half reads the table backwards without negation.
    """
    _check_len(table, WT_LUT_SIZE)
    x0f, x0p = _half_phase(x)
    x0 = x0p if x0p <= WT_SIZE else WT_SIZE - (x0p & WT_MASK)
    if x0p < WT_SIZE - 1:
        x1 = (x0 + 1) & WT_MASK
    elif x0p >= WT_SIZE:
        x1 = (x0 - 1) & WT_MASK
    else:
        x1 = x0 + 1
    return linintf(x0f - x0p, table[x0], table[x1])


def banked_lookup(
    bank: Sequence[Sequence[float]], x: float, idx: float, lookup: Lookup
) -> float:
    """Look up ``x`` in a bank of band-limited tables.

    An integer ``idx`` selects one table; a fractional one interpolates
    between the tables at ``int(idx)`` and ``int(idx) + 1``.
    """
    if idx < 0:
        raise ValueError(f"wave index must not be negative, got {idx}")
    base = int(idx)
    if base >= len(bank):
        raise ValueError(f"wave index {idx} is beyond a bank of {len(bank)}")
    y0 = lookup(bank[base], x)
    fr = idx - base
    if fr == 0:
        return y0
    if base + 1 >= len(bank):
        raise ValueError(f"wave index {idx} needs a table beyond the bank")
    y1 = lookup(bank[base + 1], x)
    return linintf(fr, y0, y1)


def scaled_lookup(
    table: Sequence[float], x: float, scale: float, base: float = 0.0
) -> float:
    """Interpolated lookup at index ``(x - base) * scale``.

    Serves the function tables (log, tan, sqrt(-2 log), bit depth, pow2).
    """
    idxf = (x - base) * scale
    if idxf < 0:
        raise ValueError(f"lookup index {idxf} is negative")
    idx = int(idxf)
    frac = idxf - idx
    if idx == len(table) - 1 and frac == 0:
        return table[idx]
    if idx + 1 >= len(table):
        raise ValueError(f"lookup index {idxf} is beyond a table of {len(table)}")
    return linintf(frac, table[idx], table[idx + 1])


def _note_hz(hz_table: Sequence[float], note: int) -> float:
    return hz_table[min(note, len(hz_table) - 1)]


def w0_for_note(hz_table: Sequence[float], note: int, mod: int) -> float:
    """Phase increment per sample for a note and a fine offset.

    ``note`` and ``mod`` are bytes; ``mod`` moves linearly towards the next
    note, and the frequency is capped at ``NOTE_MAX_HZ``.
    """
    if not 0 <= note <= 0xFF:
        raise ValueError(f"note must be a byte, got {note}")
    if not 0 <= mod <= 0xFF:
        raise ValueError(f"mod must be a byte, got {mod}")
    if not hz_table:
        raise ValueError("note frequency table is empty")
    f0 = _note_hz(hz_table, note)
    f1 = _note_hz(hz_table, (note + 1) & 0xFF)
    f = clipmaxf(linintf(mod * NOTE_MOD_FSCALE, f0, f1), NOTE_MAX_HZ)
    return f * SAMPLERATE_RECIPF