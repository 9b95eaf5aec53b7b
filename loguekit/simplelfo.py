"""A low frequency oscillator driven by a wrapping Q31 phase accumulator."""

from __future__ import annotations

from dataclasses import dataclass

from .fixedmath import Q31_MIN, f32_to_q31, q31_to_f32, q31abs, qadd, qsub, wrap_i32

_QUARTER = 0x40000000


def _parabolic_sine(phi: float, scale: float) -> float:
    return scale * phi * (abs(phi) - 1.0)


@dataclass(slots=True)
class SimpleLFO:
    """LFO whose phase runs over the whole signed 32-bit range.

    ``phi0`` is the current phase and ``w0`` the per-cycle increment, both
    as Q31 values; the phase starts at the most negative value.
    """

    phi0: int = Q31_MIN
    w0: int = 0

    def cycle(self) -> None:
        """Advance the phase by one step."""
        self.phi0 = wrap_i32(self.phi0 + self.w0)

    def reset(self) -> None:
        """Return the phase to its starting point."""
        self.phi0 = Q31_MIN

    def set_f0(self, f0: float, fsrecip: float) -> None:
        """Set the rate from a frequency and the reciprocal of the sample rate."""
        self.w0 = f32_to_q31(2.0 * f0 * fsrecip)

    def set_w0(self, w: float) -> None:
        """Set the rate as a fraction of a full period per step."""
        self.w0 = f32_to_q31(2.0 * w)

    def _offset_phase(self, offset: float) -> int:
        return wrap_i32(self.phi0 + f32_to_q31(2.0 * offset))

    def _shifted_phase(self, offset: float) -> int:
        return wrap_i32(self.phi0 + wrap_i32(f32_to_q31(offset) << 1))

    # --- Sinusoids -----------------------------------------------------------

    def sine_bi(self) -> float:
        return _parabolic_sine(q31_to_f32(self.phi0), 4.0)

    def sine_uni(self) -> float:
        return 0.5 + _parabolic_sine(q31_to_f32(self.phi0), 2.0)

    def sine_bi_off(self, offset: float) -> float:
        return _parabolic_sine(q31_to_f32(self._offset_phase(offset)), 4.0)

    def sine_uni_off(self, offset: float) -> float:
        return 0.5 + _parabolic_sine(q31_to_f32(self._offset_phase(offset)), 2.0)

    # --- Triangles -----------------------------------------------------------

    def triangle_bi(self) -> float:
        return q31_to_f32(wrap_i32(qsub(q31abs(self.phi0), _QUARTER) << 1))

    def triangle_uni(self) -> float:
        return abs(q31_to_f32(self.phi0))

    def triangle_bi_off(self, offset: float) -> float:
        phi = self._offset_phase(offset)
        return q31_to_f32(wrap_i32(qsub(q31abs(phi), _QUARTER) << 1))

    def triangle_uni_off(self, offset: float) -> float:
        return abs(q31_to_f32(self._offset_phase(offset)))

    # --- Saws ----------------------------------------------------------------

    def saw_bi(self) -> float:
        return q31_to_f32(self.phi0)

    def saw_uni(self) -> float:
        return q31_to_f32(qadd(self.phi0 >> 1, _QUARTER))

    def saw_bi_off(self, offset: float) -> float:
        return q31_to_f32(self._shifted_phase(offset))

    def saw_uni_off(self, offset: float) -> float:
        """Half the raw (unscaled) shifted Q31 phase plus one half."""
        return 0.5 * self._shifted_phase(offset) + 0.5

    # --- Squares -------------------------------------------------------------

    def square_bi(self) -> float:
        return -1.0 if self.phi0 < 0 else 1.0

    def square_uni(self) -> float:
        return 0.0 if self.phi0 < 0 else 1.0

    def square_bi_off(self, offset: float) -> float:
        return -1.0 if self._shifted_phase(offset) < 0 else 1.0

    def square_uni_off(self, offset: float) -> float:
        return 0.0 if self._shifted_phase(offset) < 0 else 1.0