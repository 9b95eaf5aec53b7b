"""Biquad filters in transposed direct form 2, with coefficient designers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Coeffs:
    """Feed-forward and feedback coefficients of a biquad section."""

    ff0: float = 0.0
    ff1: float = 0.0
    ff2: float = 0.0
    fb1: float = 0.0
    fb2: float = 0.0

    @staticmethod
    def wc(fc: float, fsrecip: float) -> float:
        """Normalised frequency for centre frequency ``fc``."""
        return fc * fsrecip

    # -- First order --------------------------------------------------------

    def set_pole_lp(self, pole: float) -> None:
        self.ff0 = 1.0 - pole
        self.fb1 = -pole
        self.fb2 = self.ff2 = self.ff1 = 0.0

    def set_pole_hp(self, pole: float) -> None:
        self.ff0 = 1.0 - pole
        self.fb1 = pole
        self.fb2 = self.ff2 = self.ff1 = 0.0

    def set_fodc(self, pole: float) -> None:
        self.ff0 = 1.0
        self.ff1 = -1.0
        self.fb1 = -pole
        self.fb2 = self.ff2 = 0.0

    def set_folp(self, k: float) -> None:
        """First order low pass; ``k = tan(pi * wc)``."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = self.ff1 = k / kp1
        self.fb1 = km1 / kp1
        self.fb2 = self.ff2 = 0.0

    def set_fohp(self, k: float) -> None:
        """First order high pass; ``k = tan(pi * wc)``."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = 1.0 / kp1
        self.ff1 = -self.ff0
        self.fb1 = km1 / kp1
        self.fb2 = self.ff2 = 0.0

    def set_foap(self, k: float) -> None:
        """First order all pass; ``k = tan(pi * wc)``."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = self.fb1 = km1 / kp1
        self.ff1 = 1.0
        self.fb2 = self.ff2 = 0.0

    def set_foap2(self, wc: float) -> None:
        """Alternative first order all pass, suited to phasers."""
        g1 = 1.0 - wc
        self.ff0 = g1
        self.ff1 = -1.0
        self.fb1 = -g1
        self.fb2 = self.ff2 = 0.0

    # -- Second order -------------------------------------------------------

    def set_sodc(self, pole: float) -> None:
        self.ff0 = self.ff2 = 1.0
        self.ff1 = 2.0
        self.fb1 = -2.0 * pole
        self.fb2 = pole * pole

    def _so_common(self, k: float, q: float) -> tuple[float, float]:
        qk2 = q * k * k
        r = 1.0 / (qk2 + k + q)
        return qk2, r

    def set_solp(self, k: float, q: float) -> None:
        """Second order low pass; flat at ``q = sqrt(2)``."""
        qk2, r = self._so_common(k, q)
        self.ff0 = self.ff2 = qk2 * r
        self.ff1 = 2.0 * self.ff0
        self.fb1 = 2.0 * (qk2 - q) * r
        self.fb2 = (qk2 - k + q) * r

    def set_sohp(self, k: float, q: float) -> None:
        """Second order high pass; flat at ``q = sqrt(2)``."""
        qk2, r = self._so_common(k, q)
        self.ff0 = self.ff2 = q * r
        self.ff1 = -2.0 * self.ff0
        self.fb1 = 2.0 * (qk2 - q) * r
        self.fb2 = (qk2 - k + q) * r

    def set_sobp(self, k: float, q: float) -> None:
        """Second order band pass; ``q`` is centre over bandwidth."""
        qk2, r = self._so_common(k, q)
        self.ff0 = k * r
        self.ff1 = 0.0
        self.ff2 = -self.ff0
        self.fb1 = 2.0 * (qk2 - q) * r
        self.fb2 = (qk2 - k + q) * r

    def set_sobr(self, k: float, q: float) -> None:
        """Second order band reject; ``q`` is centre over bandwidth."""
        qk2, r = self._so_common(k, q)
        self.ff0 = self.ff2 = (qk2 + q) * r
        self.ff1 = self.fb1 = 2.0 * (qk2 - q) * r
        self.fb2 = (qk2 - k + q) * r

    def set_soap1(self, k: float, q: float) -> None:
        """Second order all pass."""
        qk2, r = self._so_common(k, q)
        self.ff0 = self.fb2 = (qk2 - k + q) * r
        self.ff1 = self.fb1 = 2.0 * (qk2 - q) * r
        self.ff2 = 1.0

    def set_soap2(self, delta: float, gamma: float) -> None:
        """Tunable second order all pass; ``delta = cos(2 * pi * wc)``."""
        c = (gamma - 1.0) / (gamma + 1.0)
        d = -delta
        self.ff0 = self.fb2 = -c
        self.ff1 = self.fb1 = d * (1.0 - c)
        self.ff2 = 1.0

    def set_soap3(self, delta: float, radius: float) -> None:
        """Second order all pass for phasers; ``delta = cos(2 * pi * wc)``."""
        a1 = -2.0 * radius * delta
        a2 = radius * radius
        self.ff0 = self.fb2 = a2
        self.ff1 = self.fb1 = a1
        self.ff2 = 1.0


@dataclass(slots=True)
class BiQuad:
    """A biquad section with its coefficients and state."""

    coeffs: Coeffs = field(default_factory=Coeffs)
    z1: float = 0.0
    z2: float = 0.0

    def flush(self) -> None:
        self.z1 = self.z2 = 0.0

    def process_so(self, xn: float) -> float:
        """Run one sample through the full second order section."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn + self.z2 - c.fb1 * acc
        self.z2 = c.ff2 * xn - c.fb2 * acc
        return acc

    def process_fo(self, xn: float) -> float:
        """Run one sample through a first order section."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn - c.fb1 * acc
        return acc

    def process(self, xn: float) -> float:
        return self.process_so(xn)


@dataclass(slots=True)
class ExtBiQuad:
    """Biquad whose output mixes the filtered and dry signals.

    The output is ``w1 * (w0 * y + d0 * x) + d1 * x``.
    """

    coeffs: Coeffs = field(default_factory=Coeffs)
    d0: float = 0.0
    d1: float = 0.0
    w0: float = 0.0
    w1: float = 0.0
    z1: float = 0.0
    z2: float = 0.0

    def flush(self) -> None:
        self.z1 = self.z2 = 0.0

    def _mix(self, acc: float, xn: float) -> float:
        return self.w1 * (self.w0 * acc + self.d0 * xn) + self.d1 * xn

    def process_so(self, xn: float) -> float:
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn + self.z2 - c.fb1 * acc
        self.z2 = c.ff2 * xn - c.fb2 * acc
        return self._mix(acc, xn)

    def process_fo(self, xn: float) -> float:
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn - c.fb1 * acc
        return self._mix(acc, xn)

    def process(self, xn: float) -> float:
        return self.process_so(xn)

    # -- All-pass based low/high pass ----------------------------------------

    def set_foaplp(self, k: float) -> None:
        self.coeffs.set_foap(k)
        self.d0 = self.w0 = 0.5
        self.d1 = 0.0
        self.w1 = 1.0

    def set_foaphp(self, k: float) -> None:
        self.coeffs.set_foap(k)
        self.d0 = 0.5
        self.w0 = -0.5
        self.d1 = 0.0
        self.w1 = 1.0

    def toggle_folphp(self) -> None:
        """Switch between the low pass and high pass responses."""
        self.w0 = -self.w0

    def update_folphp(self, k: float) -> None:
        self.coeffs.set_foap(k)

    # -- All-pass based shelves ------------------------------------------------

    def set_fols(self, k: float, gain: float) -> None:
        """First order low shelf; ``gain`` is a linear amplitude."""
        h = gain - 1.0
        g = 1.0 if gain >= 1.0 else gain
        c = self.coeffs
        c.ff0 = c.fb1 = (k - g) / (k + g)
        c.ff1 = 1.0
        c.fb2 = c.ff2 = 0.0
        self.w0 = 1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0

    def set_fohs(self, k: float, gain: float) -> None:
        """First order high shelf; ``gain`` is a linear amplitude."""
        h = gain - 1.0
        gk = k if gain >= 1.0 else gain * k
        c = self.coeffs
        c.ff0 = c.fb1 = (gk - 1.0) / (gk + 1.0)
        c.ff1 = 1.0
        c.fb2 = c.ff2 = 0.0
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0

    # -- All-pass based band pass/reject -------------------------------------

    def set_soapbr2(self, delta: float, gamma: float) -> None:
        self.coeffs.set_soap2(delta, gamma)
        self.w0 = 1.0
        self.d0 = 1.0
        self.w1 = 0.5
        self.d1 = 0.0

    def set_soapbp2(self, delta: float, gamma: float) -> None:
        self.coeffs.set_soap2(delta, gamma)
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5
        self.d1 = 0.0

    # -- All-pass based peak/notch -------------------------------------------

    def set_soappn2(self, delta: float, gamma: float, gain: float) -> None:
        h = gain - 1.0
        g = 1.0 if gain >= 1.0 else gain
        c_ = (gamma - g) / (gamma + g)
        d = -delta
        c = self.coeffs
        c.ff0 = c.fb2 = -c_
        c.ff1 = c.fb1 = d * (1.0 - c_)
        c.ff2 = 1.0
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0