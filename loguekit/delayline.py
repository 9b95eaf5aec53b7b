"""Power-of-two sized delay lines for mono and stereo samples."""

from __future__ import annotations

from .floatmath import F32Pair, linintf, pair_linint
from .intmath import nextpow2_u32

_U32_MASK = 0xFFFFFFFF


def _line_size(size: int) -> int:
    rounded = nextpow2_u32(size)
    if rounded == 0:
        raise ValueError(f"delay line size must be in 1..2**31, got {size}")
    return rounded


class DelayLine:
    """A mono delay line; its size is rounded up to a power of two.

    Writing moves the write head backwards, so ``read(1)`` is the most
    recently written sample and ``read(size)`` the oldest one still held.
    """

    __slots__ = ("_line", "fracz", "size", "mask", "write_idx")

    def __init__(self, size: int = 0) -> None:
        self._line: list[float] = []
        self.fracz = 0.0
        self.size = 0
        self.mask = 0
        self.write_idx = 0
        if size:
            self.set_size(size)

    def _index(self, offset: int) -> int:
        if not self._line:
            raise RuntimeError("delay line has no memory; call set_size first")
        return (self.write_idx + offset) & self.mask

    def clear(self) -> None:
        """Zero every stored sample."""
        self._line = [0.0] * self.size

    def set_size(self, size: int) -> None:
        """Allocate fresh memory for at least ``size`` samples."""
        self.size = _line_size(size)
        self.mask = self.size - 1
        self._line = [0.0] * self.size
        self.write_idx = 0

    def write(self, sample: float) -> None:
        self._line[self._index(0)] = sample
        self.write_idx = (self.write_idx - 1) & _U32_MASK

    def read(self, pos: int) -> float:
        return self._line[self._index(pos)]

    def read_frac(self, pos: float) -> float:
        """Read at a fractional position, interpolating linearly."""
        base = int(pos)
        frac = pos - base
        return linintf(frac, self.read(base), self.read(base + 1))

    def read_fracz(self, pos: int, frac: float) -> float:
        """Interpolate towards the sample returned by the previous call."""
        s0 = self.read(pos)
        y = linintf(frac, s0, self.fracz)
        self.fracz = s0
        return y


class DualDelayLine:
    """A delay line holding pairs of samples, such as stereo frames."""

    __slots__ = ("_line", "fracz", "size", "mask", "write_idx")

    def __init__(self, size: int = 0) -> None:
        self._line: list[F32Pair] = []
        self.fracz = F32Pair()
        self.size = 0
        self.mask = 0
        self.write_idx = 0
        if size:
            self.set_size(size)

    def _index(self, offset: int) -> int:
        if not self._line:
            raise RuntimeError("delay line has no memory; call set_size first")
        return (self.write_idx + offset) & self.mask

    def clear(self) -> None:
        """Zero every stored pair."""
        self._line = [F32Pair()] * self.size

    def set_size(self, size: int) -> None:
        """Allocate fresh memory for at least ``size`` pairs."""
        self.size = _line_size(size)
        self.mask = self.size - 1
        self._line = [F32Pair()] * self.size
        self.write_idx = 0

    def write(self, pair: F32Pair) -> None:
        self._line[self._index(0)] = pair
        self.write_idx = (self.write_idx - 1) & _U32_MASK

    def read(self, pos: int) -> F32Pair:
        return self._line[self._index(pos)]

    def read_frac(self, pos: float) -> F32Pair:
        base = int(pos)
        frac = pos - base
        return pair_linint(frac, self.read(base), self.read(base + 1))

    def read_fracz(self, pos: int, frac: float) -> F32Pair:
        p0 = self.read(pos)
        y = pair_linint(frac, p0, self.fracz)
        self.fracz = p0
        return y

    def read0(self, pos: int) -> float:
        return self.read(pos).a

    def read1(self, pos: int) -> float:
        return self.read(pos).b

    def read0_frac(self, pos: float) -> float:
        base = int(pos)
        frac = pos - base
        return linintf(frac, self.read0(base), self.read0(base + 1))

    def read0_fracz(self, pos: int, frac: float) -> float:
        f0 = self.read0(pos)
        y = linintf(frac, f0, self.fracz.a)
        self.fracz = F32Pair(f0, self.fracz.b)
        return y

    def read1_frac(self, pos: float) -> float:
        base = int(pos)
        frac = pos - base
        return linintf(frac, self.read1(base), self.read1(base + 1))

    def read1_fracz(self, pos: int, frac: float) -> float:
        f1 = self.read1(pos)
        y = linintf(frac, f1, self.fracz.b)
        self.fracz = F32Pair(self.fracz.a, f1)
        return y