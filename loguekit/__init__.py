"""DSP primitives, wave table lookups and the user program header for logue-style oscillators and effects."""

__version__ = "0.1.0"