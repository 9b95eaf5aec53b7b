# loguekit

Building blocks for user oscillators and effects on the logue family of
synthesizers, written in plain Python. You can use them to prototype, analyse
or test DSP code before it goes onto the hardware.

## Installation

```
pip install loguekit
```

The package has no dependencies outside the standard library.

## Modules

- `loguekit.floatmath`: float helpers.
  - Selection and clipping: `fsel`, `clip1m1f`, `clipminmaxf`, `clip01f`, and others.
  - Interpolation: `linintf` and `cosintf`.
  - Sign and bit helpers: `si_fabsf`, `si_copysignf`, `si_roundf`, `float_exponent`, and others.
  - Fast approximations: `fastersinf`, `fastercosfullf`, `fasterpow2f`, `fasterlog2f`, `fasteratan2f`, `fastertanhf`.
  - Decibel conversion: `ampdbf` and `dbampf`.
  - Stereo pairs: the immutable `F32Pair`, with `pair_linint` for interpolating between two pairs.
- `loguekit.intmath`: integer helpers `clipmax`, `clipmin` and `clipminmax`, plus `nextpow2_u32` and `ispow2_u32` with 32-bit unsigned wrap-around.
- `loguekit.fixedmath`: Q15/Q31 fixed-point arithmetic.
  - Saturation and saturating arithmetic: `ssat`, `usat`, `qadd`, `qsub`.
  - Float conversions: `q31_to_f32`, `f32_to_q31`, `q15_to_f32`, `f32_to_q15`.
  - Q15 and Q31 operations: add, subtract, multiply, absolute value, min and max. The `q15*p` functions work on packed Q15 pairs.
  - Whole-buffer conversion: `buf_q31_to_f32` and `buf_f32_to_q31`.
- `loguekit.biquad`: `BiQuad` and `ExtBiQuad` filters in transposed direct form II.
  - `Coeffs` sets up the designs: pole low/high pass, DC blockers, first and second order low pass, high pass, band pass, band reject and all pass.
  - `ExtBiQuad` adds all-pass based low/high pass, shelving, band pass/reject and peak/notch designs.
- `loguekit.delayline`: `DelayLine` and `DualDelayLine` (pairs of samples). Both round their size up to a power of two and offer fractional reads (`read_frac`, `read_fracz`).
- `loguekit.simplelfo`: `SimpleLFO`, a Q31 phase-accumulator LFO.
  - Shapes: sine, triangle, saw and square.
  - Each shape comes in bipolar and unipolar form, with or without a phase offset.
- `loguekit.wavescan`: wave table scanning.
  - `wave_scan` takes a float phase.
  - `wave_scan_u32` takes a 32-bit 8.24 phase.
  - `softclip` is a cubic soft clipper.
- `loguekit.halfwave`: lookups in half-period tables.
  - `sine_lookup` and `cosine_lookup`.
  - `mirrored_lookup` for saw and square.
  - `parabolic_lookup`.
  - `banked_lookup`, which interpolates across a bank of band-limited tables.
  - `scaled_lookup` for function tables.
  - `w0_for_note`, which turns a note and fine offset into a phase increment at 48 kHz.
- `loguekit.header`: the packed 1 KiB user program header.
  - `ProgramHeader` and `ProgramParam`, each with `pack`/`unpack`.
  - `Module`, `Platform` and `ParamType` enums.
  - `target`, `is_platform_compatible`, `is_api_compatible`, and `api_major`/`api_minor`/`api_patch`.

## Example

```python
from loguekit.biquad import BiQuad
from loguekit.simplelfo import SimpleLFO
from loguekit.fixedmath import buf_f32_to_q31

lfo = SimpleLFO()
lfo.set_f0(2.0, 1.0 / 48000)

lp = BiQuad()
lp.coeffs.set_pole_lp(0.9)

out = []
for _ in range(64):
    lfo.cycle()
    out.append(lp.process(lfo.sine_bi()))

q31 = buf_f32_to_q31(out)
```

Reading and writing a program header:

```python
from loguekit.header import Module, Platform, ProgramHeader, ProgramParam, target

header = ProgramHeader(
    target=target(Platform.NUTEKTDIGITAL, Module.OSC),
    name="mysine",
    params=(ProgramParam(0, 100, name="Drive"),),
)
raw = header.pack()
assert ProgramHeader.unpack(raw) == header
```

## What it does not do

- There are no oscillator or effect runtimes. The package has no hook tables, no parameter ids for effects or oscillators, and no base class for writing a unit.
- It does not compile, link or package units into archives for the device.
- It ships no lookup tables, such as sine, band-limited saw, square and parabolic banks, or note-to-Hz tables. The functions in `loguekit.halfwave` and `loguekit.wavescan` take the tables as arguments.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```