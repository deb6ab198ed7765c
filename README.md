# iirdesign

Design infinite impulse response (IIR) digital filters in pure Python, with
no dependencies outside the standard library.

Filters are built from analog low pass prototypes (pole/zero layouts), mapped
to the z-plane with a bilinear transform and realised as a cascade of
second-order sections (biquads).

## Modules

- `iirdesign.butterworth` — maximally flat response: `LowPass`, `HighPass`,
  `BandPass`, `BandStop`, `LowShelf`, `HighShelf`, `BandShelf`, and the
  prototypes `AnalogLowPass` and `AnalogLowShelf`.
- `iirdesign.elliptic` — ripple in both pass and stop band: `LowPass`,
  `HighPass`, `BandPass`, `BandStop`, the prototype `AnalogLowPass`, and
  `elliptic_k`, the complete elliptic integral of the first kind.
- `iirdesign.bessel` — maximally flat group delay: `LowPass`, `HighPass`,
  `BandPass`, `BandStop`, `LowShelf`, the prototypes `AnalogLowPass` and
  `AnalogLowShelf`, and `reverse_bessel(k, n)`.
- `iirdesign.legendre` — "Optimum-L", steepest monotonic roll-off: `LowPass`,
  `HighPass`, `BandPass`, `BandStop`, the prototype `AnalogLowPass`,
  `legendre_polynomial(n)` and `optimum_l_coefficients(n)`.
- `iirdesign.custom` — `OnePole` and `TwoPole` sections placed from poles and
  zeros given directly.
- `iirdesign.biquad` — `Biquad`, a second-order section, and
  `BiquadPoleState`, its poles, zeros and gain.
- `iirdesign.cascade` — `Cascade`, a chain of biquads built from a layout.
- `iirdesign.layout` — `Layout`, `PoleZeroPair`, `ComplexPair`.
- `iirdesign.transforms` — `low_pass_transform`, `high_pass_transform`,
  `band_pass_transform`, `band_stop_transform`: analog layout to digital
  layout.
- `iirdesign.rootfinder` — Laguerre's method: `find_roots`, `laguerre`,
  `sort_by_imag`, `evaluate`, and `ConvergenceError`.
- `iirdesign.params` — `ParamInfo` descriptions of filter parameters (range,
  default, mapping to a 0..1 control value, display text), `ParamId`, and
  ready-made descriptions such as `sample_rate_param()`,
  `cutoff_frequency_param()` and `q_param()`.

## Installation

```
pip install .
```

## Usage

The filter classes take an optional maximum order (default 16) and are set up
with the order first, then the sample rate and frequencies in Hz:

```python
from iirdesign import bessel, butterworth, elliptic

lp = butterworth.LowPass(4)
lp.setup(4, 44100, 2000)          # order, sample rate, cutoff
print(len(lp), "stages")          # 2
print(abs(lp.response(2000 / 44100)))   # about 0.707 at the cutoff

bp = elliptic.BandPass()
bp.setup(4, 44100, 1000, 400, 1.0, 0.0)  # order, rate, centre, width, ripple dB, rolloff

shelf = bessel.LowShelf()
shelf.setup(3, 44100, 500, 6)     # order, rate, corner, gain dB
```

`response` takes a frequency as a fraction of the sample rate (0 to 0.5) and
returns the complex response. `pole_zeros()` returns a `BiquadPoleState` for
each active stage. Indexing a cascade gives its `Biquad` stages, whose
coefficients are the attributes `a0`, `a1`, `a2`, `b0`, `b1`, `b2`
(`a1` onwards are stored divided by `a0`). After `setup`, the analog prototype
and the digital layout are available as `analog` and `digital`.

Sections from poles and zeros given directly:

```python
import math
from iirdesign.custom import TwoPole

section = TwoPole()
section.setup(1.0, 0.9, math.pi / 4, 1.0, math.pi / 2)  # scale, pole r/angle, zero r/angle
```

Roots of a polynomial, coefficients lowest order first:

```python
from iirdesign.rootfinder import find_roots

find_roots([2, -3, 1])   # roots of x**2 - 3x + 2
```

Parameter descriptions:

```python
from iirdesign.params import cutoff_frequency_param

fc = cutoff_frequency_param()
fc.format(2000)               # '2000 Hz'
fc.to_control_value(2000)     # position on a 0..1 control
fc.clamp(50000)               # 22040
```

Invalid input raises `ValueError` (an order outside 1..max_order, a layout
that needs more stages than the cascade holds, conjugate pairs that do not
match); `ConvergenceError` is raised when a root or factor search does not
settle.

## What the package does not do

- It designs filters only: it computes poles, zeros, coefficients and
  responses, but does not run audio samples through a filter and keeps no
  per-channel filter state.
- There are no Chebyshev type I or type II families and no fixed-formula
  "cookbook" biquads; `custom` and `Biquad.set_coefficients` cover sections
  defined by hand.
- `iirdesign.params` only describes parameters; there is no object that binds
  a parameter list to a filter and sets it by index or id.
- There is no command-line program, audio output or chart display.

## Running the tests

```
pip install .[test]
pytest
```