"""Mappings from analog prototypes to digital pole/zero layouts.

Each function leaves the analog layout untouched and returns a new digital
layout. Frequencies are given as fractions of the sample rate.
"""

from __future__ import annotations

import cmath
import math
from itertools import islice

from iirdesign.layout import INFINITY, ComplexPair, Layout

_EDGE = 1e-8


def _pairs_and_single(analog: Layout):
    """Return the conjugate pairs of ``analog`` and its trailing single pole, if any."""
    pairs = analog.num_poles // 2
    single = analog[pairs] if analog.num_poles % 2 else None
    return list(islice(analog, pairs)), single


def _map_simple(analog: Layout, transform) -> Layout:
    digital = Layout()
    pairs, single = _pairs_and_single(analog)
    for pair in pairs:
        digital.add_conjugate_pairs(
            transform(pair.poles.first), transform(pair.zeros.first)
        )
    if single is not None:
        digital.add(transform(single.poles.first), transform(single.zeros.first))
    return digital


def low_pass_transform(fc: float, analog: Layout) -> Layout:
    """Map an analog low pass prototype to a digital low pass with cutoff ``fc``."""
    f = math.tan(math.pi * fc)

    def transform(c: complex) -> complex:
        if c == INFINITY:
            return complex(-1.0, 0.0)
        c = f * c
        return (1.0 + c) / (1.0 - c)

    digital = _map_simple(analog, transform)
    digital.set_normal(analog.normal_w, analog.normal_gain)
    return digital


def high_pass_transform(fc: float, analog: Layout) -> Layout:
    """Map an analog low pass prototype to a digital high pass with cutoff ``fc``."""
    f = 1.0 / math.tan(math.pi * fc)

    def transform(c: complex) -> complex:
        if c == INFINITY:
            return complex(1.0, 0.0)
        c = f * c
        return -(1.0 + c) / (1.0 - c)

    digital = _map_simple(analog, transform)
    digital.set_normal(math.pi - analog.normal_w, analog.normal_gain)
    return digital


def _band_edges(fc: float, fw: float) -> tuple[float, float]:
    """Upper and lower band edges in radians, kept clear of 0 and pi."""
    ww = 2 * math.pi * fw
    wc2 = 2 * math.pi * fc - ww / 2
    wc = wc2 + ww
    return min(wc, math.pi - _EDGE), max(wc2, _EDGE)


def band_pass_transform(fc: float, fw: float, analog: Layout) -> Layout:
    """Map an analog low pass prototype to a digital band pass.

    ``fc`` is the centre frequency and ``fw`` the width of the band.
    """
    wc, wc2 = _band_edges(fc, fw)
    a = math.cos((wc + wc2) * 0.5) / math.cos((wc - wc2) * 0.5)
    b = 1 / math.tan((wc - wc2) * 0.5)
    k = b * b * (a * a - 1)
    ab_2 = 2 * a * b

    def transform(c: complex) -> ComplexPair:
        if c == INFINITY:
            return ComplexPair(-1, 1)
        c = (1.0 + c) / (1.0 - c)
        v = cmath.sqrt((4 * (k + 1) * c + 8 * (k - 1)) * c + 4 * (k + 1))
        u = -v + ab_2 * c + ab_2
        v = v + ab_2 * c + ab_2
        d = 2 * (b - 1) * c + 2 * (1 + b)
        return ComplexPair(u / d, v / d)

    digital = Layout()
    pairs, single = _pairs_and_single(analog)
    for pair in pairs:
        poles = transform(pair.poles.first)
        zeros = transform(pair.zeros.first)
        digital.add_conjugate_pairs(poles.first, zeros.first)
        digital.add_conjugate_pairs(poles.second, zeros.second)
    if single is not None:
        digital.add(transform(single.poles.first), transform(single.zeros.first))

    wn = analog.normal_w
    digital.set_normal(
        2 * math.atan(math.sqrt(math.tan((wc + wn) * 0.5) * math.tan((wc2 + wn) * 0.5))),
        analog.normal_gain,
    )
    return digital


def band_stop_transform(fc: float, fw: float, analog: Layout) -> Layout:
    """Map an analog low pass prototype to a digital band stop.

    ``fc`` is the centre frequency and ``fw`` the width of the band.
    """
    wc, wc2 = _band_edges(fc, fw)
    a = math.cos((wc + wc2) * 0.5) / math.cos((wc - wc2) * 0.5)
    b = math.tan((wc - wc2) * 0.5)
    a2 = a * a
    b2 = b * b

    def transform(c: complex) -> ComplexPair:
        if c == INFINITY:
            c = complex(-1.0, 0.0)
        else:
            c = (1.0 + c) / (1.0 - c)
        u = cmath.sqrt((4 * (b2 + a2 - 1) * c + 8 * (b2 - a2 + 1)) * c + 4 * (a2 + b2 - 1))
        v = u * -0.5 + a - a * c
        u = u * 0.5 + a - a * c
        d = (b + 1) + (b - 1) * c
        return ComplexPair(u / d, v / d)

    digital = Layout()
    pairs, single = _pairs_and_single(analog)
    for pair in pairs:
        poles = transform(pair.poles.first)
        zeros = transform(pair.zeros.first)
        if zeros.second == zeros.first:
            zeros = ComplexPair(zeros.first, zeros.first.conjugate())
        digital.add_conjugate_pairs(poles.first, zeros.first)
        digital.add_conjugate_pairs(poles.second, zeros.second)
    if single is not None:
        digital.add(transform(single.poles.first), transform(single.zeros.first))

    digital.set_normal(math.pi if fc < 0.25 else 0.0, analog.normal_gain)
    return digital