"""Bessel filters: maximally flat group delay."""

from __future__ import annotations

import math

from iirdesign.cascade import Cascade
from iirdesign.layout import INFINITY, Layout
from iirdesign.rootfinder import find_roots
from iirdesign.transforms import (
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)

DEFAULT_MAX_ORDER = 16


def reverse_bessel(k: int, n: int) -> float:
    """The coefficient of ``s**k`` in the reverse Bessel polynomial of degree ``n``."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    return math.factorial(2 * n - k) / (
        math.factorial(n - k) * math.factorial(k) * 2.0 ** (n - k)
    )


def _bessel_coefficients(n: int) -> list[float]:
    return [reverse_bessel(k, n) for k in range(n + 1)]


def _require_poles(num_poles: int) -> None:
    if num_poles < 1:
        raise ValueError("a prototype needs at least one pole")


class AnalogLowPass(Layout):
    """Analog Bessel low pass prototype."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: int | None = None
        self.set_normal(0, 1)

    def design(self, num_poles: int) -> None:
        """Place the poles at the roots of the reverse Bessel polynomial."""
        _require_poles(num_poles)
        if self._designed == num_poles:
            return
        self._designed = None
        self.reset()

        roots = find_roots(_bessel_coefficients(num_poles))
        pairs = num_poles // 2
        for root in roots[:pairs]:
            self.add_conjugate_pairs(root, INFINITY)
        if num_poles % 2:
            self.add(roots[pairs].real, INFINITY)
        self._designed = num_poles


class AnalogLowShelf(Layout):
    """Analog Bessel low shelf prototype."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: tuple[int, float] | None = None
        self.set_normal(math.pi, 1)

    def design(self, num_poles: int, gain_db: float) -> None:
        """Place poles and zeros for a shelf of ``gain_db`` decibels."""
        _require_poles(num_poles)
        key = (num_poles, gain_db)
        if self._designed == key:
            return
        self._designed = None
        self.reset()

        g = 10.0 ** (gain_db / 20) - 1
        coefficients = _bessel_coefficients(num_poles)
        poles = find_roots(coefficients)
        shifted = list(coefficients)
        shifted[0] += g * coefficients[0]
        zeros = find_roots(shifted)

        pairs = num_poles // 2
        for pole, zero in zip(poles[:pairs], zeros[:pairs]):
            self.add_conjugate_pairs(pole, zero)
        if num_poles % 2:
            self.add(poles[pairs].real, zeros[pairs].real)
        self._designed = key


class _PoleFilter(Cascade):
    _prototype: type[Layout] = AnalogLowPass
    _band = False

    def __init__(self, max_order: int = DEFAULT_MAX_ORDER) -> None:
        if max_order < 1:
            raise ValueError("max_order must be at least 1")
        super().__init__(max_order if self._band else (max_order + 1) // 2)
        self.max_order = max_order
        self.analog = self._prototype()
        self.digital = Layout()

    def _check_order(self, order: int) -> None:
        if not 1 <= order <= self.max_order:
            raise ValueError(f"order must be between 1 and {self.max_order}")

    def _realise(self, digital: Layout) -> None:
        self.digital = digital
        self.set_layout(digital)


class LowPass(_PoleFilter):
    """Bessel low pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._check_order(order)
        self.analog.design(order)
        self._realise(low_pass_transform(cutoff_frequency / sample_rate, self.analog))


class HighPass(_PoleFilter):
    """Bessel high pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._check_order(order)
        self.analog.design(order)
        self._realise(high_pass_transform(cutoff_frequency / sample_rate, self.analog))


class BandPass(_PoleFilter):
    """Bessel band pass."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._check_order(order)
        self.analog.design(order)
        self._realise(
            band_pass_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )


class BandStop(_PoleFilter):
    """Bessel band stop."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._check_order(order)
        self.analog.design(order)
        self._realise(
            band_stop_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )


class LowShelf(_PoleFilter):
    """Bessel low shelf."""

    _prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db) -> None:
        """Design for the given order, corner in Hz and gain in dB."""
        self._check_order(order)
        self.analog.design(order, gain_db)
        self._realise(low_pass_transform(cutoff_frequency / sample_rate, self.analog))