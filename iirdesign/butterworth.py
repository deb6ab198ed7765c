"""Butterworth filters: maximally flat pass band."""

from __future__ import annotations

import cmath
import math
from typing import Callable

from iirdesign.cascade import Cascade
from iirdesign.layout import INFINITY, Layout
from iirdesign.transforms import (
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)

DEFAULT_MAX_ORDER = 16


def require_poles(num_poles: int) -> None:
    """Raise ValueError unless a prototype of ``num_poles`` poles makes sense."""
    if num_poles < 1:
        raise ValueError("a prototype needs at least one pole")


class AnalogLowPass(Layout):
    """Analog Butterworth low pass prototype with unit cutoff."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: int | None = None
        self.set_normal(0, 1)

    def design(self, num_poles: int) -> None:
        """Place ``num_poles`` poles on the unit circle in the left half plane."""
        require_poles(num_poles)
        if self._designed == num_poles:
            return
        self._designed = num_poles
        self.reset()

        n2 = 2 * num_poles
        for i in range(num_poles // 2):
            pole = cmath.rect(1.0, math.pi / 2 + (2 * i + 1) * math.pi / n2)
            self.add_conjugate_pairs(pole, INFINITY)
        if num_poles % 2:
            self.add(-1, INFINITY)


class AnalogLowShelf(Layout):
    """Analog Butterworth low shelf prototype."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: tuple[int, float] | None = None
        self.set_normal(math.pi, 1)

    def design(self, num_poles: int, gain_db: float) -> None:
        """Place poles and zeros for a shelf of ``gain_db`` decibels."""
        require_poles(num_poles)
        if self._designed == (num_poles, gain_db):
            return
        self._designed = (num_poles, gain_db)
        self.reset()

        n2 = num_poles * 2
        g = (10.0 ** (gain_db / 20)) ** (1.0 / n2)
        gp = -1.0 / g
        gz = -g

        for i in range(1, num_poles // 2 + 1):
            theta = math.pi * (0.5 - (2 * i - 1) / n2)
            c, s = math.cos(theta), math.sin(theta)
            self.add_conjugate_pairs(complex(gp * c, gp * s), complex(gz * c, gz * s))
        if num_poles % 2:
            self.add(gp, gz)


class PoleFilter(Cascade):
    """Cascade realised from an analog prototype through a digital transform."""

    _prototype: type[Layout] = AnalogLowPass
    _band = False

    def __init__(self, max_order: int = DEFAULT_MAX_ORDER) -> None:
        if max_order < 1:
            raise ValueError("max_order must be at least 1")
        super().__init__(max_order if self._band else (max_order + 1) // 2)
        self.max_order = max_order
        self.analog = self._prototype()
        self.digital = Layout()

    def _design(self, order: int, design_args: tuple) -> None:
        if not 1 <= order <= self.max_order:
            raise ValueError(f"order must be between 1 and {self.max_order}")
        self.analog.design(order, *design_args)

    def _realise(self, digital: Layout) -> None:
        self.digital = digital
        self.set_layout(digital)

    def _setup_edge(
        self,
        transform: Callable[[float, Layout], Layout],
        order: int,
        sample_rate: float,
        frequency: float,
        *design_args: float,
    ) -> None:
        self._design(order, design_args)
        self._realise(transform(frequency / sample_rate, self.analog))

    def _setup_band(
        self,
        transform: Callable[[float, float, Layout], Layout],
        order: int,
        sample_rate: float,
        centre: float,
        width: float,
        *design_args: float,
        shelf: bool = False,
    ) -> None:
        self._design(order, design_args)
        fc = centre / sample_rate
        digital = transform(fc, width / sample_rate, self.analog)
        if shelf:
            digital.set_normal(math.pi if fc < 0.25 else 0.0, 1)
        self._realise(digital)


class LowPass(PoleFilter):
    """Butterworth low pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._setup_edge(low_pass_transform, order, sample_rate, cutoff_frequency)


class HighPass(PoleFilter):
    """Butterworth high pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._setup_edge(high_pass_transform, order, sample_rate, cutoff_frequency)


class BandPass(PoleFilter):
    """Butterworth band pass."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._setup_band(
            band_pass_transform, order, sample_rate, center_frequency, width_frequency
        )


class BandStop(PoleFilter):
    """Butterworth band stop."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._setup_band(
            band_stop_transform, order, sample_rate, center_frequency, width_frequency
        )


class LowShelf(PoleFilter):
    """Butterworth low shelf."""

    _prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db) -> None:
        """Design for the given order, corner in Hz and gain in dB."""
        self._setup_edge(
            low_pass_transform, order, sample_rate, cutoff_frequency, gain_db
        )


class HighShelf(PoleFilter):
    """Butterworth high shelf."""

    _prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db) -> None:
        """Design for the given order, corner in Hz and gain in dB."""
        self._setup_edge(
            high_pass_transform, order, sample_rate, cutoff_frequency, gain_db
        )


class BandShelf(PoleFilter):
    """Butterworth band shelf."""

    _prototype = AnalogLowShelf
    _band = True

    def setup(
        self, order, sample_rate, center_frequency, width_frequency, gain_db
    ) -> None:
        """Design for the given order, centre and width in Hz and gain in dB."""
        self._setup_band(
            band_pass_transform,
            order,
            sample_rate,
            center_frequency,
            width_frequency,
            gain_db,
            shelf=True,
        )