"""Legendre ("Optimum-L") filters: steepest roll-off with a monotonic pass band."""

from __future__ import annotations

import math

from iirdesign.cascade import Cascade
from iirdesign.layout import INFINITY, Layout
from iirdesign.rootfinder import ConvergenceError, find_roots, sort_by_imag
from iirdesign.transforms import (
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)

DEFAULT_MAX_ORDER = 16


def legendre_polynomial(n: int) -> list[float]:
    """Coefficients of the Legendre polynomial of the first kind, lowest order first."""
    if n < 0:
        raise ValueError("degree must not be negative")
    if n == 0:
        return [1.0]
    previous, current = [1.0], [0.0, 1.0]
    for i in range(2, n + 1):
        following = [0.0] * (i + 1)
        for j, c in enumerate(current):
            following[j + 1] += (2 * i - 1) * c / i
        for j, c in enumerate(previous):
            following[j] -= (i - 1) * c / i
        previous, current = current, following
    return current


def optimum_l_coefficients(n: int) -> list[float]:
    """Coefficients of the Optimum-L polynomial L_n in powers of the squared frequency.

    The magnitude response is ``1 / (1 + L_n(w**2))``; the list holds n + 1 values.
    """
    if n < 1:
        raise ValueError("order must be at least 1")
    size = 2 * n + 4
    k = (n - 1) // 2

    a = [0.0] * size
    if n % 2:
        for i in range(k + 1):
            a[i] = (2.0 * i + 1.0) / (math.sqrt(2.0) * (k + 1.0))
    else:
        start = 1 if k % 2 else 0
        for i in range(start, k + 1, 2):
            a[i] = (2 * i + 1) / math.sqrt((k + 1) * (k + 2))

    # s = sum of a[i] * P_i
    s = [0.0] * size
    s[0] = a[0]
    s[1] = a[1]
    for i in range(2, k + 1):
        for j, c in enumerate(legendre_polynomial(i)):
            s[j] += a[i] * c

    # v = s squared
    v = [0.0] * size
    for i in range(k + 1):
        for j in range(k + 1):
            v[i + j] += s[i] * s[j]

    v[2 * k + 1] = 0.0
    if n % 2 == 0:
        for i in range(n, -1, -1):
            v[i + 1] += v[i]

    # integrate v
    for i in range(n + 1, -1, -1):
        v[i + 1] = v[i] / (i + 1.0)
    v[0] = 0.0

    # evaluate the definite integral from -1 to 2x^2 - 1
    s = [0.0] * size
    s[0] = -1.0
    s[1] = 2.0
    w = [0.0] * (n + 1)
    for i in range(1, n + 1):
        if i > 1:
            c0 = -s[0]
            for j in range(1, i + 1):
                c1 = -s[j] + 2.0 * s[j - 1]
                s[j - 1] = c0
                c0 = c1
            c1 = 2.0 * s[i]
            s[i] = c0
            s[i + 1] = c1
        for j in range(i, 0, -1):
            w[j] += v[i] * s[j]
    if n % 2 == 0:
        w[1] = 0.0
    return w


class AnalogLowPass(Layout):
    """Analog Optimum-L low pass prototype with unit cutoff."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: int | None = None
        self.set_normal(0, 1)

    def design(self, num_poles: int) -> None:
        """Place the poles at the left half plane roots of 1 + L_n(-s**2)."""
        if num_poles < 1:
            raise ValueError("a prototype needs at least one pole")
        if self._designed == num_poles:
            return
        self._designed = None
        self.reset()

        w = optimum_l_coefficients(num_poles)
        coefficients = [1.0 + w[0]]
        for i in range(1, num_poles + 1):
            coefficients.append(0.0)
            coefficients.append(-w[i] if i % 2 else w[i])

        left = [root for root in find_roots(coefficients) if root.real <= 0]
        if len(left) < num_poles:
            raise ConvergenceError("could not separate the left half plane poles")
        roots = sort_by_imag(left[:num_poles])

        pairs = num_poles // 2
        for root in roots[:pairs]:
            self.add_conjugate_pairs(root, INFINITY)
        if num_poles % 2:
            self.add(roots[pairs].real, INFINITY)
        self._designed = num_poles


class _PoleFilter(Cascade):
    _band = False

    def __init__(self, max_order: int = DEFAULT_MAX_ORDER) -> None:
        if max_order < 1:
            raise ValueError("max_order must be at least 1")
        super().__init__(max_order if self._band else (max_order + 1) // 2)
        self.max_order = max_order
        self.analog = AnalogLowPass()
        self.digital = Layout()

    def _design(self, order: int) -> None:
        if not 1 <= order <= self.max_order:
            raise ValueError(f"order must be between 1 and {self.max_order}")
        self.analog.design(order)

    def _realise(self, digital: Layout) -> None:
        self.digital = digital
        self.set_layout(digital)


class LowPass(_PoleFilter):
    """Optimum-L low pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._design(order)
        self._realise(low_pass_transform(cutoff_frequency / sample_rate, self.analog))


class HighPass(_PoleFilter):
    """Optimum-L high pass."""

    def setup(self, order, sample_rate, cutoff_frequency) -> None:
        """Design for the given order and cutoff in Hz."""
        self._design(order)
        self._realise(high_pass_transform(cutoff_frequency / sample_rate, self.analog))


class BandPass(_PoleFilter):
    """Optimum-L band pass."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._design(order)
        self._realise(
            band_pass_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )


class BandStop(_PoleFilter):
    """Optimum-L band stop."""

    _band = True

    def setup(self, order, sample_rate, center_frequency, width_frequency) -> None:
        """Design for the given order, centre and width in Hz."""
        self._design(order)
        self._realise(
            band_stop_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )