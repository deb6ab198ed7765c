"""Elliptic (Cauer) filters: ripple in both the pass band and the stop band."""

from __future__ import annotations

import math

from iirdesign.cascade import Cascade
from iirdesign.layout import INFINITY, Layout
from iirdesign.rootfinder import ConvergenceError
from iirdesign.transforms import (
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)

DEFAULT_MAX_ORDER = 16

_FACTOR_ITERATION_LIMIT = 10000


def elliptic_k(k: float) -> float:
    """Complete elliptic integral of the first kind for modulus ``k``."""
    m = k * k
    a = 1.0
    b = math.sqrt(1 - m)
    c = a - b
    while True:
        previous = c
        c = (a - b) / 2
        mean = (a + b) / 2
        b = math.sqrt(a * b)
        a = mean
        if not c < previous:
            break
    return math.pi / (a + a)


class _Synthesis:
    """Works out the poles and zeros of an analog elliptic low pass."""

    def __init__(self, num_poles: int, ripple_db: float, rolloff: float) -> None:
        size = 4 * num_poles + 8
        self.a1 = [0.0] * size
        self.b1 = [0.0] * size
        self.c1 = [0.0] * size
        self.d1 = [0.0] * size
        self.s1 = [0.0] * size
        self.z1 = [0.0] * size
        self.p = [0.0] * size
        self.q1 = [0.0] * size

        self.n = num_poles
        self.nin = num_poles % 2
        self.n2 = num_poles // 2
        self.m = self.nin + 2 * self.n2
        self.em = 2 * (self.m // 2)
        self.e = math.sqrt(10.0 ** (ripple_db / 10) - 1)

        xi = 5 * math.exp(rolloff - 1) + 1
        self.k = elliptic_k(1 / xi)
        self.k_prime = elliptic_k(math.sqrt(1 - 1 / (xi * xi)))

    def run(self) -> tuple[list[tuple[complex, complex]], float | None]:
        """Return the conjugate pole/zero pairs and the real pole, if any."""
        n, n2, em = self.n, self.n2, self.em
        ni = 0 if n % 2 else 1

        f = [0.0] * (n2 + 2)
        for i in range(1, n2 + 1):
            u = (2 * i - ni) * self.k / n
            f[i] = 1 / (self._sn(u) * 2 * math.pi / self.k)
        zeros = f[1 : n2 + 1]

        for i in range(1, n2 + 1):
            x = f[n2 + 1 - i]
            self.z1[i] = math.sqrt(1 - 1 / (x * x))

        fb = 1 / (2 * math.pi)
        fbb = fb * fb
        tp = 2 * math.pi

        self._calc_fz()
        self._calc_qz()
        m = self.m
        if m > em:
            self.c1[2 * m] = 0
        for i in range(0, 2 * m + 1, 2):
            self.a1[m - i // 2] = self.c1[i] + self.d1[i]
        a0 = self._find_factors(m)

        pairs = []
        for r in range(1, em // 2 + 1):
            p = self.p[r] / 10
            q = self.q1[r] / 100
            d = 1 + p + q
            b = (1 + p / 2) * fbb / d
            zf = fb / math.pow(d, 0.25)
            zq = 1 / math.sqrt(abs(2 * (1 - b / (zf * zf))))
            zw = tp * zf
            pole = complex(
                -0.5 * zw / zq,
                0.5 * math.sqrt(abs(zw * zw / (zq * zq) - 4 * zw * zw)),
            )
            pairs.append((pole, complex(0, zeros[r - 1])))

        real = -math.sqrt(fbb / (0.1 * a0 - 1)) * tp if a0 != 0 else None
        return pairs, real

    def _sn(self, u: float) -> float:
        """Jacobi elliptic sine by its q-series."""
        q = math.exp(-math.pi * self.k_prime / self.k)
        v = math.pi * 0.5 * u / self.k
        total = 0.0
        j = 0
        while True:
            w = q ** (j + 0.5)
            total += w * math.sin((2 * j + 1) * v) / (1 - w * w)
            if w < 1e-7:
                return total
            j += 1

    def _product_polynomial(self, degree: int) -> None:
        """Store the product of (z + s1[i]) for i = 1..degree in b1."""
        a1, b1, s1 = self.a1, self.b1, self.s1
        b1[0] = s1[1]
        b1[1] = 1
        for j in range(2, degree + 1):
            a1[0] = s1[j] * b1[0]
            for i in range(1, j):
                a1[i] = b1[i - 1] + s1[j] * b1[i]
            b1[:j] = a1[:j]
            b1[j] = 1

    def _calc_fz2(self, i: int) -> None:
        ji, jf = 0, 0
        if i < self.em + 2:
            ji, jf = 0, i
        if i > self.em:
            ji, jf = i - self.em, self.em
        scale = 10.0 ** (self.m - i // 2)
        self.c1[i] = sum(
            self.a1[j] * (self.a1[i - j] * scale) for j in range(ji, jf + 1, 2)
        )

    def _calc_fz(self) -> None:
        nin, n2 = self.nin, self.n2
        i = 1
        if nin == 1:
            self.s1[1] = 1
            i = 2
        while i <= nin + n2:
            self.s1[i] = self.s1[i + n2] = self.z1[i - nin]
            i += 1
        self._product_polynomial(nin + 2 * n2)
        for i in range(0, self.em + 1, 2):
            self.a1[i] = self.e * self.b1[i]
        for i in range(0, 2 * self.em + 1, 2):
            self._calc_fz2(i)

    def _calc_qz(self) -> None:
        nin, n2 = self.nin, self.n2
        s1 = self.s1
        i = 1
        while i <= nin:
            s1[i] = -10
            i += 1
        while i <= nin + n2:
            s1[i] = -10 * self.z1[i - nin] * self.z1[i - nin]
            i += 1
        while i <= nin + 2 * n2:
            s1[i] = s1[i - n2]
            i += 1
        self._product_polynomial(self.m)
        sign = -1 if nin & 1 else 1
        for i in range(0, 2 * self.m + 1, 2):
            self.d1[i] = sign * self.b1[i // 2]

    def _find_factors(self, t: int) -> float:
        """Split a1 into quadratic factors by Bairstow's method.

        Returns minus the remaining linear coefficient, or 0 when none is left.
        """
        a1, b1, c1 = self.a1, self.b1, self.c1
        for i in range(1, t + 1):
            a1[i] /= a1[0]
        a1[0] = b1[0] = c1[0] = 1
        found = 0
        while t > 2:
            p0 = q0 = 0.0
            found += 1
            for _ in range(_FACTOR_ITERATION_LIMIT):
                b1[1] = a1[1] - p0
                c1[1] = b1[1] - p0
                for i in range(2, t + 1):
                    b1[i] = a1[i] - p0 * b1[i - 1] - q0 * b1[i - 2]
                for i in range(2, t):
                    c1[i] = b1[i] - p0 * c1[i - 1] - q0 * c1[i - 2]
                x1, x2, x3 = t - 1, t - 2, t - 3
                x4 = c1[x2] * c1[x2] + c1[x3] * (b1[x1] - c1[x1])
                if x4 == 0:
                    x4 = 1e-3
                dp = (b1[x1] * c1[x2] - b1[t] * c1[x3]) / x4
                p0 += dp
                dq = (b1[t] * c1[x2] - b1[x1] * (c1[x1] - b1[x1])) / x4
                q0 += dq
                if abs(dp + dq) < 1e-6:
                    break
            else:
                raise ConvergenceError("quadratic factor search failed")
            self.p[found] = p0
            self.q1[found] = q0
            a1[1] -= p0
            t -= 2
            for i in range(2, t + 1):
                a1[i] -= p0 * a1[i - 1] + q0 * a1[i - 2]

        if t == 2:
            found += 1
            self.p[found] = a1[1]
            self.q1[found] = a1[2]
        return -a1[1] if t == 1 else 0.0


class AnalogLowPass(Layout):
    """Analog elliptic low pass prototype."""

    def __init__(self) -> None:
        super().__init__()
        self._designed: tuple[int, float, float] | None = None
        self.set_normal(0, 1)

    def design(self, num_poles: int, ripple_db: float, rolloff: float) -> None:
        """Place poles and zeros for the given ripple in dB and transition width."""
        if num_poles < 1:
            raise ValueError("a prototype needs at least one pole")
        if ripple_db <= 0:
            raise ValueError("ripple must be greater than zero")
        key = (num_poles, ripple_db, rolloff)
        if self._designed == key:
            return
        self._designed = None
        self.reset()

        pairs, real = _Synthesis(num_poles, ripple_db, rolloff).run()
        for pole, zero in pairs:
            self.add_conjugate_pairs(pole, zero)
        if real is not None:
            self.add(real, INFINITY)
        self.set_normal(0, 1.0 if num_poles % 2 else 10.0 ** (-ripple_db / 20.0))
        self._designed = key


class _PoleFilter(Cascade):
    _band = False

    def __init__(self, max_order: int = DEFAULT_MAX_ORDER) -> None:
        if max_order < 1:
            raise ValueError("max_order must be at least 1")
        super().__init__(max_order if self._band else (max_order + 1) // 2)
        self.max_order = max_order
        self.analog = AnalogLowPass()
        self.digital = Layout()

    def _design(self, order: int, ripple_db: float, rolloff: float) -> None:
        if not 1 <= order <= self.max_order:
            raise ValueError(f"order must be between 1 and {self.max_order}")
        self.analog.design(order, ripple_db, rolloff)

    def _realise(self, digital: Layout) -> None:
        self.digital = digital
        self.set_layout(digital)


class LowPass(_PoleFilter):
    """Elliptic low pass."""

    def setup(self, order, sample_rate, cutoff_frequency, ripple_db, rolloff) -> None:
        """Design for the given order, cutoff in Hz, ripple in dB and rolloff."""
        self._design(order, ripple_db, rolloff)
        self._realise(low_pass_transform(cutoff_frequency / sample_rate, self.analog))


class HighPass(_PoleFilter):
    """Elliptic high pass."""

    def setup(self, order, sample_rate, cutoff_frequency, ripple_db, rolloff) -> None:
        """Design for the given order, cutoff in Hz, ripple in dB and rolloff."""
        self._design(order, ripple_db, rolloff)
        self._realise(high_pass_transform(cutoff_frequency / sample_rate, self.analog))


class BandPass(_PoleFilter):
    """Elliptic band pass."""

    _band = True

    def setup(
        self, order, sample_rate, center_frequency, width_frequency, ripple_db, rolloff
    ) -> None:
        """Design for the given order, centre and width in Hz, ripple and rolloff."""
        self._design(order, ripple_db, rolloff)
        self._realise(
            band_pass_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )


class BandStop(_PoleFilter):
    """Elliptic band stop."""

    _band = True

    def setup(
        self, order, sample_rate, center_frequency, width_frequency, ripple_db, rolloff
    ) -> None:
        """Design for the given order, centre and width in Hz, ripple and rolloff."""
        self._design(order, ripple_db, rolloff)
        self._realise(
            band_stop_transform(
                center_frequency / sample_rate, width_frequency / sample_rate, self.analog
            )
        )