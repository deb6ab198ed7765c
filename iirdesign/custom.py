"""Sections whose poles and zeros are given directly."""

from __future__ import annotations

import cmath

from iirdesign.biquad import Biquad


class OnePole(Biquad):
    """First order section with one real pole and one real zero."""

    def setup(self, scale, pole, zero) -> None:
        """Place the pole and zero on the real axis and scale the numerator."""
        self.set_one_pole(pole, zero)
        self.apply_scale(scale)


class TwoPole(Biquad):
    """Second order section from a conjugate pole pair and zero pair in polar form."""

    def setup(self, scale, pole_rho, pole_theta, zero_rho, zero_theta) -> None:
        """Place the poles and zeros at the given radii and angles and scale."""
        pole = cmath.rect(pole_rho, pole_theta)
        zero = cmath.rect(zero_rho, zero_theta)
        self.set_two_pole(pole, zero, pole.conjugate(), zero.conjugate())
        self.apply_scale(scale)