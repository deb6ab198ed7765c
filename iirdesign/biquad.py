"""Second order IIR sections."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

from iirdesign.layout import ComplexPair, PoleZeroPair


def _require_conjugates(first: complex, second: complex, what: str) -> None:
    if not cmath.isclose(second, first.conjugate(), rel_tol=1e-9, abs_tol=1e-12):
        raise ValueError(f"{what} must be complex conjugates")


def _quadratic_terms(first: complex, second: complex, what: str) -> tuple[float, float]:
    """Return (c1, c2) of 1 + c1 z^-1 + c2 z^-2 with the given roots."""
    if first.imag != 0:
        _require_conjugates(first, second, what)
        return -2 * first.real, abs(first) ** 2
    if second.imag != 0:
        raise ValueError(f"{what} must both be real")
    return -(first.real + second.real), first.real * second.real


@dataclass(frozen=True)
class BiquadPoleState(PoleZeroPair):
    """Poles, zeros and gain of a second order section."""

    gain: float = 1.0

    @classmethod
    def from_biquad(cls, biquad: "Biquad") -> "BiquadPoleState":
        """Factor a section's coefficients into poles, zeros and gain."""
        a0, a1, a2 = biquad.a0, biquad.a1, biquad.a2
        b0, b1, b2 = biquad.b0, biquad.b1, biquad.b2

        if a2 == 0 and b2 == 0:
            poles = ComplexPair(-a1, 0)
            zeros = ComplexPair(-b0 / b1, 0)
        else:
            c = cmath.sqrt(complex(a1 * a1 - 4 * a0 * a2, 0))
            d = 2.0 * a0
            poles = ComplexPair(-(a1 + c) / d, (c - a1) / d)
            c = cmath.sqrt(complex(b1 * b1 - 4 * b0 * b2, 0))
            d = 2.0 * b0
            zeros = ComplexPair(-(b1 + c) / d, (c - b1) / d)

        return cls(poles, zeros, b0 / a0)


class Biquad:
    """A second order section; a1..b2 are stored divided by a0."""

    def __init__(self) -> None:
        self.a0 = 1.0
        self.a1 = 0.0
        self.a2 = 0.0
        self.b0 = 1.0
        self.b1 = 0.0
        self.b2 = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(a0={self.a0!r}, a1={self.a1!r}, a2={self.a2!r}, "
            f"b0={self.b0!r}, b1={self.b1!r}, b2={self.b2!r})"
        )

    def set_coefficients(self, a0, a1, a2, b0, b1, b2) -> None:
        """Store the coefficients, normalising by a0."""
        if any(math.isnan(v) for v in (a0, a1, a2, b0, b1, b2)):
            raise ValueError("coefficient is not a number")
        self.a0 = a0
        self.a1 = a1 / a0
        self.a2 = a2 / a0
        self.b0 = b0 / a0
        self.b1 = b1 / a0
        self.b2 = b2 / a0

    def response(self, normalized_frequency: float) -> complex:
        """Complex response at a frequency given as a fraction of the sample rate."""
        w = 2 * math.pi * normalized_frequency
        czn1 = cmath.rect(1.0, -w)
        czn2 = cmath.rect(1.0, -2 * w)
        a0 = self.a0
        top = self.b0 / a0 + (self.b1 / a0) * czn1 + (self.b2 / a0) * czn2
        bottom = 1 + (self.a1 / a0) * czn1 + (self.a2 / a0) * czn2
        return top / bottom

    def pole_zeros(self) -> list[BiquadPoleState]:
        """The section's poles and zeros as a one-element list."""
        return [BiquadPoleState.from_biquad(self)]

    def set_one_pole(self, pole, zero) -> None:
        """Make a first order section from one real pole and zero."""
        pole = complex(pole)
        zero = complex(zero)
        if pole.imag != 0 or zero.imag != 0:
            raise ValueError("a single pole and zero must be real")
        self.set_coefficients(1, -pole.real, 0, -zero.real, 1, 0)

    def set_two_pole(self, pole1, zero1, pole2, zero2) -> None:
        """Make a second order section from two poles and two zeros."""
        a1, a2 = _quadratic_terms(complex(pole1), complex(pole2), "poles")
        b1, b2 = _quadratic_terms(complex(zero1), complex(zero2), "zeros")
        self.set_coefficients(1, a1, a2, 1, b1, b2)

    def set_pole_zero_pair(self, pair: PoleZeroPair) -> None:
        """Make the section from a pole/zero pair."""
        if pair.is_single_pole():
            self.set_one_pole(pair.poles.first, pair.zeros.first)
        else:
            self.set_two_pole(
                pair.poles.first, pair.zeros.first, pair.poles.second, pair.zeros.second
            )

    def set_pole_zero_form(self, state: BiquadPoleState) -> None:
        """Make the section from poles, zeros and gain."""
        self.set_pole_zero_pair(state)
        self.apply_scale(state.gain)

    def set_identity(self) -> None:
        """Make the section pass its input unchanged."""
        self.set_coefficients(1, 0, 0, 1, 0, 0)

    def apply_scale(self, scale: float) -> None:
        """Multiply the numerator coefficients by ``scale``."""
        self.b0 *= scale
        self.b1 *= scale
        self.b2 *= scale