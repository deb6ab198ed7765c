"""Pole/zero layouts used to describe analog and digital prototypes."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

INFINITY = complex(math.inf, 0.0)


@dataclass(frozen=True)
class ComplexPair:
    """Two complex values, usually a root and its conjugate."""

    first: complex = 0j
    second: complex = 0j

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", complex(self.first))
        object.__setattr__(self, "second", complex(self.second))


@dataclass(frozen=True)
class PoleZeroPair:
    """A pair of poles together with a pair of zeros."""

    poles: ComplexPair
    zeros: ComplexPair

    def is_single_pole(self) -> bool:
        """True when the pair holds just one pole and one zero."""
        return self.poles.second == 0 and self.zeros.second == 0


class Layout:
    """An ordered set of pole/zero pairs with a normalisation point."""

    def __init__(self, max_poles: int | None = None) -> None:
        self.max_poles = max_poles
        self._pairs: list[PoleZeroPair] = []
        self.num_poles = 0
        self.normal_w = 0.0
        self.normal_gain = 1.0

    def reset(self) -> None:
        """Remove every pole and zero."""
        self._pairs.clear()
        self.num_poles = 0

    def add(self, pole, zero) -> None:
        """Add a single real pole and zero, or a ComplexPair of each."""
        pole_is_pair = isinstance(pole, ComplexPair)
        if pole_is_pair != isinstance(zero, ComplexPair):
            raise TypeError("pole and zero must both be pairs or both be values")
        if pole_is_pair:
            self._append(PoleZeroPair(pole, zero), 2)
        else:
            self._append(
                PoleZeroPair(ComplexPair(complex(pole)), ComplexPair(complex(zero))), 1
            )

    def add_conjugate_pairs(self, pole, zero) -> None:
        """Add a pole and a zero together with their complex conjugates."""
        p = complex(pole)
        z = complex(zero)
        self._append(
            PoleZeroPair(
                ComplexPair(p, p.conjugate()), ComplexPair(z, z.conjugate())
            ),
            2,
        )

    def set_normal(self, w: float, gain: float) -> None:
        """Set the angular frequency and gain the response is normalised to."""
        self.normal_w = w
        self.normal_gain = gain

    def __getitem__(self, index: int) -> PoleZeroPair:
        return self._pairs[index]

    def __len__(self) -> int:
        return len(self._pairs)

    def _append(self, pair: PoleZeroPair, count: int) -> None:
        if self.num_poles % 2:
            raise ValueError("a single pole must be the last one added")
        if cmath.isnan(pair.poles.first) or cmath.isnan(pair.poles.second):
            raise ValueError("pole is not a number")
        if self.max_poles is not None and self.num_poles + count > self.max_poles:
            raise ValueError("too many poles for this layout")
        self._pairs.append(pair)
        self.num_poles += count