"""Polynomial root finding with Laguerre's method.

Coefficients are given lowest order first: ``coefficients[i]`` multiplies ``x**i``.
"""

from __future__ import annotations

import cmath
import sys
from collections.abc import Iterable, Sequence

_FRACTIONS = (0.0, 0.5, 0.25, 0.75, 0.13, 0.38, 0.62, 0.88, 1.0)
_STEPS_BETWEEN_BREAKS = 10
_MAX_ITERATIONS = _STEPS_BETWEEN_BREAKS * (len(_FRACTIONS) - 1)
_ROUNDING = sys.float_info.epsilon
_REAL_ROOT_TOLERANCE = 1.0e-30


class ConvergenceError(ArithmeticError):
    """Raised when Laguerre's method does not settle on a root."""


def laguerre(coefficients: Sequence[complex], x: complex) -> complex:
    """Refine ``x`` towards a root of the polynomial and return the root."""
    a = [complex(c) for c in coefficients]
    if not a:
        raise ValueError("a polynomial needs at least one coefficient")
    degree = len(a) - 1
    x = complex(x)

    for iteration in range(1, _MAX_ITERATIONS + 1):
        b = a[degree]
        err = abs(b)
        d = f = 0j
        abx = abs(x)
        for coefficient in reversed(a[:degree]):
            f = x * f + d
            d = x * d + b
            b = x * b + coefficient
            err = abs(b) + abx * err
        err *= _ROUNDING
        if abs(b) <= err:
            return x

        g = d / b
        g2 = g * g
        h = g2 - 2.0 * f / b
        sq = cmath.sqrt((degree - 1) * (degree * h - g2))
        gp = g + sq
        gm = g - sq
        abp = abs(gp)
        abm = abs(gm)
        if abp < abm:
            gp = gm
        if max(abp, abm) > 0.0:
            dx = degree / gp
        else:
            dx = cmath.rect(1 + abx, float(iteration))
        x1 = x - dx
        if x == x1:
            return x
        if iteration % _STEPS_BETWEEN_BREAKS:
            x = x1
        else:
            x -= _FRACTIONS[iteration // _STEPS_BETWEEN_BREAKS] * dx

    raise ConvergenceError("laguerre failed")


def find_roots(
    coefficients: Iterable[complex], polish: bool = True, sort: bool = True
) -> list[complex]:
    """Return every root of the polynomial, optionally polished and sorted."""
    a = [complex(c) for c in coefficients]
    if not a:
        raise ValueError("a polynomial needs at least one coefficient")
    degree = len(a) - 1

    deflated = list(a)
    roots = [0j] * degree
    for j in reversed(range(degree)):
        x = laguerre(deflated[: j + 2], 0j)
        if abs(x.imag) <= 2.0 * _REAL_ROOT_TOLERANCE * abs(x.real):
            x = complex(x.real, 0.0)
        roots[j] = x

        # synthetic division by (t - x)
        carry = deflated[j + 1]
        for k in reversed(range(j + 1)):
            deflated[k], carry = carry, x * carry + deflated[k]

    if polish:
        roots = [laguerre(a, root) for root in roots]
    if sort:
        roots = sort_by_imag(roots)
    return roots


def sort_by_imag(roots: Iterable[complex]) -> list[complex]:
    """Return the roots ordered by descending imaginary part, keeping ties in order."""
    return sorted(roots, key=lambda root: -root.imag)


def evaluate(coefficients: Sequence[complex], x: complex) -> complex:
    """Evaluate the polynomial at ``x``."""
    if x == 0:
        return complex(coefficients[0])
    return sum(
        (complex(c) * x**power for power, c in enumerate(coefficients)), 0j
    )