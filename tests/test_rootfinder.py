import math

import pytest

from iirdesign.rootfinder import (
    ConvergenceError,
    evaluate,
    find_roots,
    laguerre,
    sort_by_imag,
)


def _poly_from_roots(roots):
    coeffs = [1 + 0j]
    for r in roots:
        shifted = [0j] + coeffs
        scaled = [-r * c for c in coeffs] + [0j]
        coeffs = [s + t for s, t in zip(shifted, scaled)]
    return coeffs


def _closest(value, candidates):
    return min(abs(value - c) for c in candidates)


@pytest.mark.parametrize(
    "expected",
    [
        [3.0],
        [1.0, 2.0, 3.0],
        [-0.5, 0.25, 4.0, -2.0],
        [1 + 2j, 1 - 2j, -3.0],
        [0.3 + 0.4j, 0.3 - 0.4j, -0.7 + 0.1j, -0.7 - 0.1j],
    ],
)
def test_find_roots_recovers_roots(expected):
    roots = find_roots(_poly_from_roots(expected))
    assert len(roots) == len(expected)
    for root in expected:
        assert _closest(root, roots) < 1e-9


def test_roots_are_zeros_of_polynomial():
    coeffs = _poly_from_roots([0.5, -1.5, 2 + 1j, 2 - 1j])
    for root in find_roots(coeffs):
        assert abs(evaluate(coeffs, root)) < 1e-9


def test_find_roots_sorted_by_descending_imag():
    roots = find_roots(_poly_from_roots([1 + 2j, 1 - 2j, -3.0]))
    imags = [r.imag for r in roots]
    assert imags == sorted(imags, reverse=True)
    assert roots[0] == pytest.approx(1 + 2j)
    assert roots[2] == pytest.approx(1 - 2j)


def test_find_roots_without_polish():
    expected = [1.0, 2.0, 3.0]
    roots = find_roots(_poly_from_roots(expected), polish=False, sort=False)
    for root in expected:
        assert _closest(root, roots) < 1e-8


def test_find_roots_empty_raises():
    with pytest.raises(ValueError):
        find_roots([])


def test_sort_by_imag_is_stable_and_descending():
    roots = [1 + 0j, 2j, 3 + 0j, -1j]
    assert sort_by_imag(roots) == [2j, 1 + 0j, 3 + 0j, -1j]


def test_evaluate_at_zero_returns_constant_term():
    assert evaluate([1, 2, 3], 0) == 1


def test_evaluate_value():
    assert evaluate([1, 2, 3], 2) == pytest.approx(17)


def test_laguerre_converges_to_root():
    coeffs = [-2.0, 0.0, 1.0]
    root = laguerre(coeffs, 1.0)
    assert abs(evaluate(coeffs, root)) < 1e-12
    assert abs(root) ** 2 == pytest.approx(2.0)
    assert root.real == pytest.approx(math.sqrt(2.0))


def test_laguerre_constant_polynomial_fails():
    with pytest.raises(ConvergenceError):
        laguerre([1.0], 0)