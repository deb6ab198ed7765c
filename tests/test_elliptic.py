import math

import pytest

from iirdesign.elliptic import (
    AnalogLowPass,
    BandPass,
    BandStop,
    HighPass,
    LowPass,
    elliptic_k,
)
from iirdesign.layout import INFINITY


def test_elliptic_k_of_zero_is_half_pi():
    assert elliptic_k(0.0) == pytest.approx(math.pi / 2)


def test_elliptic_k_known_value():
    assert elliptic_k(1 / math.sqrt(2)) == pytest.approx(1.8540746773013719, rel=1e-12)


def test_elliptic_k_grows_with_modulus():
    values = [elliptic_k(k) for k in (0.1, 0.3, 0.5, 0.7, 0.9)]
    assert values == sorted(values)
    assert len(set(values)) == 5


def test_first_order_prototype_pole_is_inverse_epsilon():
    proto = AnalogLowPass()
    proto.design(1, 1.0, 0.0)
    eps = math.sqrt(10 ** 0.1 - 1)
    assert proto.num_poles == 1
    assert proto[0].poles.first.real == pytest.approx(-1 / eps)
    assert proto[0].poles.first.imag == 0
    assert proto[0].zeros.first == INFINITY


@pytest.mark.parametrize("order", [2, 3, 4, 5, 6])
def test_prototype_poles_in_left_half_plane(order):
    proto = AnalogLowPass()
    proto.design(order, 0.5, 0.0)
    assert proto.num_poles == order
    assert all(pair.poles.first.real < 0 for pair in proto)


def test_prototype_zeros_on_imaginary_axis():
    proto = AnalogLowPass()
    proto.design(4, 1.0, 0.0)
    assert len(proto) == 2
    for pair in proto:
        assert pair.zeros.first.real == 0
        assert pair.zeros.first.imag != 0
        assert pair.zeros.second == pair.zeros.first.conjugate()


def test_normal_gain_depends_on_parity():
    even = AnalogLowPass()
    even.design(4, 2.0, 0.0)
    odd = AnalogLowPass()
    odd.design(5, 2.0, 0.0)
    assert even.normal_gain == pytest.approx(10 ** (-2.0 / 20))
    assert odd.normal_gain == 1


def test_redesign_with_new_ripple_moves_poles():
    proto = AnalogLowPass()
    proto.design(3, 0.5, 0.0)
    first = proto[0].poles.first
    proto.design(3, 3.0, 0.0)
    assert proto[0].poles.first != first
    assert proto.num_poles == 3


@pytest.mark.parametrize(
    "args", [(0, 1.0, 0.0), (2, 0.0, 0.0), (2, -1.0, 0.0)]
)
def test_prototype_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        AnalogLowPass().design(*args)


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
def test_low_pass_dc_gain_matches_normal(order):
    f = LowPass()
    f.setup(order, 44100, 2000, 1.0, 0.0)
    expected = 1.0 if order % 2 else 10 ** (-1.0 / 20)
    assert abs(f.response(0)) == pytest.approx(expected, rel=1e-9)
    assert len(f) == (order + 1) // 2


@pytest.mark.parametrize("order", [2, 3, 4, 5])
def test_low_pass_is_stable(order):
    f = LowPass()
    f.setup(order, 44100, 3000, 0.5, 0.0)
    for state in f.pole_zeros():
        assert abs(state.poles.first) < 1
        assert abs(state.poles.second) < 1


def test_low_pass_zeros_lie_on_unit_circle():
    f = LowPass()
    f.setup(4, 44100, 2000, 1.0, 0.0)
    for pair in f.digital:
        assert abs(pair.zeros.first) == pytest.approx(1.0)


def test_low_pass_attenuates_high_frequencies():
    f = LowPass()
    f.setup(4, 44100, 1000, 1.0, 0.0)
    assert abs(f.response(0.4)) < 0.1


def test_odd_low_pass_has_zero_at_nyquist():
    f = LowPass()
    f.setup(3, 44100, 2000, 1.0, 0.0)
    assert abs(f.response(0.5)) < 1e-6


def test_high_pass_normalised_at_nyquist():
    f = HighPass()
    f.setup(3, 44100, 5000, 1.0, 0.0)
    assert abs(f.response(0.5)) == pytest.approx(1.0, rel=1e-9)
    assert abs(f.response(0.0)) < 1e-6


def test_band_pass_stage_count_and_stability():
    f = BandPass()
    f.setup(2, 44100, 4000, 1000, 1.0, 0.0)
    assert len(f) == 2
    for state in f.pole_zeros():
        assert abs(state.poles.first) < 1
        assert abs(state.poles.second) < 1


def test_band_stop_normalised_away_from_band():
    f = BandStop()
    f.setup(3, 44100, 4000, 1000, 1.0, 0.0)
    assert len(f) == 3
    assert abs(f.response(0.5)) == pytest.approx(1.0, rel=1e-9)


def test_order_above_maximum_is_rejected():
    f = LowPass(max_order=4)
    with pytest.raises(ValueError):
        f.setup(5, 44100, 2000, 1.0, 0.0)


def test_max_order_must_be_positive():
    with pytest.raises(ValueError):
        LowPass(max_order=0)