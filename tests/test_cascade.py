import math

import pytest

from iirdesign.cascade import Cascade
from iirdesign.layout import Layout


def _three_pole_layout(gain=1.0):
    layout = Layout()
    layout.add_conjugate_pairs(0.5 + 0.3j, -1)
    layout.add(0.2, -1)
    layout.set_normal(0.0, gain)
    return layout


@pytest.fixture
def staged():
    cascade = Cascade(2)
    cascade.set_layout(_three_pole_layout())
    return cascade


def test_empty_cascade():
    cascade = Cascade(2)
    assert len(cascade) == 0
    assert cascade.response(0.2) == pytest.approx(1 + 0j)
    assert cascade.pole_zeros() == []


def test_set_layout_stage_count(staged):
    assert len(staged) == 2


@pytest.mark.parametrize("gain", [1.0, 0.5, 2.0])
def test_set_layout_normalises_gain(gain):
    cascade = Cascade(2)
    cascade.set_layout(_three_pole_layout(gain=gain))
    assert abs(cascade.response(0.0)) == pytest.approx(gain)


def test_normalisation_at_other_frequency():
    layout = Layout()
    layout.add_conjugate_pairs(-0.4 + 0.5j, 0.9)
    layout.set_normal(math.pi, 0.75)
    single = Cascade(1)
    single.set_layout(layout)
    assert abs(single.response(0.5)) == pytest.approx(0.75)


def test_zeros_at_nyquist(staged):
    assert abs(staged.response(0.5)) == pytest.approx(0, abs=1e-9)


def test_pole_zeros_match_layout(staged):
    first, second = staged.pole_zeros()
    poles = sorted([first.poles.first, first.poles.second], key=lambda c: c.imag)
    assert poles == [pytest.approx(0.5 - 0.3j), pytest.approx(0.5 + 0.3j)]
    assert second.is_single_pole()
    assert second.poles.first == pytest.approx(0.2)
    assert second.zeros.first == pytest.approx(-1)


@pytest.mark.parametrize("freq", [0.05, 0.1, 0.3])
def test_response_is_product_of_stages(staged, freq):
    product = staged[0].response(freq) * staged[1].response(freq)
    assert staged.response(freq) == pytest.approx(product)


def test_apply_scale_scales_response(staged):
    before = staged.response(0.1)
    staged.apply_scale(4.0)
    assert staged.response(0.1) == pytest.approx(4.0 * before)


def test_too_many_stages_rejected():
    with pytest.raises(ValueError):
        Cascade(1).set_layout(_three_pole_layout())


def test_apply_scale_without_stages_rejected():
    with pytest.raises(ValueError):
        Cascade(2).apply_scale(2.0)


def test_index_beyond_active_stages():
    roomy = Cascade(3)
    roomy.set_layout(_three_pole_layout())
    assert len(roomy) == 2
    last = roomy[1].pole_zeros()[0]
    assert last.is_single_pole()
    assert last.poles.first == pytest.approx(0.2)
    with pytest.raises(IndexError):
        roomy[2]