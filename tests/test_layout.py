import pytest

from iirdesign.layout import INFINITY, ComplexPair, Layout, PoleZeroPair


def test_add_single_pole():
    layout = Layout()
    layout.add(-0.5, INFINITY)
    assert layout.num_poles == 1
    assert len(layout) == 1
    pair = layout[0]
    assert pair.is_single_pole()
    assert pair.poles.first == -0.5
    assert pair.zeros.first == INFINITY


def test_add_conjugate_pairs():
    layout = Layout()
    layout.add_conjugate_pairs(0.5 + 0.25j, 1j)
    assert layout.num_poles == 2
    pair = layout[0]
    assert pair.poles.first == 0.5 + 0.25j
    assert pair.poles.second == (0.5 + 0.25j).conjugate()
    assert pair.zeros.second == (1j).conjugate()
    assert not pair.is_single_pole()


def test_add_complex_pairs():
    layout = Layout()
    layout.add(ComplexPair(0.1, 0.2), ComplexPair(-1, 1))
    assert layout.num_poles == 2
    assert layout[0] == PoleZeroPair(ComplexPair(0.1, 0.2), ComplexPair(-1, 1))


def test_mixed_add_arguments_rejected():
    with pytest.raises(TypeError):
        Layout().add(ComplexPair(0.1, 0.2), 0.5)


def test_nothing_after_single_pole():
    layout = Layout()
    layout.add(-1, INFINITY)
    with pytest.raises(ValueError):
        layout.add_conjugate_pairs(1j, INFINITY)
    with pytest.raises(ValueError):
        layout.add(-0.5, INFINITY)


def test_nan_pole_rejected():
    with pytest.raises(ValueError):
        Layout().add(float("nan"), 0)


def test_max_poles_enforced():
    layout = Layout(max_poles=2)
    layout.add_conjugate_pairs(0.5j, -1)
    with pytest.raises(ValueError):
        layout.add(0.1, -1)


def test_reset_clears_poles():
    layout = Layout()
    layout.add_conjugate_pairs(0.5j, -1)
    layout.add(0.2, -1)
    layout.reset()
    assert layout.num_poles == 0
    assert len(layout) == 0


def test_set_normal():
    layout = Layout()
    layout.set_normal(2.5, 0.75)
    assert (layout.normal_w, layout.normal_gain) == (2.5, 0.75)


def test_index_out_of_range():
    layout = Layout()
    layout.add(0.2, -1)
    assert len(layout) == 1
    assert layout[0].poles.first == 0.2
    with pytest.raises(IndexError):
        layout[1]


def test_iteration_yields_pairs_in_order():
    layout = Layout()
    layout.add_conjugate_pairs(0.3j, -1)
    layout.add(0.4, -1)
    assert [pair.poles.first for pair in layout] == [0.3j, 0.4]