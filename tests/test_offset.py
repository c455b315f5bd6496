import numpy as np
import pandas as pd
import pytest

from pipecal.basis import angle_basis
from pipecal.offset import Offset, estimate_offset
from pipecal.errors import DegenerateFit, EmptyInput, ShapeMismatch


def make_table(rows, n, radius, dx, dy, seed=None):
    """Readings of a tool displaced by (dx, dy): r - dx*cos - dy*sin."""
    b = angle_basis(n)
    base = radius - dx * b.cos - dy * b.sin
    table = np.tile(base, (rows, 1))
    if seed is not None:
        rng = np.random.default_rng(seed)
        table = table + rng.normal(scale=0.05, size=table.shape)
    return table


def test_four_probe_scenario():
    b = angle_basis(4)
    off = estimate_offset([[102.0, 100.0, 98.0, 100.0]], b, 100.0)
    assert off.dx == pytest.approx(-2.0, abs=1e-12)
    assert off.dy == pytest.approx(0.0, abs=1e-12)


def test_zero_offset_for_nominal_table():
    b = angle_basis(40)
    off = estimate_offset(np.full((5, 40), 127.0), b, 127.0)
    assert off.dx == 0.0
    assert off.dy == 0.0


@pytest.mark.parametrize("rows", [1, 3, 50])
def test_recovers_synthetic_offset(rows):
    b = angle_basis(40)
    table = make_table(rows, 40, 127.0, dx=1.25, dy=-0.4)
    off = estimate_offset(table, b, 127.0)
    assert off.dx == pytest.approx(1.25, abs=1e-9)
    assert off.dy == pytest.approx(-0.4, abs=1e-9)


def test_row_order_does_not_matter():
    b = angle_basis(40)
    table = make_table(20, 40, 127.0, dx=0.3, dy=0.7, seed=3)
    a = estimate_offset(table, b, 127.0)
    c = estimate_offset(table[::-1], b, 127.0)
    assert np.isclose(a.dx, c.dx, atol=1e-12)
    assert np.isclose(a.dy, c.dy, atol=1e-12)


def test_accepts_dataframe():
    b = angle_basis(40)
    table = make_table(4, 40, 127.0, dx=-0.5, dy=0.5)
    off = estimate_offset(pd.DataFrame(table), b, 127.0)
    assert np.isclose(off.dx, -0.5)
    assert np.isclose(off.dy, 0.5)


def test_offset_properties():
    off = Offset(3.0, 4.0)
    assert off.magnitude == pytest.approx(5.0)
    assert Offset(0.0, 1.0).angle_deg == pytest.approx(90.0)
    d = off.to_dict()
    assert d["dx"] == 3.0 and d["magnitude"] == pytest.approx(5.0)


def test_empty_table():
    b = angle_basis(40)
    with pytest.raises(EmptyInput, match="no data"):
        estimate_offset([], b, 127.0)
    with pytest.raises(EmptyInput):
        estimate_offset(np.empty((0, 40)), b, 127.0)


def test_shape_mismatch():
    b = angle_basis(4)
    with pytest.raises(ShapeMismatch):
        estimate_offset([[100.0, 100.0, 100.0, 100.0], [100.0, 100.0, 100.0]], b, 100.0)
    with pytest.raises(ShapeMismatch):
        estimate_offset(np.full((2, 5), 100.0), b, 100.0)


@pytest.mark.parametrize("n", [1, 2])
def test_degenerate_probe_counts(n):
    b = angle_basis(n)
    with pytest.raises(DegenerateFit):
        estimate_offset(np.full((3, n), 10.0), b, 10.0)


def test_non_finite_readings_rejected():
    b = angle_basis(4)
    with pytest.raises(DegenerateFit):
        estimate_offset([[100.0, np.nan, 100.0, 100.0]], b, 100.0)
    with pytest.raises(DegenerateFit):
        estimate_offset([[100.0, 100.0, 100.0, 100.0]], b, float("inf"))


def test_overflowing_readings_do_not_yield_infinite_offset():
    b = angle_basis(4)
    table = [[1e308, 1e308, -1e308, 100.0]] * 2
    with pytest.raises(DegenerateFit, match="overflow"):
        estimate_offset(table, b, 100.0)


def test_one_dimensional_array_asks_for_a_table():
    b = angle_basis(4)
    with pytest.raises(ShapeMismatch, match="2-D table"):
        estimate_offset(np.full(4, 100.0), b, 100.0)
