# tests/test_series_b.py

import math

import pytest
from elpseries import SeriesShapeError, series_b

DELAUNAY = [1.25, -0.3, 2.6, 0.05]

def test_empty_series_is_exactly_zero():
    assert series_b(0.7, DELAUNAY, [], [], 0) == 0.0

def test_zero_precession_single_term():
    # zeta = 0 and a zero precession multiplier: plain Delaunay phase plus phi
    mult = [[0, 2, 0, -1, 1]]
    phi, amp, period = 0.4, 0.00123, 411.78
    coef = [[phi, amp, period]]
    D, lp, l, F = DELAUNAY
    expected = amp * math.sin(2 * D - l + F + phi)
    assert series_b(0.0, DELAUNAY, mult, coef, 1) == pytest.approx(expected, abs=1e-15)

def test_precession_column_multiplies_zeta():
    zeta = 0.9
    mult = [[1, 0, 0, 0, 0]]
    coef = [[0.0, 2.0, 0.0]]
    assert series_b(zeta, [0.0] * 4, mult, coef, 1) == pytest.approx(2.0 * math.sin(zeta))
    # Delaunay arguments do not leak into a pure-zeta term
    assert series_b(zeta, DELAUNAY, mult, coef, 1) == pytest.approx(2.0 * math.sin(zeta))

def test_column_order_is_D_lp_l_F():
    coef = [[0.0, 1.0, 0.0]]
    for j in range(4):
        mult = [[0, 0, 0, 0, 0]]
        mult[0][j + 1] = 1
        assert series_b(0.0, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(DELAUNAY[j]))

def test_period_column_is_unused():
    mult = [[1, 1, 0, 0, -1]]
    a = series_b(0.3, DELAUNAY, mult, [[0.2, 5.0, 27.5]], 1)
    b = series_b(0.3, DELAUNAY, mult, [[0.2, 5.0, -1e9]], 1)
    assert a == b

def test_term_order_does_not_matter():
    mult = [[0, 1, 0, 0, 0], [1, 0, 2, -1, 0], [2, -2, 0, 1, 3]]
    coef = [[0.1, 3.0, 0.0], [math.pi, -0.5, 0.0], [1.0, 0.125, 0.0]]
    ref = series_b(0.01, DELAUNAY, mult, coef, 3)
    rev = series_b(0.01, DELAUNAY, mult[::-1], coef[::-1], 3)
    assert rev == pytest.approx(ref, abs=1e-12)

def test_shapes_are_checked():
    with pytest.raises(SeriesShapeError):
        series_b(0.0, DELAUNAY, [[0, 1, 0, 0]], [[0.0, 1.0, 0.0]], 1)
    with pytest.raises(SeriesShapeError):
        series_b(0.0, DELAUNAY, [[0, 1, 0, 0, 0]], [[0.0, 1.0]], 1)
    with pytest.raises(SeriesShapeError):
        series_b(0.0, DELAUNAY, [[0, 1, 0, 0, 0]], [[0.0, 1.0, 0.0]], 3)
