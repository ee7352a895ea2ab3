# tests/test_series_planetary.py

import math

import pytest
from elpseries import SeriesShapeError, series_c, series_d

PLANETS = [4.40, 3.17, 1.75, 6.20, 0.60, 0.87, 5.48, 5.31]   # Me V T Ma J S U N
DELAUNAY = [5.19, 6.24, 2.36, 1.63]                          # D l' l F

COEF = [[0.35, 1.5e-4, 12.1], [2.0, -7e-5, 540.0], [-1.1, 3e-5, 1.0]]

def _phase_sum(coef):
    return sum(a * math.sin(phi) for phi, a, _ in coef)

def test_empty_series_is_exactly_zero():
    assert series_c(PLANETS, DELAUNAY, [], [], 0) == 0.0
    assert series_d(PLANETS, DELAUNAY, [], [], 0) == 0.0

@pytest.mark.parametrize("fn", [series_c, series_d])
def test_zero_multipliers_leave_only_phase_offsets(fn):
    mult = [[0] * 11 for _ in COEF]
    expected = _phase_sum(COEF)
    assert fn(PLANETS, DELAUNAY, mult, COEF, 3) == pytest.approx(expected, abs=1e-18)
    # independent of the argument values
    assert fn([9.0] * 8, [-3.0] * 4, mult, COEF, 3) == pytest.approx(expected, abs=1e-18)

def test_series_c_column_mapping():
    D, lp, l, F = DELAUNAY
    coef = [[0.0, 1.0, 0.0]]
    for j in range(8):
        mult = [[0] * 11]
        mult[0][j] = 1
        assert series_c(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(PLANETS[j]))
    for j, x in zip((8, 9, 10), (D, l, F)):
        mult = [[0] * 11]
        mult[0][j] = 1
        assert series_c(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(x))

def test_series_d_column_mapping():
    D, lp, l, F = DELAUNAY
    coef = [[0.0, 1.0, 0.0]]
    for j in range(7):
        mult = [[0] * 11]
        mult[0][j] = 1
        assert series_d(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(PLANETS[j]))
    for j, x in zip((7, 8, 9, 10), (D, l, lp, F)):
        mult = [[0] * 11]
        mult[0][j] = 1
        assert series_d(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(x))

def test_c_and_d_differ_on_the_same_row():
    # column 7 is Neptune in series C but D in series D
    mult = [[0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0]]
    coef = [[0.0, 1.0, 0.0]]
    assert series_c(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(PLANETS[7]))
    assert series_d(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(math.sin(DELAUNAY[0]))

def test_series_d_ignores_neptune():
    mult = [[1, -2, 0, 3, 0, 0, 1, 2, -1, 0, 1]]
    coef = [[0.5, 2e-4, 0.0]]
    full = series_d(PLANETS, DELAUNAY, mult, coef, 1)
    assert series_d(PLANETS[:7], DELAUNAY, mult, coef, 1) == full
    assert series_d(PLANETS[:7] + [123.0], DELAUNAY, mult, coef, 1) == full

def test_series_c_hand_computed_term():
    Me, V, T, Ma, J, S, U, N = PLANETS
    D, lp, l, F = DELAUNAY
    mult = [[0, 0, 18, -16, 0, 0, 0, 0, 0, -1, 0]]
    coef = [[4.5, 0.00058, 0.0]]
    expected = 0.00058 * math.sin(18 * T - 16 * Ma - l + 4.5)
    assert series_c(PLANETS, DELAUNAY, mult, coef, 1) == pytest.approx(expected, abs=1e-16)

@pytest.mark.parametrize("fn", [series_c, series_d])
def test_term_order_does_not_matter(fn):
    mult = [
        [0, 0, 1, -1, 0, 0, 0, 0, 2, 0, 0],
        [0, 2, -3, 0, 0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 2],
    ]
    ref = fn(PLANETS, DELAUNAY, mult, COEF, 3)
    perm = [1, 2, 0]
    out = fn(PLANETS, DELAUNAY, [mult[i] for i in perm], [COEF[i] for i in perm], 3)
    assert out == pytest.approx(ref, abs=1e-15)

def test_planetary_vector_lengths_are_checked():
    mult = [[0] * 11]
    coef = [[0.0, 1.0, 0.0]]
    with pytest.raises(SeriesShapeError):
        series_c(PLANETS[:7], DELAUNAY, mult, coef, 1)
    with pytest.raises(SeriesShapeError):
        series_d(PLANETS[:6], DELAUNAY, mult, coef, 1)
    with pytest.raises(SeriesShapeError):
        series_c(PLANETS, DELAUNAY[:3], mult, coef, 1)

def test_multiplier_width_is_checked():
    with pytest.raises(SeriesShapeError):
        series_d(PLANETS, DELAUNAY, [[0] * 10], [[0.0, 1.0, 0.0]], 1)
