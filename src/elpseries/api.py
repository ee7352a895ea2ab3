"""Named entry points for the five ELP2000-82B series.

Every routine returns its sum in arcseconds. Argument vectors are in radians:

  delaunay_arguments   (D, l', l, F)
  planetary_arguments  (Me, V, T, Ma, J, S, U, N); series D also accepts the
                       seven-element vector without Neptune
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from .core.errors import SeriesShapeError
from .core.types import ArgName, DELAUNAY_NAMES, PLANET_NAMES
from .engines.kernel import reduce_series
from .engines.layouts import LAYOUT_A_COS, LAYOUT_A_SIN, LAYOUT_B, LAYOUT_C, LAYOUT_D

Vector = Sequence[float]
Rows = Sequence[Sequence[float]]
IntRows = Sequence[Sequence[int]]


def _delaunay(delaunay_arguments: Vector) -> Dict[ArgName, float]:
    if len(delaunay_arguments) != 4:
        raise SeriesShapeError(
            f"Delaunay arguments must be (D, l', l, F), got {len(delaunay_arguments)} values"
        )
    return dict(zip(DELAUNAY_NAMES, delaunay_arguments))

def _planetary(planetary_arguments: Vector, *, allow_without_neptune: bool = False) -> Dict[ArgName, float]:
    n = len(planetary_arguments)
    if n != 8 and not (allow_without_neptune and n == 7):
        expected = "7 or 8" if allow_without_neptune else "8"
        raise SeriesShapeError(f"planetary arguments must have {expected} values, got {n}")
    return dict(zip(PLANET_NAMES, planetary_arguments))


def series_a_sin(
    delaunay_arguments: Vector,
    multipliers: IntRows,
    coefficients: Rows,
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """
    Main Problem sine series  Σ A sin(i1 D + i2 l' + i3 l + i4 F).

    multipliers: n rows of 4 integers; coefficients: n rows of 7 values where
    column 0 is A and columns 1..6 are dA/dsigma_i (carried, not evaluated).
    Used for longitude and latitude (ELP1, ELP2).
    """
    return reduce_series(LAYOUT_A_SIN, _delaunay(delaunay_arguments), multipliers, coefficients, n, backend=backend)

def series_a_cos(
    delaunay_arguments: Vector,
    multipliers: IntRows,
    coefficients: Rows,
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """Main Problem cosine series  Σ A cos(i1 D + i2 l' + i3 l + i4 F); radial distance (ELP3)."""
    return reduce_series(LAYOUT_A_COS, _delaunay(delaunay_arguments), multipliers, coefficients, n, backend=backend)

def series_b(
    precession: float,
    delaunay_arguments: Vector,
    multipliers: IntRows,
    coefficients: Rows,
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """
    Σ A sin(i1 zeta + i2 D + i3 l' + i4 l + i5 F + phi)

    Earth figure, tidal, Moon figure, relativistic and solar-eccentricity
    planetary terms. Multiplier column 0 multiplies the precession zeta.
    Coefficient rows are (phi, A, P); P is not used.
    """
    args = _delaunay(delaunay_arguments)
    args["zeta"] = precession
    return reduce_series(LAYOUT_B, args, multipliers, coefficients, n, backend=backend)

def series_c(
    planetary_arguments: Vector,
    delaunay_arguments: Vector,
    multipliers: IntRows,
    coefficients: Rows,
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """
    Planetary perturbations, first type (ELP10-15):

      Σ A sin(i1 Me + ... + i8 N + i9 D + i10 l + i11 F + phi)

    l' does not take part; the Delaunay vector is still the full (D, l', l, F).
    """
    args = _planetary(planetary_arguments)
    args.update(_delaunay(delaunay_arguments))
    return reduce_series(LAYOUT_C, args, multipliers, coefficients, n, backend=backend)

def series_d(
    planetary_arguments: Vector,
    delaunay_arguments: Vector,
    multipliers: IntRows,
    coefficients: Rows,
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """
    Planetary perturbations, second type (ELP16-21):

      Σ A sin(i1 Me + ... + i7 U + i8 D + i9 l + i10 l' + i11 F + phi)

    Neptune does not take part; note l comes before l' in these columns.
    """
    args = _planetary(planetary_arguments, allow_without_neptune=True)
    args.update(_delaunay(delaunay_arguments))
    return reduce_series(LAYOUT_D, args, multipliers, coefficients, n, backend=backend)


SERIES_FUNCTIONS = {
    "a_sin": series_a_sin,
    "a_cos": series_a_cos,
    "b": series_b,
    "c": series_c,
    "d": series_d,
}
