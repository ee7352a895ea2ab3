"""
elpseries.engines.kernel
------------------------
The single reduction shared by all ELP series:

    total = sum_k  A_k * trig( sum_j m[k][j] * x[columns[j]]  (+ phi_k) )

Shape checks happen here, before any summation, so a misaligned table fails
loudly instead of producing a plausible-looking wrong number.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from ..core.errors import SeriesShapeError
from ..core.types import ArgName
from .backends import get_backend
from .layouts import SeriesLayout


def check_table(
    layout: SeriesLayout,
    multipliers: Sequence[Sequence[int]],
    coefficients: Sequence[Sequence[float]],
    n: Optional[int] = None,
) -> int:
    """Validate table extents against the layout and return the term count."""
    n_mult = len(multipliers)
    n_coef = len(coefficients)
    if n_mult != n_coef:
        raise SeriesShapeError(
            f"series '{layout.name}': {n_mult} multiplier rows but {n_coef} coefficient rows"
        )
    if n is not None and n != n_mult:
        raise SeriesShapeError(
            f"series '{layout.name}': term count n={n} but tables have {n_mult} rows"
        )
    for k, (mult, coef) in enumerate(zip(multipliers, coefficients)):
        if len(mult) != layout.width:
            raise SeriesShapeError(
                f"series '{layout.name}': multiplier row {k} has {len(mult)} columns, expected {layout.width}"
            )
        if len(coef) != layout.coeff_width:
            raise SeriesShapeError(
                f"series '{layout.name}': coefficient row {k} has {len(coef)} columns, expected {layout.coeff_width}"
            )
    return n_mult


def gather_arguments(layout: SeriesLayout, arguments: Mapping[ArgName, float]) -> Tuple[float, ...]:
    """Order argument values like the layout's multiplier columns."""
    missing = [a for a in layout.columns if a not in arguments]
    if missing:
        raise SeriesShapeError(f"series '{layout.name}': missing arguments {missing}")
    return tuple(float(arguments[a]) for a in layout.columns)


def reduce_series(
    layout: SeriesLayout,
    arguments: Mapping[ArgName, float],
    multipliers: Sequence[Sequence[int]],
    coefficients: Sequence[Sequence[float]],
    n: Optional[int] = None,
    *,
    backend: str = "python",
) -> float:
    """Evaluate one series in arcseconds (the unit of its amplitudes)."""
    be = get_backend(backend)
    argv = gather_arguments(layout, arguments)
    if check_table(layout, multipliers, coefficients, n) == 0:
        return 0.0
    return be.reduce(layout, argv, multipliers, coefficients)
