from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..core.errors import SeriesShapeError
from ..core.types import Trig
from ..api import series_a_cos, series_a_sin, series_b, series_c, series_d
from .kernel import check_table
from .layouts import LAYOUT_A_COS, LAYOUT_A_SIN, LAYOUT_B, LAYOUT_C, LAYOUT_D, SeriesLayout

logger = logging.getLogger(__name__)

IntRow = Tuple[int, ...]
FloatRow = Tuple[float, ...]


def _freeze(
    multipliers: Iterable[Iterable[int]],
    coefficients: Iterable[Iterable[float]],
) -> Tuple[Tuple[IntRow, ...], Tuple[FloatRow, ...]]:
    mult = tuple(tuple(int(i) for i in row) for row in multipliers)
    coef = tuple(tuple(float(c) for c in row) for row in coefficients)
    return mult, coef


@dataclass(frozen=True)
class _SeriesTable(ABC):
    """
    Immutable (multiplier rows, coefficient rows) pair for one series.
    Row widths are checked against the layout on construction.
    """
    multipliers: Tuple[IntRow, ...]
    coefficients: Tuple[FloatRow, ...]

    @property
    @abstractmethod
    def layout(self) -> SeriesLayout:
        """Layout every row is checked against; each series family supplies its own."""

    def __post_init__(self):
        mult, coef = _freeze(self.multipliers, self.coefficients)
        object.__setattr__(self, "multipliers", mult)
        object.__setattr__(self, "coefficients", coef)
        check_table(self.layout, self.multipliers, self.coefficients)
        logger.debug("built %s table '%s' with %d terms", type(self).__name__, self.layout.name, self.n)

    @property
    def n(self) -> int:
        return len(self.multipliers)


@dataclass(frozen=True)
class MainProblemSeries(_SeriesTable):
    """ELP1-3. Coefficient rows are (A, dA/dsigma1 .. dA/dsigma6)."""
    trig: Trig = "sin"

    @property
    def layout(self) -> SeriesLayout:
        if self.trig == "sin":
            return LAYOUT_A_SIN
        if self.trig == "cos":
            return LAYOUT_A_COS
        raise SeriesShapeError(f"trig must be 'sin' or 'cos', got {self.trig!r}")

    def evaluate(self, delaunay_arguments: Sequence[float], *, backend: str = "python") -> float:
        fn = series_a_sin if self.trig == "sin" else series_a_cos
        return fn(delaunay_arguments, self.multipliers, self.coefficients, self.n, backend=backend)


@dataclass(frozen=True)
class PrecessionSeries(_SeriesTable):
    """Series B rows: (zeta, D, l', l, F) multipliers and (phi, A, P) coefficients."""

    @property
    def layout(self) -> SeriesLayout:
        return LAYOUT_B

    def evaluate(self, precession: float, delaunay_arguments: Sequence[float], *, backend: str = "python") -> float:
        return series_b(precession, delaunay_arguments, self.multipliers, self.coefficients, self.n, backend=backend)


@dataclass(frozen=True)
class PlanetarySeriesC(_SeriesTable):
    """8 planetary + (D, l, F) multipliers."""

    @property
    def layout(self) -> SeriesLayout:
        return LAYOUT_C

    def evaluate(
        self,
        planetary_arguments: Sequence[float],
        delaunay_arguments: Sequence[float],
        *,
        backend: str = "python",
    ) -> float:
        return series_c(planetary_arguments, delaunay_arguments, self.multipliers, self.coefficients, self.n, backend=backend)


@dataclass(frozen=True)
class PlanetarySeriesD(_SeriesTable):
    """7 planetary (no Neptune) + (D, l, l', F) multipliers."""

    @property
    def layout(self) -> SeriesLayout:
        return LAYOUT_D

    def evaluate(
        self,
        planetary_arguments: Sequence[float],
        delaunay_arguments: Sequence[float],
        *,
        backend: str = "python",
    ) -> float:
        return series_d(planetary_arguments, delaunay_arguments, self.multipliers, self.coefficients, self.n, backend=backend)
