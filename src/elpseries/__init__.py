"""elpseries public API.

Fourier-series kernels of the ELP2000-82B lunar theory. Keep this surface
small: users should mostly call the five series functions re-exported here.
"""

import logging

from .api import (
    series_a_sin,
    series_a_cos,
    series_b,
    series_c,
    series_d,
)
from .core.errors import BackendUnavailableError, ElpSeriesError, SeriesShapeError
from .core.types import DelaunayArguments, PlanetaryArguments
from .core.units import ARCSECONDS_IN_DEGREE, arcsec_to_rad, radian
from .engines.catalogue import ELP_FILES, elp_file
from .engines.tables import MainProblemSeries, PlanetarySeriesC, PlanetarySeriesD, PrecessionSeries

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "series_a_sin",
    "series_a_cos",
    "series_b",
    "series_c",
    "series_d",
    "radian",
    "arcsec_to_rad",
    "ARCSECONDS_IN_DEGREE",
    "DelaunayArguments",
    "PlanetaryArguments",
    "MainProblemSeries",
    "PrecessionSeries",
    "PlanetarySeriesC",
    "PlanetarySeriesD",
    "ELP_FILES",
    "elp_file",
    "ElpSeriesError",
    "SeriesShapeError",
    "BackendUnavailableError",
]
