from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Protocol, Sequence

from ..core.errors import BackendUnavailableError
from .layouts import SeriesLayout

logger = logging.getLogger(__name__)

BackendName = Literal["python", "numpy"]


class Backend(Protocol):
    kind: BackendName

    def reduce(
        self,
        layout: SeriesLayout,
        argv: Sequence[float],
        multipliers: Sequence[Sequence[int]],
        coefficients: Sequence[Sequence[float]],
    ) -> float: ...


_PY_TRIG: Dict[str, Callable[[float], float]] = {"sin": math.sin, "cos": math.cos}


@dataclass(frozen=True)
class PythonBackend(Backend):
    """Plain float loop; argv is already ordered like the multiplier columns."""
    kind: Literal["python"] = "python"

    def reduce(self, layout, argv, multipliers, coefficients) -> float:
        trig = _PY_TRIG[layout.trig]
        amp_col = layout.amp_col
        phase_col = layout.phase_col
        total = 0.0
        for mult, coef in zip(multipliers, coefficients):
            phase = 0.0
            for i, x in zip(mult, argv):
                phase += i * x
            if phase_col is not None:
                phase += coef[phase_col]
            total += coef[amp_col] * trig(phase)
        return total


@dataclass(frozen=True)
class NumpyBackend(Backend):
    """Vectorized reduction: phase = M @ x (+ phi), then sum(A * trig(phase))."""
    np: Any
    kind: Literal["numpy"] = "numpy"

    @classmethod
    def load(cls) -> "NumpyBackend":
        try:
            import numpy as np
        except ImportError as e:
            raise BackendUnavailableError(
                'The numpy backend needs numpy. Install: pip install "elpseries[numpy]"'
            ) from e
        return cls(np=np)

    def reduce(self, layout, argv, multipliers, coefficients) -> float:
        np = self.np
        m = np.asarray(multipliers, dtype=np.float64).reshape(-1, layout.width)
        c = np.asarray(coefficients, dtype=np.float64).reshape(-1, layout.coeff_width)
        x = np.asarray(argv, dtype=np.float64)
        phase = m @ x
        if layout.phase_col is not None:
            phase = phase + c[:, layout.phase_col]
        trig = np.sin if layout.trig == "sin" else np.cos
        return float(np.sum(c[:, layout.amp_col] * trig(phase)))


_cache: Dict[str, Backend] = {}


def get_backend(name: str) -> Backend:
    if name in _cache:
        return _cache[name]
    if name == "python":
        be: Backend = PythonBackend()
    elif name == "numpy":
        be = NumpyBackend.load()
    else:
        raise KeyError(f"Unknown backend '{name}'. Available: ['numpy', 'python']")
    logger.debug("resolved series backend %r", name)
    _cache[name] = be
    return be
