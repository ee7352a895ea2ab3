from __future__ import annotations
from typing import Literal, NamedTuple

from .units import radian

# Names of every angle that can appear in a series phase.
ArgName = Literal["zeta", "D", "lp", "l", "F", "Me", "V", "T", "Ma", "J", "S", "U", "N"]
Trig = Literal["sin", "cos"]

DELAUNAY_NAMES: tuple[ArgName, ...] = ("D", "lp", "l", "F")
PLANET_NAMES: tuple[ArgName, ...] = ("Me", "V", "T", "Ma", "J", "S", "U", "N")


class DelaunayArguments(NamedTuple):
    """Delaunay arguments in radians, in the order D, l', l, F."""
    D: float
    lp: float
    l: float
    F: float

    @classmethod
    def from_degrees(cls, D: float, lp: float, l: float, F: float) -> "DelaunayArguments":
        return cls(radian(D), radian(lp), radian(l), radian(F))


class PlanetaryArguments(NamedTuple):
    """Mean longitudes of the planets in radians (Mercury .. Neptune)."""
    Me: float
    V: float
    T: float
    Ma: float
    J: float
    S: float
    U: float
    N: float

    @classmethod
    def from_degrees(cls, *deg: float) -> "PlanetaryArguments":
        return cls(*(radian(d) for d in deg))
