"""
elpseries.engines.layouts
-------------------------
Pure data description of the five ELP2000-82B series shapes.

A layout says which argument each multiplier column multiplies, how wide a
coefficient row is, where the amplitude (and, if any, the phase offset phi)
sits in that row, and whether the term uses sine or cosine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.types import ArgName, Trig


@dataclass(frozen=True)
class SeriesLayout:
    name: str
    columns: Tuple[ArgName, ...]    # multiplier column j multiplies argument columns[j]
    coeff_width: int
    amp_col: int
    phase_col: Optional[int]        # None: no phase offset in the coefficient row
    trig: Trig
    expression: str

    @property
    def width(self) -> int:
        return len(self.columns)


# Main Problem: (A, dA/dsigma1 .. dA/dsigma6); derivatives are carried, not evaluated.
LAYOUT_A_SIN = SeriesLayout(
    name="a_sin",
    columns=("D", "lp", "l", "F"),
    coeff_width=7,
    amp_col=0,
    phase_col=None,
    trig="sin",
    expression="A sin(i1 D + i2 l' + i3 l + i4 F)",
)

LAYOUT_A_COS = SeriesLayout(
    name="a_cos",
    columns=("D", "lp", "l", "F"),
    coeff_width=7,
    amp_col=0,
    phase_col=None,
    trig="cos",
    expression="A cos(i1 D + i2 l' + i3 l + i4 F)",
)

# Series B/C/D: (phi, A, P); P is an approximate period, unused.
LAYOUT_B = SeriesLayout(
    name="b",
    columns=("zeta", "D", "lp", "l", "F"),
    coeff_width=3,
    amp_col=1,
    phase_col=0,
    trig="sin",
    expression="A sin(i1 zeta + i2 D + i3 l' + i4 l + i5 F + phi)",
)

# Planetary type 1: Neptune included, l' excluded.
LAYOUT_C = SeriesLayout(
    name="c",
    columns=("Me", "V", "T", "Ma", "J", "S", "U", "N", "D", "l", "F"),
    coeff_width=3,
    amp_col=1,
    phase_col=0,
    trig="sin",
    expression="A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U + i8 N + i9 D + i10 l + i11 F + phi)",
)

# Planetary type 2: Neptune excluded, all four Delaunay arguments.
LAYOUT_D = SeriesLayout(
    name="d",
    columns=("Me", "V", "T", "Ma", "J", "S", "U", "D", "l", "lp", "F"),
    coeff_width=3,
    amp_col=1,
    phase_col=0,
    trig="sin",
    expression="A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U + i8 D + i9 l + i10 l' + i11 F + phi)",
)

ALL_LAYOUTS: Dict[str, SeriesLayout] = {
    lay.name: lay for lay in (LAYOUT_A_SIN, LAYOUT_A_COS, LAYOUT_B, LAYOUT_C, LAYOUT_D)
}


def get_layout(name: str) -> SeriesLayout:
    if name not in ALL_LAYOUTS:
        raise KeyError(f"Unknown series layout '{name}'. Available: {sorted(ALL_LAYOUTS)}")
    return ALL_LAYOUTS[name]
