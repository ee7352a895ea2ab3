"""
elpseries.engines.catalogue
---------------------------
Which series shape each of the 36 published ELP2000-82B files uses.

The files come in groups of three (longitude, latitude, distance). Only the
Main Problem distance (ELP3) is a cosine series; every other file, distance
included, is a sine series with a phase offset.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Literal, Tuple

from .layouts import SeriesLayout, get_layout

Coordinate = Literal["longitude", "latitude", "distance"]
COORDINATES: Tuple[Coordinate, ...] = ("longitude", "latitude", "distance")


@dataclass(frozen=True)
class ElpFile:
    number: int
    layout_name: str
    coordinate: Coordinate
    t_power: int        # the series is multiplied by t**t_power by the caller
    description: str

    @property
    def name(self) -> str:
        return f"ELP{self.number}"

    @property
    def layout(self) -> SeriesLayout:
        return get_layout(self.layout_name)


# (first file number, layout for lon/lat, layout for distance, power of t, description)
_GROUPS = (
    (1, "a_sin", "a_cos", 0, "Main Problem"),
    (4, "b", "b", 0, "Earth figure perturbations"),
    (7, "b", "b", 1, "Earth figure perturbations"),
    (10, "c", "c", 0, "planetary perturbations, table 1"),
    (13, "c", "c", 1, "planetary perturbations, table 1"),
    (16, "d", "d", 0, "planetary perturbations, table 2"),
    (19, "d", "d", 1, "planetary perturbations, table 2"),
    (22, "b", "b", 0, "tidal effects"),
    (25, "b", "b", 1, "tidal effects"),
    (28, "b", "b", 0, "Moon figure perturbations"),
    (31, "b", "b", 0, "relativistic perturbations"),
    (34, "b", "b", 2, "planetary perturbations, solar eccentricity"),
)


def _build() -> Dict[int, ElpFile]:
    files: Dict[int, ElpFile] = {}
    for first, lay, lay_dist, t_power, desc in _GROUPS:
        for offset, coord in enumerate(COORDINATES):
            num = first + offset
            files[num] = ElpFile(
                number=num,
                layout_name=lay_dist if coord == "distance" else lay,
                coordinate=coord,
                t_power=t_power,
                description=desc,
            )
    return files


ELP_FILES: Dict[int, ElpFile] = _build()


def elp_file(number: int) -> ElpFile:
    if number not in ELP_FILES:
        raise KeyError(f"Unknown ELP file {number}. Available: 1..{max(ELP_FILES)}")
    return ELP_FILES[number]
