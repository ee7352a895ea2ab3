# core/units.py

from __future__ import annotations

import math


ARCSECONDS_IN_DEGREE = 3600.0


def radian(d: float) -> float:
    """Convert degrees to radians."""
    return d * (math.pi / 180.0)

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / ARCSECONDS_IN_DEGREE

def arcsec_to_rad(arcsec: float) -> float:
    """Series outputs are in arcseconds; this brings them to radians."""
    return radian(arcsec_to_deg(arcsec))
