# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Earth heliocentric position from the VSOP87 periodic terms used by SPA.

Heliocentric longitude (L0..L5), latitude (B0..B1) and radius vector
(R0..R4) are each a polynomial in the Julian ephemeris millennium whose
coefficients are sums of A·cos(B + C·JME) over a fixed term table.

The term tables ship as bundled JSON and are loaded once into read-only
NumPy arrays; each group is then summed in a single vectorised pass.

References:
    Reda, I., Andreas, A. (2008). Solar Position Algorithm for Solar
    Radiation Applications. NREL/TP-560-34302, Table A4.2.
    Meeus, J. Astronomical Algorithms, Ch. 32 and Appendix III.
"""
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from heliora.domain.angles import limit_degrees

# --------------------------------------------------------------------------- #
# Term table loading (cached NumPy arrays)
# --------------------------------------------------------------------------- #

_TERMS_CACHE: dict[str, Optional[tuple[np.ndarray, ...]]] = {
    "L": None, "B": None, "R": None,
}


def _load_earth_terms(series: str) -> tuple[np.ndarray, ...]:
    """Load one periodic-term series ("L", "B" or "R") as (N, 3) arrays.

    One array per power of JME, columns (A, B, C). Arrays are marked
    read-only so the shared tables cannot be altered by callers.
    """
    cached = _TERMS_CACHE[series]
    if cached is not None:
        return cached

    data_path = Path(__file__).parent.parent / "data" / "earth_periodic_terms.json"
    with open(data_path, encoding="utf-8") as f:
        data = json.load(f)

    for key in _TERMS_CACHE:
        groups = []
        for group in data[key]:
            arr = np.array(group, dtype=np.float64)
            arr.flags.writeable = False
            groups.append(arr)
        _TERMS_CACHE[key] = tuple(groups)

    return _TERMS_CACHE[series]


# --------------------------------------------------------------------------- #
# Summation
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class HeliocentricPosition:
    """Earth heliocentric ecliptic position."""
    longitude_deg: float  # L, [0, 360)
    latitude_deg: float   # B
    radius_au: float      # R, astronomical units


def earth_periodic_term_summation(terms: np.ndarray, jme: float) -> float:
    """Sum A·cos(B + C·JME) over one term group."""
    return float(np.sum(terms[:, 0] * np.cos(terms[:, 1] + terms[:, 2] * jme)))


def earth_values(term_sums: list[float], jme: float) -> float:
    """Combine group sums as a polynomial in JME, scaled by 1e-8.

    term_sums[i] is the coefficient of JME**i.
    """
    total = 0.0
    for coefficient in reversed(term_sums):
        total = total * jme + coefficient
    return total / 1.0e8


def _series_value(series: str, jme: float) -> float:
    sums = [earth_periodic_term_summation(group, jme)
            for group in _load_earth_terms(series)]
    return earth_values(sums, jme)


def earth_heliocentric_longitude(jme: float) -> float:
    """Heliocentric longitude L in degrees, [0, 360)."""
    return limit_degrees(math.degrees(_series_value("L", jme)))


def earth_heliocentric_latitude(jme: float) -> float:
    """Heliocentric latitude B in degrees."""
    return math.degrees(_series_value("B", jme))


def earth_radius_vector(jme: float) -> float:
    """Earth-Sun distance R in astronomical units."""
    return _series_value("R", jme)


def heliocentric_position(jme: float) -> HeliocentricPosition:
    """Earth heliocentric L, B, R at the given Julian ephemeris millennium."""
    return HeliocentricPosition(
        longitude_deg=earth_heliocentric_longitude(jme),
        latitude_deg=earth_heliocentric_latitude(jme),
        radius_au=earth_radius_vector(jme),
    )


def geocentric_longitude(l: float) -> float:
    """Geocentric longitude Θ = L + 180°, kept in [0, 360)."""
    theta = l + 180.0
    return theta - 360.0 if theta >= 360.0 else theta


def geocentric_latitude(b: float) -> float:
    """Geocentric latitude β = -B."""
    return -b
