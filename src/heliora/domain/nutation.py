# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Nutation in longitude/obliquity and the obliquity of the ecliptic.

Uses the 63-term lunar-solar series of Meeus Table 22.A (as adopted by the
NREL SPA) with five fundamental arguments, and the Laskar polynomial for
the mean obliquity.

References:
    Reda, I., Andreas, A. (2008). NREL/TP-560-34302, Section 3.4-3.5.
    Meeus, J. Astronomical Algorithms, Ch. 22.
    Laskar, J. (1986). Astron. Astrophys. 157, 59.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from heliora.domain.angles import third_order_polynomial

# Coefficients are in 0.0001 arcsec; dividing by 36e6 yields degrees.
_NUTATION_SCALE: float = 36_000_000.0

_NUT_CACHE: dict[str, Optional[np.ndarray]] = {"Y": None, "PE": None}


def _load_nutation_arrays() -> tuple[np.ndarray, np.ndarray]:
    """Load argument multipliers (63, 5) and coefficients (63, 4), read-only."""
    if _NUT_CACHE["Y"] is not None and _NUT_CACHE["PE"] is not None:
        return _NUT_CACHE["Y"], _NUT_CACHE["PE"]

    data_path = Path(__file__).parent.parent / "data" / "nutation_terms.json"
    with open(data_path, encoding="utf-8") as f:
        data = json.load(f)

    y_terms = np.array(data["Y"], dtype=np.float64)
    pe_terms = np.array(data["PE"], dtype=np.float64)
    if y_terms.shape[0] != pe_terms.shape[0]:
        raise ValueError(
            f"nutation table mismatch: {y_terms.shape[0]} argument rows, "
            f"{pe_terms.shape[0]} coefficient rows"
        )
    y_terms.flags.writeable = False
    pe_terms.flags.writeable = False

    _NUT_CACHE["Y"] = y_terms
    _NUT_CACHE["PE"] = pe_terms
    return y_terms, pe_terms


@dataclass(frozen=True)
class Nutation:
    """Nutation angles in degrees."""
    delta_psi_deg: float      # nutation in longitude
    delta_epsilon_deg: float  # nutation in obliquity


# --------------------------------------------------------------------------- #
# Fundamental arguments (degrees, not reduced)
# --------------------------------------------------------------------------- #

def mean_elongation_moon_sun(jce: float) -> float:
    """X0: mean elongation of the Moon from the Sun."""
    return third_order_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    """X1: mean anomaly of the Sun (Earth)."""
    return third_order_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    """X2: mean anomaly of the Moon."""
    return third_order_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def argument_latitude_moon(jce: float) -> float:
    """X3: Moon's argument of latitude."""
    return third_order_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def ascending_longitude_moon(jce: float) -> float:
    """X4: longitude of the ascending node of the Moon's mean orbit."""
    return third_order_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def fundamental_arguments(jce: float) -> tuple[float, float, float, float, float]:
    """(X0, X1, X2, X3, X4) in degrees for a Julian ephemeris century."""
    return (
        mean_elongation_moon_sun(jce),
        mean_anomaly_sun(jce),
        mean_anomaly_moon(jce),
        argument_latitude_moon(jce),
        ascending_longitude_moon(jce),
    )


# --------------------------------------------------------------------------- #
# Nutation and obliquity
# --------------------------------------------------------------------------- #

def nutation_longitude_and_obliquity(
    jce: float,
    x: tuple[float, float, float, float, float],
) -> Nutation:
    """
    Nutation in longitude (Δψ) and obliquity (Δε).

    For each term the argument is Σ Y_ij·X_j; Δψ sums (a + b·JCE)·sin(arg)
    and Δε sums (c + d·JCE)·cos(arg).

    Args:
        jce: Julian ephemeris century.
        x: Fundamental arguments X0..X4 in degrees.

    Returns:
        Nutation with both angles in degrees.
    """
    y_terms, pe_terms = _load_nutation_arrays()
    args_rad = np.radians(y_terms @ np.asarray(x, dtype=np.float64))

    sum_psi = np.sum((pe_terms[:, 0] + jce * pe_terms[:, 1]) * np.sin(args_rad))
    sum_epsilon = np.sum((pe_terms[:, 2] + jce * pe_terms[:, 3]) * np.cos(args_rad))

    return Nutation(
        delta_psi_deg=float(sum_psi) / _NUTATION_SCALE,
        delta_epsilon_deg=float(sum_epsilon) / _NUTATION_SCALE,
    )


def ecliptic_mean_obliquity(jme: float) -> float:
    """Mean obliquity ε0 in arcseconds (Laskar 1986, U = JME/10)."""
    u = jme / 10.0
    return 84381.448 + u * (-4680.93 + u * (-1.55 + u * (1999.25 + u * (-51.38 + u * (
        -249.67 + u * (-39.05 + u * (7.12 + u * (27.87 + u * (5.79 + u * 2.45)))))))))


def ecliptic_true_obliquity(delta_epsilon: float, epsilon0: float) -> float:
    """True obliquity ε in degrees from Δε (degrees) and ε0 (arcseconds)."""
    return delta_epsilon + epsilon0 / 3600.0


def nutation_at(jce: float) -> Nutation:
    """Nutation angles directly from a Julian ephemeris century."""
    return nutation_longitude_and_obliquity(jce, fundamental_arguments(jce))
