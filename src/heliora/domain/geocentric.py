# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geocentric apparent Sun position.

Chains the time scales, Earth heliocentric position, nutation and
obliquity into the Sun's apparent longitude, Greenwich sidereal time and
geocentric right ascension/declination.

"""
import math
from dataclasses import dataclass

from heliora.domain.angles import limit_degrees
from heliora.domain.earth_position import (
    geocentric_latitude,
    geocentric_longitude,
    heliocentric_position,
)
from heliora.domain.julian_day import (
    J2000_JD,
    julian_century,
    julian_ephemeris_century,
    julian_ephemeris_day,
    julian_ephemeris_millennium,
)
from heliora.domain.nutation import (
    ecliptic_mean_obliquity,
    ecliptic_true_obliquity,
    fundamental_arguments,
    nutation_longitude_and_obliquity,
)

_ABERRATION_CONSTANT_ARCSEC: float = 20.4898


@dataclass(frozen=True)
class GeocentricSun:
    """Every quantity from Julian Day through geocentric RA/Dec.

    Angles in degrees; epsilon0 in arcseconds; r in AU.
    """
    jd: float
    jc: float
    jde: float
    jce: float
    jme: float
    l: float
    b: float
    r: float
    theta: float
    beta: float
    x: tuple[float, float, float, float, float]
    del_psi: float
    del_epsilon: float
    epsilon0: float
    epsilon: float
    del_tau: float
    lamda: float
    nu0: float
    nu: float
    alpha: float
    delta: float


def aberration_correction(r: float) -> float:
    """Aberration correction Δτ in degrees for Earth-Sun distance r (AU)."""
    return -_ABERRATION_CONSTANT_ARCSEC / (3600.0 * r)


def apparent_sun_longitude(theta: float, delta_psi: float, delta_tau: float) -> float:
    """Apparent Sun longitude λ = Θ + Δψ + Δτ."""
    return theta + delta_psi + delta_tau


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    """Greenwich mean sidereal time ν0 in degrees, [0, 360)."""
    return limit_degrees(280.46061837 + 360.98564736629 * (jd - J2000_JD)
                         + jc * jc * (0.000387933 - jc / 38710000.0))


def greenwich_sidereal_time(nu0: float, delta_psi: float, epsilon: float) -> float:
    """Apparent sidereal time ν = ν0 + Δψ·cos(ε)."""
    return nu0 + delta_psi * math.cos(math.radians(epsilon))


def geocentric_right_ascension(lamda: float, epsilon: float, beta: float) -> float:
    """Geocentric right ascension α in degrees, [0, 360)."""
    lamda_rad = math.radians(lamda)
    epsilon_rad = math.radians(epsilon)

    return limit_degrees(math.degrees(math.atan2(
        math.sin(lamda_rad) * math.cos(epsilon_rad)
        - math.tan(math.radians(beta)) * math.sin(epsilon_rad),
        math.cos(lamda_rad),
    )))


def geocentric_declination(beta: float, epsilon: float, lamda: float) -> float:
    """Geocentric declination δ in degrees."""
    beta_rad = math.radians(beta)
    epsilon_rad = math.radians(epsilon)

    return math.degrees(math.asin(
        math.sin(beta_rad) * math.cos(epsilon_rad)
        + math.cos(beta_rad) * math.sin(epsilon_rad) * math.sin(math.radians(lamda))
    ))


def geocentric_sun(jd: float, delta_t: float) -> GeocentricSun:
    """
    Geocentric apparent Sun position for a Julian Day.

    Args:
        jd: Julian Day (UT1).
        delta_t: TT - UT1 in seconds.

    Returns:
        GeocentricSun with all intermediate quantities.
    """
    jc = julian_century(jd)
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    jme = julian_ephemeris_millennium(jce)

    helio = heliocentric_position(jme)
    theta = geocentric_longitude(helio.longitude_deg)
    beta = geocentric_latitude(helio.latitude_deg)

    x = fundamental_arguments(jce)
    nutation = nutation_longitude_and_obliquity(jce, x)

    epsilon0 = ecliptic_mean_obliquity(jme)
    epsilon = ecliptic_true_obliquity(nutation.delta_epsilon_deg, epsilon0)

    del_tau = aberration_correction(helio.radius_au)
    lamda = apparent_sun_longitude(theta, nutation.delta_psi_deg, del_tau)
    nu0 = greenwich_mean_sidereal_time(jd, jc)
    nu = greenwich_sidereal_time(nu0, nutation.delta_psi_deg, epsilon)

    return GeocentricSun(
        jd=jd, jc=jc, jde=jde, jce=jce, jme=jme,
        l=helio.longitude_deg, b=helio.latitude_deg, r=helio.radius_au,
        theta=theta, beta=beta, x=x,
        del_psi=nutation.delta_psi_deg,
        del_epsilon=nutation.delta_epsilon_deg,
        epsilon0=epsilon0, epsilon=epsilon,
        del_tau=del_tau, lamda=lamda, nu0=nu0, nu=nu,
        alpha=geocentric_right_ascension(lamda, epsilon, beta),
        delta=geocentric_declination(beta, epsilon, lamda),
    )
