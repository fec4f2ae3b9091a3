# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric Sun position for an observer on the Earth's surface.

Corrects the geocentric right ascension/declination for parallax at the
observer's geodetic position and elevation, applies atmospheric
refraction, and yields zenith, azimuth and surface incidence angles.

Azimuth conventions:
    astronomical: measured westward from south, [0, 360)
    navigational: measured eastward from north, [0, 360)
"""
import math
from dataclasses import dataclass
from typing import Optional

from heliora.domain.angles import limit_degrees

SUN_RADIUS_DEG: float = 0.26667
"""Apparent radius of the solar disc in degrees."""

_EARTH_EQUATORIAL_RADIUS_M: float = 6378140.0
_POLAR_AXIS_RATIO: float = 0.99664719  # b/a of the reference ellipsoid
_SOLAR_PARALLAX_ARCSEC: float = 8.794


@dataclass(frozen=True)
class TopocentricSun:
    """Observer-centred Sun angles in degrees."""
    h: float              # observer hour angle
    xi: float             # equatorial horizontal parallax
    del_alpha: float      # parallax in right ascension
    delta_prime: float    # topocentric declination
    alpha_prime: float    # topocentric right ascension
    h_prime: float        # topocentric local hour angle
    e0: float             # elevation without refraction
    del_e: float          # refraction correction
    e: float              # refracted elevation
    zenith: float
    azimuth_astro: float
    azimuth: float
    incidence: Optional[float] = None


def observer_hour_angle(nu: float, longitude: float, alpha_deg: float) -> float:
    """Local hour angle H in degrees, [0, 360)."""
    return limit_degrees(nu + longitude - alpha_deg)


def sun_equatorial_horizontal_parallax(r: float) -> float:
    """Equatorial horizontal parallax ξ in degrees."""
    return _SOLAR_PARALLAX_ARCSEC / (3600.0 * r)


def right_ascension_parallax_and_topocentric_dec(
    latitude: float,
    elevation: float,
    xi: float,
    h: float,
    delta: float,
) -> tuple[float, float]:
    """
    Parallax in right ascension and topocentric declination.

    Args:
        latitude: Observer geodetic latitude in degrees.
        elevation: Observer elevation in meters.
        xi: Equatorial horizontal parallax in degrees.
        h: Observer hour angle in degrees.
        delta: Geocentric declination in degrees.

    Returns:
        (Δα, δ') in degrees.
    """
    lat_rad = math.radians(latitude)
    xi_rad = math.radians(xi)
    h_rad = math.radians(h)
    delta_rad = math.radians(delta)

    u = math.atan(_POLAR_AXIS_RATIO * math.tan(lat_rad))
    y = (_POLAR_AXIS_RATIO * math.sin(u)
         + elevation * math.sin(lat_rad) / _EARTH_EQUATORIAL_RADIUS_M)
    x = math.cos(u) + elevation * math.cos(lat_rad) / _EARTH_EQUATORIAL_RADIUS_M

    denominator = math.cos(delta_rad) - x * math.sin(xi_rad) * math.cos(h_rad)
    delta_alpha_rad = math.atan2(-x * math.sin(xi_rad) * math.sin(h_rad), denominator)

    delta_prime = math.degrees(math.atan2(
        (math.sin(delta_rad) - y * math.sin(xi_rad)) * math.cos(delta_alpha_rad),
        denominator,
    ))

    return math.degrees(delta_alpha_rad), delta_prime


def topocentric_right_ascension(alpha_deg: float, delta_alpha: float) -> float:
    return alpha_deg + delta_alpha


def topocentric_local_hour_angle(h: float, delta_alpha: float) -> float:
    return h - delta_alpha


def topocentric_elevation_angle(latitude: float, delta_prime: float, h_prime: float) -> float:
    """Elevation e0 without refraction, degrees."""
    lat_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)

    return math.degrees(math.asin(
        math.sin(lat_rad) * math.sin(delta_prime_rad)
        + math.cos(lat_rad) * math.cos(delta_prime_rad) * math.cos(math.radians(h_prime))
    ))


def atmospheric_refraction_correction(
    pressure: float,
    temperature: float,
    atmos_refract: float,
    e0: float,
) -> float:
    """
    Refraction correction Δe in degrees (Bennett formula).

    Zero when the Sun is below the refracted horizon, i.e. when
    e0 < -(solar radius + atmos_refract).

    Args:
        pressure: Local pressure in millibars.
        temperature: Local temperature in °C.
        atmos_refract: Refraction at the horizon in degrees.
        e0: Unrefracted elevation in degrees.
    """
    if e0 < -(SUN_RADIUS_DEG + atmos_refract):
        return 0.0

    return ((pressure / 1010.0) * (283.0 / (273.0 + temperature))
            * 1.02 / (60.0 * math.tan(math.radians(e0 + 10.3 / (e0 + 5.11)))))


def topocentric_elevation_angle_corrected(e0: float, delta_e: float) -> float:
    return e0 + delta_e


def topocentric_zenith_angle(e: float) -> float:
    return 90.0 - e


def topocentric_azimuth_angle_astro(h_prime: float, latitude: float, delta_prime: float) -> float:
    """Azimuth westward from south, [0, 360)."""
    h_prime_rad = math.radians(h_prime)
    lat_rad = math.radians(latitude)

    return limit_degrees(math.degrees(math.atan2(
        math.sin(h_prime_rad),
        math.cos(h_prime_rad) * math.sin(lat_rad)
        - math.tan(math.radians(delta_prime)) * math.cos(lat_rad),
    )))


def topocentric_azimuth_angle(azimuth_astro: float) -> float:
    """Azimuth eastward from north, [0, 360)."""
    return limit_degrees(azimuth_astro + 180.0)


def surface_incidence_angle(
    zenith: float,
    azimuth_astro: float,
    azm_rotation: float,
    slope: float,
) -> float:
    """
    Angle between the Sun direction and the normal of a tilted surface.

    Args:
        zenith: Topocentric zenith angle in degrees.
        azimuth_astro: Azimuth westward from south in degrees.
        azm_rotation: Surface azimuth rotation from south (negative east).
        slope: Surface tilt from horizontal in degrees.
    """
    zenith_rad = math.radians(zenith)
    slope_rad = math.radians(slope)

    return math.degrees(math.acos(
        math.cos(zenith_rad) * math.cos(slope_rad)
        + math.sin(slope_rad) * math.sin(zenith_rad)
        * math.cos(math.radians(azimuth_astro - azm_rotation))
    ))


def topocentric_sun(
    nu: float,
    alpha: float,
    delta: float,
    r: float,
    latitude: float,
    longitude: float,
    elevation: float,
    pressure: float,
    temperature: float,
    atmos_refract: float,
    surface: Optional[tuple[float, float]] = None,
) -> TopocentricSun:
    """
    Topocentric zenith and azimuth from a geocentric Sun position.

    Args:
        nu: Apparent Greenwich sidereal time in degrees.
        alpha, delta: Geocentric right ascension/declination in degrees.
        r: Earth-Sun distance in AU.
        latitude, longitude: Observer position in degrees.
        elevation: Observer elevation in meters.
        pressure, temperature: Local atmosphere (mbar, °C).
        atmos_refract: Refraction at the horizon in degrees.
        surface: Optional (slope, azm_rotation) in degrees; when given the
            incidence angle is computed as well.

    Returns:
        TopocentricSun; incidence is None unless surface is given.
    """
    h = observer_hour_angle(nu, longitude, alpha)
    xi = sun_equatorial_horizontal_parallax(r)
    del_alpha, delta_prime = right_ascension_parallax_and_topocentric_dec(
        latitude, elevation, xi, h, delta,
    )
    alpha_prime = topocentric_right_ascension(alpha, del_alpha)
    h_prime = topocentric_local_hour_angle(h, del_alpha)

    e0 = topocentric_elevation_angle(latitude, delta_prime, h_prime)
    del_e = atmospheric_refraction_correction(pressure, temperature, atmos_refract, e0)
    e = topocentric_elevation_angle_corrected(e0, del_e)

    zenith = topocentric_zenith_angle(e)
    azimuth_astro = topocentric_azimuth_angle_astro(h_prime, latitude, delta_prime)
    azimuth = topocentric_azimuth_angle(azimuth_astro)

    incidence = None
    if surface is not None:
        slope, azm_rotation = surface
        incidence = surface_incidence_angle(zenith, azimuth_astro, azm_rotation, slope)

    return TopocentricSun(
        h=h, xi=xi, del_alpha=del_alpha, delta_prime=delta_prime,
        alpha_prime=alpha_prime, h_prime=h_prime,
        e0=e0, del_e=del_e, e=e,
        zenith=zenith, azimuth_astro=azimuth_astro, azimuth=azimuth,
        incidence=incidence,
    )
