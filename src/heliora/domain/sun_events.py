# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Equation of time and local sunrise, sun transit and sunset.

Rise/transit/set follow the NREL SPA procedure (Meeus Ch. 15): the Sun's
geocentric right ascension and declination are sampled at 0h UT on the
previous, current and next day, the approximate transit and rise/set day
fractions are refined by quadratic interpolation of those samples, and
the result is converted to the observer's local time.

When the Sun never crosses the refracted horizon that day (polar day or
night) no event exists; every event field then carries NO_EVENT.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from heliora.domain.angles import (
    dayfrac_to_local_hr,
    limit_degrees,
    limit_degrees180,
    limit_degrees180pm,
    limit_minutes,
    limit_zero2one,
)
from heliora.domain.geocentric import geocentric_sun
from heliora.domain.julian_day import julian_day
from heliora.domain.topocentric import SUN_RADIUS_DEG

logger = logging.getLogger(__name__)

NO_EVENT: float = -99999.0
"""Value of every event field when the Sun does not rise or set."""

_SIDEREAL_DEG_PER_DAY: float = 360.985647

# Indices into the three-day samples and the three events.
_JD_MINUS, _JD_ZERO, _JD_PLUS = 0, 1, 2
_SUN_TRANSIT, _SUN_RISE, _SUN_SET = 0, 1, 2


@dataclass(frozen=True)
class SunEvents:
    """Local event times (fractional hours) and their hour angles (degrees)."""
    suntransit: float
    sunrise: float
    sunset: float
    srha: float  # sunrise hour angle
    ssha: float  # sunset hour angle
    sta: float   # sun transit altitude

    @staticmethod
    def none() -> "SunEvents":
        """Events for a day without sunrise or sunset."""
        return SunEvents(
            suntransit=NO_EVENT, sunrise=NO_EVENT, sunset=NO_EVENT,
            srha=NO_EVENT, ssha=NO_EVENT, sta=NO_EVENT,
        )

    @property
    def has_events(self) -> bool:
        return self.sunrise != NO_EVENT


# --------------------------------------------------------------------------- #
# Equation of time
# --------------------------------------------------------------------------- #

def sun_mean_longitude(jme: float) -> float:
    """Sun's mean longitude M in degrees, [0, 360)."""
    return limit_degrees(280.4664567 + jme * (360007.6982779 + jme * (0.03032028 + jme * (
        1 / 49931.0 + jme * (-1 / 15300.0 + jme * (-1 / 2000000.0))))))


def equation_of_time(m: float, alpha: float, del_psi: float, epsilon: float) -> float:
    """Equation of time in minutes, wrapped into [-20, 20]."""
    return limit_minutes(
        4.0 * (m - 0.0057183 - alpha + del_psi * math.cos(math.radians(epsilon)))
    )


# --------------------------------------------------------------------------- #
# Rise / transit / set building blocks
# --------------------------------------------------------------------------- #

def approx_sun_transit_time(alpha_zero: float, longitude: float, nu: float) -> float:
    """Approximate transit as a (possibly unreduced) UT day fraction."""
    return (alpha_zero - longitude - nu) / 360.0


def sun_hour_angle_at_rise_set(
    latitude: float,
    delta_zero: float,
    h0_prime: float,
) -> Optional[float]:
    """
    Local hour angle H0 of sunrise/sunset in degrees, [0, 180).

    Returns None when |cos H0| > 1: the Sun stays above or below the
    horizon all day.
    """
    latitude_rad = math.radians(latitude)
    delta_zero_rad = math.radians(delta_zero)
    argument = ((math.sin(math.radians(h0_prime))
                 - math.sin(latitude_rad) * math.sin(delta_zero_rad))
                / (math.cos(latitude_rad) * math.cos(delta_zero_rad)))

    if abs(argument) > 1:
        return None
    return limit_degrees180(math.degrees(math.acos(argument)))


def approx_sun_rise_and_set(m_transit: float, h0: float) -> tuple[float, float, float]:
    """(transit, rise, set) approximate day fractions, each in [0, 1)."""
    h0_dfrac = h0 / 360.0
    return (
        limit_zero2one(m_transit),
        limit_zero2one(m_transit - h0_dfrac),
        limit_zero2one(m_transit + h0_dfrac),
    )


def rts_alpha_delta_prime(ad: tuple[float, float, float], n: float) -> float:
    """Quadratic interpolation across the three daily samples.

    Differences of 2 or more (a right ascension wrapping through 360°) are
    reduced to their fractional part first.
    """
    a = ad[_JD_ZERO] - ad[_JD_MINUS]
    b = ad[_JD_PLUS] - ad[_JD_ZERO]

    if abs(a) >= 2.0:
        a = limit_zero2one(a)
    if abs(b) >= 2.0:
        b = limit_zero2one(b)

    return ad[_JD_ZERO] + n * (a + b + (b - a) * n) / 2.0


def rts_sun_altitude(latitude: float, delta_prime: float, h_prime: float) -> float:
    """Sun altitude in degrees at a given declination and hour angle."""
    latitude_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)

    return math.degrees(math.asin(
        math.sin(latitude_rad) * math.sin(delta_prime_rad)
        + math.cos(latitude_rad) * math.cos(delta_prime_rad)
        * math.cos(math.radians(h_prime))
    ))


def sun_rise_and_set(
    m_rts: tuple[float, float, float],
    h_rts: list[float],
    delta_prime: list[float],
    latitude: float,
    h_prime: list[float],
    h0_prime: float,
    sun: int,
) -> float:
    """Refined rise or set day fraction for event index `sun`."""
    return m_rts[sun] + (h_rts[sun] - h0_prime) / (
        360.0 * math.cos(math.radians(delta_prime[sun]))
        * math.cos(math.radians(latitude))
        * math.sin(math.radians(h_prime[sun]))
    )


# --------------------------------------------------------------------------- #
# Solver
# --------------------------------------------------------------------------- #

def sun_rise_transit_set(
    year: float,
    month: float,
    day: float,
    delta_t: float,
    timezone: float,
    longitude: float,
    latitude: float,
    atmos_refract: float,
) -> SunEvents:
    """
    Local sun transit, sunrise and sunset for a calendar day.

    Args:
        year, month, day: Calendar date (the day being solved).
        delta_t: TT - UT1 in seconds.
        timezone: Hours east of Greenwich for the local result.
        longitude, latitude: Observer position in degrees.
        atmos_refract: Refraction at the horizon in degrees.

    Returns:
        SunEvents in local fractional hours; SunEvents.none() for a polar
        day or night.
    """
    h0_prime = -(SUN_RADIUS_DEG + atmos_refract)

    jd_zero = julian_day(year, month, day, 0, 0, 0, 0.0, 0.0)
    nu = geocentric_sun(jd_zero, delta_t).nu

    samples = [geocentric_sun(jd_zero + offset, 0.0) for offset in (-1.0, 0.0, 1.0)]
    alpha = (samples[0].alpha, samples[1].alpha, samples[2].alpha)
    delta = (samples[0].delta, samples[1].delta, samples[2].delta)

    m_transit = approx_sun_transit_time(alpha[_JD_ZERO], longitude, nu)
    h0 = sun_hour_angle_at_rise_set(latitude, delta[_JD_ZERO], h0_prime)

    if h0 is None:
        logger.debug(
            "No sunrise/sunset on %s-%s-%s at latitude %.4f",
            year, month, day, latitude,
        )
        return SunEvents.none()

    m_rts = approx_sun_rise_and_set(m_transit, h0)

    delta_prime: list[float] = []
    h_prime: list[float] = []
    h_rts: list[float] = []
    for i in (_SUN_TRANSIT, _SUN_RISE, _SUN_SET):
        nu_rts = nu + _SIDEREAL_DEG_PER_DAY * m_rts[i]
        n = m_rts[i] + delta_t / 86400.0
        alpha_prime = rts_alpha_delta_prime(alpha, n)
        delta_prime.append(rts_alpha_delta_prime(delta, n))
        h_prime.append(limit_degrees180pm(nu_rts + longitude - alpha_prime))
        h_rts.append(rts_sun_altitude(latitude, delta_prime[i], h_prime[i]))

    return SunEvents(
        suntransit=dayfrac_to_local_hr(m_rts[_SUN_TRANSIT] - h_prime[_SUN_TRANSIT] / 360.0,
                                       timezone),
        sunrise=dayfrac_to_local_hr(
            sun_rise_and_set(m_rts, h_rts, delta_prime, latitude, h_prime, h0_prime, _SUN_RISE),
            timezone,
        ),
        sunset=dayfrac_to_local_hr(
            sun_rise_and_set(m_rts, h_rts, delta_prime, latitude, h_prime, h0_prime, _SUN_SET),
            timezone,
        ),
        srha=h_prime[_SUN_RISE],
        ssha=h_prime[_SUN_SET],
        sta=h_rts[_SUN_TRANSIT],
    )
