# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Equinox and solstice instants (Meeus, Astronomical Algorithms, Ch. 27).

The mean instant of each event is a quartic in the year; a sum of 24
periodic terms corrects it to within about a minute for years -1000..3000.
Outside that range accuracy degrades but no error is raised.

The corrected value is a Julian Ephemeris Day. It is converted to a
calendar date without a ΔT correction, so the UTC instant is late by ΔT
(about a minute in the present era).
"""
import math
from enum import Enum

import numpy as np

from heliora.domain.julian_day import (
    J2000_JD,
    CalendarInstant,
    calendar_from_julian_day,
)


class Season(Enum):
    """The four solar events, in calendar order."""
    MARCH_EQUINOX = 0
    JUNE_SOLSTICE = 1
    SEPTEMBER_EQUINOX = 2
    DECEMBER_SOLSTICE = 3


def season_name(season: Season) -> str:
    """Display name, e.g. "June Solstice"."""
    return Season(season).name.replace("_", " ").title()


# Meeus Table 27.A, years -1000..1000, Y = year / 1000.
_MEAN_JDE_BEFORE_1000: dict[Season, tuple[float, ...]] = {
    Season.MARCH_EQUINOX: (1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
    Season.JUNE_SOLSTICE: (1721233.25401, 365241.72562, -0.05323, 0.00907, 0.00025),
    Season.SEPTEMBER_EQUINOX: (1721325.70455, 365242.49558, -0.11677, -0.00297, 0.00074),
    Season.DECEMBER_SOLSTICE: (1721414.39987, 365242.88257, -0.00769, -0.00933, -0.00006),
}

# Meeus Table 27.B, years 1000..3000, Y = (year - 2000) / 1000.
_MEAN_JDE_AFTER_1000: dict[Season, tuple[float, ...]] = {
    Season.MARCH_EQUINOX: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    Season.JUNE_SOLSTICE: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    Season.SEPTEMBER_EQUINOX: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    Season.DECEMBER_SOLSTICE: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}

# Meeus Table 27.C: amplitude A, phase B (deg), frequency C (deg/century).
_PERIODIC_TERMS = np.array([
    [485, 324.96, 1934.136],
    [203, 337.23, 32964.467],
    [199, 342.08, 20.186],
    [182, 27.85, 445267.112],
    [156, 73.14, 45036.886],
    [136, 171.52, 22518.443],
    [77, 222.54, 65928.934],
    [74, 296.72, 3034.906],
    [70, 243.58, 9037.513],
    [58, 119.81, 33718.147],
    [52, 297.17, 150.678],
    [50, 21.02, 2281.226],
    [45, 247.54, 29929.562],
    [44, 325.15, 31555.956],
    [29, 60.93, 4443.417],
    [18, 155.12, 67555.328],
    [17, 288.79, 4562.452],
    [16, 198.04, 62894.029],
    [14, 199.76, 31436.921],
    [12, 95.39, 14577.848],
    [12, 287.11, 31931.756],
    [12, 320.81, 34777.259],
    [9, 227.73, 1222.114],
    [8, 15.45, 16859.074],
], dtype=np.float64)
_PERIODIC_TERMS.flags.writeable = False


def mean_jde(season: Season, year: int) -> float:
    """Mean JDE of the event; table A for year <= 1000, table B above."""
    season = Season(season)
    if year <= 1000:
        y = year / 1000.0
        coefficients = _MEAN_JDE_BEFORE_1000[season]
    else:
        y = (year - 2000) / 1000.0
        coefficients = _MEAN_JDE_AFTER_1000[season]

    # Horner, highest power first
    result = 0.0
    for c in reversed(coefficients):
        result = result * y + c
    return result


def season_periodic_terms(t: float) -> float:
    """Sum S of the 24 periodic terms at t Julian centuries from J2000."""
    amplitude = _PERIODIC_TERMS[:, 0]
    phase = np.radians(_PERIODIC_TERMS[:, 1] + _PERIODIC_TERMS[:, 2] * t)
    return float(np.sum(amplitude * np.cos(phase)))


def season_w_angle(t: float) -> float:
    """Angle W in degrees: 35999.373 T - 2.47 (Meeus 27, sign as printed)."""
    return 35999.373 * t - 2.47


def season_delta_lambda(t: float) -> float:
    """Δλ = 1 + 0.0334 cos W + 0.0007 cos 2W."""
    w = math.radians(season_w_angle(t))
    return 1.0 + 0.0334 * math.cos(w) + 0.0007 * math.cos(2.0 * w)


def season_jde(season: Season, year: int) -> float:
    """Corrected Julian Ephemeris Day of the event."""
    jde0 = mean_jde(season, year)
    t = (jde0 - J2000_JD) / 36525.0
    return jde0 + 0.00001 * season_periodic_terms(t) / season_delta_lambda(t)


def season_instant(season: Season, year: int) -> CalendarInstant:
    """Calendar instant of the event, keeping fractional seconds."""
    return calendar_from_julian_day(season_jde(season, year))


def get_season_utc(season: Season, year: int) -> tuple[int, int, int, int, int, int]:
    """(year, month, day, hour, minute, second) of the event in UTC."""
    return season_instant(season, year).as_tuple()


def all_seasons_utc(year: int) -> list[tuple[Season, CalendarInstant]]:
    """The four events of a year in calendar order."""
    return [(season, season_instant(season, year)) for season in Season]
