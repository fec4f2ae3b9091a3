# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
The SPA calculation record.

SpaContext is the single mutable record that a caller populates with
inputs, the pipeline fills with intermediate and final values, and the
caller reads once. It is not safe to share between concurrent
calculations; use one record per calculation.

"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum


class CalculateWhat(IntEnum):
    """Selects which outputs the pipeline produces."""
    ZENITH_AZIMUTH = 0
    ZENITH_AZIMUTH_INCIDENCE = 1
    ZENITH_AZIMUTH_SUN = 2
    ALL = 3


INPUT_FIELDS: tuple[str, ...] = (
    "year", "month", "day", "hour", "minute", "second",
    "delta_ut1", "delta_t", "timezone",
    "longitude", "latitude", "elevation",
    "pressure", "temperature",
    "slope", "azm_rotation", "atmos_refract",
    "function",
)

INTERMEDIATE_FIELDS: tuple[str, ...] = (
    "jd", "jc", "jde", "jce", "jme",
    "l", "b", "r", "theta", "beta",
    "x0", "x1", "x2", "x3", "x4",
    "del_psi", "del_epsilon", "epsilon0", "epsilon",
    "del_tau", "lamda", "nu0", "nu",
    "alpha", "delta",
    "h", "xi", "del_alpha", "delta_prime", "alpha_prime", "h_prime",
    "e0", "del_e", "e",
    "eot", "srha", "ssha", "sta",
)

OUTPUT_FIELDS: tuple[str, ...] = (
    "zenith", "azimuth_astro", "azimuth", "incidence",
    "suntransit", "sunrise", "sunset",
)


@dataclass(frozen=True)
class SpaOutputs:
    """Read-only snapshot of the output band plus the observer position."""
    zenith: float
    azimuth_astro: float
    azimuth: float
    incidence: float
    suntransit: float
    sunrise: float
    sunset: float
    eot: float
    latitude: float
    longitude: float

    @property
    def elevation_angle(self) -> float:
        """Refracted solar elevation above the horizon in degrees."""
        return 90.0 - self.zenith


@dataclass
class SpaContext:
    """Inputs, intermediates and outputs of one Solar Position Algorithm pass.

    Input ranges (checked by validate_inputs, error code in brackets):
        year -2000..6000 [1], month 1..12 [2], day 1..31 [3],
        hour 0..24 [4], minute 0..59 [5], second 0..<60 [6],
        delta_t |x| <= 8000 s [7], timezone |x| <= 18 h [8],
        longitude |x| <= 180 [9], latitude |x| <= 90 [10],
        elevation >= -6500000 m [11], pressure 0..5000 mbar [12],
        temperature >-273..6000 °C [13], slope |x| <= 360 [14],
        azm_rotation |x| <= 360 [15], atmos_refract |x| <= 5 [16],
        delta_ut1 -1..1 s exclusive [17], function [18].
    """

    # -- Inputs ------------------------------------------------------------- #
    year: float = 0
    month: float = 1
    day: float = 1
    hour: float = 0
    minute: float = 0
    second: float = 0
    delta_ut1: float = 0.0      # UT1-UTC, seconds
    delta_t: float = 0.0        # TT-UT1, seconds
    timezone: float = 0.0       # hours, negative west of Greenwich
    longitude: float = 0.0      # degrees, negative west of Greenwich
    latitude: float = 0.0       # degrees, negative south of equator
    elevation: float = 0.0      # meters
    pressure: float = 0.0       # millibars
    temperature: float = 0.0    # °C
    slope: float = 0.0          # surface tilt from horizontal, degrees
    azm_rotation: float = 0.0   # surface azimuth from south, negative east
    atmos_refract: float = 0.0  # refraction at sunrise/sunset, degrees
    function: int = CalculateWhat.ALL

    # -- Intermediate values ----------------------------------------------- #
    jd: float = 0.0
    jc: float = 0.0
    jde: float = 0.0
    jce: float = 0.0
    jme: float = 0.0
    l: float = 0.0
    b: float = 0.0
    r: float = 0.0
    theta: float = 0.0
    beta: float = 0.0
    x0: float = 0.0
    x1: float = 0.0
    x2: float = 0.0
    x3: float = 0.0
    x4: float = 0.0
    del_psi: float = 0.0
    del_epsilon: float = 0.0
    epsilon0: float = 0.0  # arcseconds
    epsilon: float = 0.0
    del_tau: float = 0.0
    lamda: float = 0.0
    nu0: float = 0.0
    nu: float = 0.0
    alpha: float = 0.0
    delta: float = 0.0
    h: float = 0.0
    xi: float = 0.0
    del_alpha: float = 0.0
    delta_prime: float = 0.0
    alpha_prime: float = 0.0
    h_prime: float = 0.0
    e0: float = 0.0
    del_e: float = 0.0
    e: float = 0.0
    eot: float = 0.0  # minutes
    srha: float = 0.0
    ssha: float = 0.0
    sta: float = 0.0

    # -- Final outputs ------------------------------------------------------ #
    zenith: float = 0.0
    azimuth_astro: float = 0.0  # westward from south
    azimuth: float = 0.0        # eastward from north
    incidence: float = 0.0
    suntransit: float = 0.0     # local fractional hour
    sunrise: float = 0.0
    sunset: float = 0.0

    def set_local_time(self, dt: datetime) -> None:
        """Fill the calendar fields and timezone from a datetime.

        Naive datetimes are treated as UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)

        self.year = dt.year
        self.month = dt.month
        self.day = dt.day
        self.hour = dt.hour
        self.minute = dt.minute
        self.second = dt.second + dt.microsecond / 1_000_000.0
        self.timezone = dt.utcoffset().total_seconds() / 3600.0

    def clear_results(self) -> None:
        """Mark every intermediate and output field as not computed (NaN)."""
        for name in INTERMEDIATE_FIELDS + OUTPUT_FIELDS:
            setattr(self, name, math.nan)

    def outputs(self) -> SpaOutputs:
        return SpaOutputs(
            zenith=self.zenith,
            azimuth_astro=self.azimuth_astro,
            azimuth=self.azimuth,
            incidence=self.incidence,
            suntransit=self.suntransit,
            sunrise=self.sunrise,
            sunset=self.sunset,
            eot=self.eot,
            latitude=self.latitude,
            longitude=self.longitude,
        )
