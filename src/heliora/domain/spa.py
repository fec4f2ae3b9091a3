# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
NREL Solar Position Algorithm pipeline.

calculate() validates the inputs of a SpaContext and then runs, in order:
Julian Day → Earth heliocentric position → nutation/obliquity →
geocentric Sun → topocentric Sun → (optionally) incidence angle and
equation of time with sunrise/transit/set. Each stage is a pure function
in its own module; this module only moves values between the record and
those functions.

Accuracy: ±0.0003° in zenith/azimuth for years -2000..6000 (Reda &
Andreas 2008); sunrise/sunset to about ±30 s.

References:
    Reda, I., Andreas, A. (2008). Solar Position Algorithm for Solar
    Radiation Applications. NREL/TP-560-34302, Revised January 2008.
"""
import logging

from heliora.domain.context import CalculateWhat, SpaContext
from heliora.domain.geocentric import GeocentricSun, geocentric_sun
from heliora.domain.julian_day import julian_day
from heliora.domain.sun_events import (
    SunEvents,
    equation_of_time,
    sun_mean_longitude,
    sun_rise_transit_set,
)
from heliora.domain.topocentric import TopocentricSun, topocentric_sun
from heliora.domain.validation import (
    SpaErrorCode,
    SpaInputError,
    describe_error,
    validate_inputs,
)

logger = logging.getLogger(__name__)

_WITH_INCIDENCE = (CalculateWhat.ZENITH_AZIMUTH_INCIDENCE, CalculateWhat.ALL)
_WITH_SUN_EVENTS = (CalculateWhat.ZENITH_AZIMUTH_SUN, CalculateWhat.ALL)


def _store_geocentric(ctx: SpaContext, geo: GeocentricSun) -> None:
    ctx.jd, ctx.jc = geo.jd, geo.jc
    ctx.jde, ctx.jce, ctx.jme = geo.jde, geo.jce, geo.jme
    ctx.l, ctx.b, ctx.r = geo.l, geo.b, geo.r
    ctx.theta, ctx.beta = geo.theta, geo.beta
    ctx.x0, ctx.x1, ctx.x2, ctx.x3, ctx.x4 = geo.x
    ctx.del_psi, ctx.del_epsilon = geo.del_psi, geo.del_epsilon
    ctx.epsilon0, ctx.epsilon = geo.epsilon0, geo.epsilon
    ctx.del_tau, ctx.lamda = geo.del_tau, geo.lamda
    ctx.nu0, ctx.nu = geo.nu0, geo.nu
    ctx.alpha, ctx.delta = geo.alpha, geo.delta


def _store_topocentric(ctx: SpaContext, topo: TopocentricSun) -> None:
    ctx.h, ctx.xi = topo.h, topo.xi
    ctx.del_alpha, ctx.delta_prime = topo.del_alpha, topo.delta_prime
    ctx.alpha_prime, ctx.h_prime = topo.alpha_prime, topo.h_prime
    ctx.e0, ctx.del_e, ctx.e = topo.e0, topo.del_e, topo.e
    ctx.zenith = topo.zenith
    ctx.azimuth_astro = topo.azimuth_astro
    ctx.azimuth = topo.azimuth
    if topo.incidence is not None:
        ctx.incidence = topo.incidence


def _store_sun_events(ctx: SpaContext, events: SunEvents) -> None:
    ctx.srha, ctx.ssha, ctx.sta = events.srha, events.ssha, events.sta
    ctx.suntransit = events.suntransit
    ctx.sunrise = events.sunrise
    ctx.sunset = events.sunset


def calculate(ctx: SpaContext) -> SpaErrorCode:
    """
    Run the Solar Position Algorithm on a populated record.

    Intermediate and output fields are first reset to NaN, so fields the
    selected function does not produce (and every field after a failed
    validation) never hold values from an earlier call.

    Args:
        ctx: Record with all input fields set. Mutated in place.

    Returns:
        SpaErrorCode.OK, or the first validation failure.
    """
    ctx.clear_results()

    result = validate_inputs(ctx)
    if result != SpaErrorCode.OK:
        logger.debug("SPA inputs rejected (%d): %s", result, describe_error(result))
        return result

    function = CalculateWhat(ctx.function)

    jd = julian_day(ctx.year, ctx.month, ctx.day, ctx.hour, ctx.minute,
                    ctx.second, ctx.delta_ut1, ctx.timezone)
    geo = geocentric_sun(jd, ctx.delta_t)
    _store_geocentric(ctx, geo)

    surface = (ctx.slope, ctx.azm_rotation) if function in _WITH_INCIDENCE else None
    topo = topocentric_sun(
        geo.nu, geo.alpha, geo.delta, geo.r,
        ctx.latitude, ctx.longitude, ctx.elevation,
        ctx.pressure, ctx.temperature, ctx.atmos_refract,
        surface=surface,
    )
    _store_topocentric(ctx, topo)

    if function in _WITH_SUN_EVENTS:
        ctx.eot = equation_of_time(sun_mean_longitude(geo.jme), geo.alpha,
                                   geo.del_psi, geo.epsilon)
        events = sun_rise_transit_set(
            ctx.year, ctx.month, ctx.day, ctx.delta_t, ctx.timezone,
            ctx.longitude, ctx.latitude, ctx.atmos_refract,
        )
        _store_sun_events(ctx, events)

    return SpaErrorCode.OK


def calculate_or_raise(ctx: SpaContext) -> SpaContext:
    """calculate(), raising SpaInputError instead of returning a code."""
    result = calculate(ctx)
    if result != SpaErrorCode.OK:
        raise SpaInputError(result)
    return ctx


def reference_context() -> SpaContext:
    """Inputs of the NREL reference example (Golden, CO, 2003-10-17)."""
    return SpaContext(
        year=2003, month=10, day=17,
        hour=12, minute=30, second=30,
        timezone=-7.0,
        delta_ut1=0.0, delta_t=67.0,
        longitude=-105.1786, latitude=39.742476, elevation=1830.14,
        pressure=820.0, temperature=11.0,
        slope=30.0, azm_rotation=-10.0,
        atmos_refract=0.5667,
        function=CalculateWhat.ALL,
    )
