"""
Heliora

NREL Solar Position Algorithm (SPA) and Meeus equinox/solstice estimation.
Computes solar zenith, azimuth and surface incidence angles for an observer
on the Earth's surface, the equation of time, local sunrise, sun transit
and sunset, and the UTC instants of the four seasons of a year.
"""

from heliora.domain.angles import (
    limit_degrees,
    limit_degrees180pm,
    limit_minutes,
)
from heliora.domain.julian_day import (
    J2000_JD,
    GREGORIAN_CUTOVER_JD,
    CalendarInstant,
    julian_day,
    calendar_from_julian_day,
)
from heliora.domain.earth_position import (
    HeliocentricPosition,
    heliocentric_position,
)
from heliora.domain.nutation import (
    Nutation,
    nutation_at,
)
from heliora.domain.geocentric import (
    GeocentricSun,
    geocentric_sun,
)
from heliora.domain.topocentric import (
    SUN_RADIUS_DEG,
    TopocentricSun,
    topocentric_sun,
)
from heliora.domain.sun_events import (
    NO_EVENT,
    SunEvents,
    sun_rise_transit_set,
)
from heliora.domain.context import (
    CalculateWhat,
    SpaContext,
    SpaOutputs,
)
from heliora.domain.validation import (
    SpaErrorCode,
    SpaInputError,
    describe_error,
    validate_inputs,
    check_inputs,
)
from heliora.domain.spa import (
    calculate,
    calculate_or_raise,
    reference_context,
)
from heliora.domain.season import (
    Season,
    season_name,
    season_jde,
    get_season_utc,
    all_seasons_utc,
)

__all__ = [
    "limit_degrees",
    "limit_degrees180pm",
    "limit_minutes",
    "J2000_JD",
    "GREGORIAN_CUTOVER_JD",
    "CalendarInstant",
    "julian_day",
    "calendar_from_julian_day",
    "HeliocentricPosition",
    "heliocentric_position",
    "Nutation",
    "nutation_at",
    "GeocentricSun",
    "geocentric_sun",
    "SUN_RADIUS_DEG",
    "TopocentricSun",
    "topocentric_sun",
    "NO_EVENT",
    "SunEvents",
    "sun_rise_transit_set",
    "CalculateWhat",
    "SpaContext",
    "SpaOutputs",
    "SpaErrorCode",
    "SpaInputError",
    "describe_error",
    "validate_inputs",
    "check_inputs",
    "calculate",
    "calculate_or_raise",
    "reference_context",
    "Season",
    "season_name",
    "season_jde",
    "get_season_utc",
    "all_seasons_utc",
]
