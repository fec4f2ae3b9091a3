# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Input validation for the Solar Position Algorithm.

Checks run in a fixed order and the first violated range wins. Range
checks are written so that NaN fails them.
"""
from enum import IntEnum

from heliora.domain.context import CalculateWhat, SpaContext


class SpaErrorCode(IntEnum):
    """Result of validate_inputs(); OK (0) or the violated input."""
    OK = 0
    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    DELTA_T = 7
    TIMEZONE = 8
    LONGITUDE = 9
    LATITUDE = 10
    ELEVATION = 11
    PRESSURE = 12
    TEMPERATURE = 13
    SLOPE = 14
    AZM_ROTATION = 15
    ATMOS_REFRACT = 16
    DELTA_UT1 = 17
    FUNCTION = 18


_ERROR_MESSAGES: dict[SpaErrorCode, str] = {
    SpaErrorCode.OK: "inputs valid",
    SpaErrorCode.YEAR: "year must be within -2000..6000",
    SpaErrorCode.MONTH: "month must be within 1..12",
    SpaErrorCode.DAY: "day must be within 1..31",
    SpaErrorCode.HOUR: "hour must be within 0..24",
    SpaErrorCode.MINUTE: "minute must be within 0..59 (0 when hour is 24)",
    SpaErrorCode.SECOND: "second must be within 0..<60 (0 when hour is 24)",
    SpaErrorCode.DELTA_T: "delta_t must be within -8000..8000 seconds",
    SpaErrorCode.TIMEZONE: "timezone must be within -18..18 hours",
    SpaErrorCode.LONGITUDE: "longitude must be within -180..180 degrees",
    SpaErrorCode.LATITUDE: "latitude must be within -90..90 degrees",
    SpaErrorCode.ELEVATION: "elevation must be at least -6500000 meters",
    SpaErrorCode.PRESSURE: "pressure must be within 0..5000 millibars",
    SpaErrorCode.TEMPERATURE: "temperature must be within -273 (exclusive)..6000 °C",
    SpaErrorCode.SLOPE: "slope must be within -360..360 degrees",
    SpaErrorCode.AZM_ROTATION: "azm_rotation must be within -360..360 degrees",
    SpaErrorCode.ATMOS_REFRACT: "atmos_refract must be within -5..5 degrees",
    SpaErrorCode.DELTA_UT1: "delta_ut1 must be within -1..1 seconds (exclusive)",
    SpaErrorCode.FUNCTION: "function must be one of " + ", ".join(
        member.name for member in CalculateWhat),
}


class SpaInputError(ValueError):
    """Raised by callers that prefer exceptions over error codes."""

    def __init__(self, code: SpaErrorCode):
        self.code = SpaErrorCode(code)
        super().__init__(f"SPA error code {int(self.code)}: {describe_error(self.code)}")


def describe_error(code: int) -> str:
    """Human-readable message for an error code."""
    return _ERROR_MESSAGES[SpaErrorCode(code)]


def _valid_function(function: object) -> bool:
    return function in tuple(CalculateWhat)


def validate_inputs(ctx: SpaContext) -> SpaErrorCode:
    """
    Check every input field of the record.

    Slope and azimuth rotation are only checked when the selected function
    computes the incidence angle.

    Returns:
        SpaErrorCode.OK, or the code of the first violated check.
    """
    if not -2000 <= ctx.year <= 6000:
        return SpaErrorCode.YEAR
    if not 1 <= ctx.month <= 12:
        return SpaErrorCode.MONTH
    if not 1 <= ctx.day <= 31:
        return SpaErrorCode.DAY
    if not 0 <= ctx.hour <= 24:
        return SpaErrorCode.HOUR
    if not 0 <= ctx.minute <= 59:
        return SpaErrorCode.MINUTE
    if not 0 <= ctx.second < 60:
        return SpaErrorCode.SECOND
    if not 0 <= ctx.pressure <= 5000:
        return SpaErrorCode.PRESSURE
    if not -273 < ctx.temperature <= 6000:
        return SpaErrorCode.TEMPERATURE
    if not -1 < ctx.delta_ut1 < 1:
        return SpaErrorCode.DELTA_UT1
    if ctx.hour == 24 and ctx.minute > 0:
        return SpaErrorCode.MINUTE
    if ctx.hour == 24 and ctx.second > 0:
        return SpaErrorCode.SECOND

    if not abs(ctx.delta_t) <= 8000:
        return SpaErrorCode.DELTA_T
    if not abs(ctx.timezone) <= 18:
        return SpaErrorCode.TIMEZONE
    if not abs(ctx.longitude) <= 180:
        return SpaErrorCode.LONGITUDE
    if not abs(ctx.latitude) <= 90:
        return SpaErrorCode.LATITUDE
    if not abs(ctx.atmos_refract) <= 5:
        return SpaErrorCode.ATMOS_REFRACT
    if not ctx.elevation >= -6500000:
        return SpaErrorCode.ELEVATION

    if ctx.function in (CalculateWhat.ZENITH_AZIMUTH_INCIDENCE, CalculateWhat.ALL):
        if not abs(ctx.slope) <= 360:
            return SpaErrorCode.SLOPE
        if not abs(ctx.azm_rotation) <= 360:
            return SpaErrorCode.AZM_ROTATION

    if not _valid_function(ctx.function):
        return SpaErrorCode.FUNCTION

    return SpaErrorCode.OK


def check_inputs(ctx: SpaContext) -> None:
    """validate_inputs(), raising SpaInputError on the first violation."""
    result = validate_inputs(ctx)
    if result != SpaErrorCode.OK:
        raise SpaInputError(result)
