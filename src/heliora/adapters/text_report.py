# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Text and JSON renderers for SPA results and season listings.

The text layout mirrors the NREL reference tester: an inputs block, an
outputs block, and sunrise/sunset/transit as local HH:MM:SS. Event
times carrying the no-event sentinel print as "none"; values the
selected function did not compute print as "n/a".
"""
import json
import math
from typing import Any

from heliora.domain.context import INPUT_FIELDS, OUTPUT_FIELDS, SpaContext
from heliora.domain.julian_day import CalendarInstant
from heliora.domain.season import Season, season_name
from heliora.domain.sun_events import NO_EVENT
from heliora.ports import PositionReport, SeasonReport


def _pad2(value: float) -> str:
    return f"{int(math.floor(value)):02d}"


def format_triplet(a: float, b: float, c: float, sep: str = ":") -> str:
    """Zero-padded "AA:BB:CC" from three numbers, each floored."""
    return sep.join(_pad2(v) for v in (a, b, c))


def format_local_hour(hours: float) -> str:
    """Fractional local hour as HH:MM:SS, "none" or "n/a"."""
    if hours == NO_EVENT:
        return "none"
    if math.isnan(hours):
        return "n/a"
    minutes = 60.0 * (hours - math.floor(hours))
    seconds = 60.0 * (minutes - math.floor(minutes))
    return format_triplet(hours, minutes, seconds)


def _degrees(value: float) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.2f} degrees"


class TextPositionReport(PositionReport):
    """Plain-text report of one calculated record."""

    def lines(self, ctx: SpaContext) -> list[str]:
        date = format_triplet(ctx.year, ctx.month, ctx.day, "/")
        if ctx.year < 0:
            date = "-" + format_triplet(-ctx.year, ctx.month, ctx.day, "/")
        clock = format_triplet(ctx.hour, ctx.minute, ctx.second)

        return [
            "Inputs:",
            "",
            f"  {date} {clock} GMT {ctx.timezone:g}",
            "",
            f"  Latitude:      {ctx.latitude:.2f}",
            f"  Longitude:     {ctx.longitude:.2f}",
            f"  Elevation:     {ctx.elevation:.2f}",
            f"  Pressure:      {ctx.pressure:.2f}",
            f"  Temperature:   {ctx.temperature:.2f}",
            "",
            f"  DeltaUT1:      {ctx.delta_ut1:.2f}",
            f"  DeltaT:        {ctx.delta_t:.2f}",
            f"  Slope:         {ctx.slope:.2f}",
            f"  Azm rotation:  {ctx.azm_rotation:.2f}",
            f"  Atmos refract: {ctx.atmos_refract:.2f}",
            "",
            "Outputs:",
            "",
            f"  Zenith:        {_degrees(ctx.zenith)}",
            f"  Azimuth:       {_degrees(ctx.azimuth)}",
            f"  Incidence:     {_degrees(ctx.incidence)}",
            "",
            f"  Sunrise:       {format_local_hour(ctx.sunrise)} Local",
            f"  Sunset:        {format_local_hour(ctx.sunset)} Local",
            f"  Transit:       {format_local_hour(ctx.suntransit)} Local",
        ]

    def render(self, ctx: SpaContext) -> str:
        return "\n".join(self.lines(ctx))


def _json_number(value: Any) -> Any:
    # JSON has no NaN; uncomputed values become null
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class JsonPositionReport(PositionReport):
    """Machine-readable report: inputs, outputs and the equation of time.

    Uncomputed values are null; the no-event sentinel is kept as a number.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def to_dict(self, ctx: SpaContext) -> dict[str, Any]:
        inputs = {name: _json_number(getattr(ctx, name)) for name in INPUT_FIELDS}
        inputs["function"] = int(ctx.function)
        outputs = {name: _json_number(getattr(ctx, name)) for name in OUTPUT_FIELDS}
        outputs["eot"] = _json_number(ctx.eot)
        return {"inputs": inputs, "outputs": outputs}

    def render(self, ctx: SpaContext) -> str:
        return json.dumps(self.to_dict(ctx), indent=self.indent)


class TextSeasonReport(SeasonReport):
    """One line per event: name, UTC date and time."""

    def render_seasons(self, events: list[tuple[Season, CalendarInstant]]) -> str:
        width = max((len(season_name(s)) for s, _ in events), default=0)
        lines = []
        for season, instant in events:
            year, month, day, hour, minute, second = instant.as_tuple()
            lines.append(
                f"{season_name(season):<{width}}  "
                f"{year:04d}-{month:02d}-{day:02d} "
                f"{hour:02d}:{minute:02d}:{second:02d} UTC"
            )
        return "\n".join(lines)
