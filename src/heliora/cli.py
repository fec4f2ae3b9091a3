# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solar position and season estimation.

Usage:
    # NREL reference example (Golden, CO, 2003-10-17 12:30:30 -07:00)
    heliora position

    # Any observer and instant; unspecified inputs keep the reference values
    heliora position --year 2024 --month 6 --day 21 --hour 12 \\
        --timezone 2 --latitude 52.37 --longitude 4.90 --elevation 0

    # Machine-readable output, zenith/azimuth only
    heliora position --function zenith-azimuth --json

    # Equinoxes and solstices of a year (UTC)
    heliora season --year 2024
    heliora season --year 2024 --season june-solstice
"""
import argparse
import logging
import sys

from heliora.domain.context import INPUT_FIELDS, CalculateWhat, SpaContext
from heliora.domain.spa import calculate_or_raise, reference_context
from heliora.domain.season import Season, all_seasons_utc, season_instant
from heliora.domain.validation import SpaInputError
from heliora.adapters.text_report import (
    JsonPositionReport,
    TextPositionReport,
    TextSeasonReport,
)

_FIELD_HELP = {
    "year": "Year, -2000..6000",
    "month": "Month, 1..12",
    "day": "Day of month, 1..31",
    "hour": "Local hour, 0..24",
    "minute": "Minute, 0..59",
    "second": "Second, 0..<60",
    "delta_ut1": "UT1-UTC in seconds, -1..1",
    "delta_t": "TT-UT1 in seconds, |x| <= 8000",
    "timezone": "Hours from UTC, negative west",
    "longitude": "Observer longitude in degrees, negative west",
    "latitude": "Observer latitude in degrees, negative south",
    "elevation": "Observer elevation in meters",
    "pressure": "Annual average local pressure in millibars",
    "temperature": "Annual average local temperature in °C",
    "slope": "Surface slope from horizontal in degrees",
    "azm_rotation": "Surface azimuth rotation from south in degrees, negative east",
    "atmos_refract": "Atmospheric refraction at sunrise/sunset in degrees",
}


def _option_name(value: str) -> str:
    return value.lower().replace("_", "-")


def _parse_function(text: str) -> CalculateWhat:
    for member in CalculateWhat:
        if _option_name(member.name) == text.lower():
            return member
    raise argparse.ArgumentTypeError(
        f"invalid function '{text}' (choose from "
        + ", ".join(_option_name(m.name) for m in CalculateWhat) + ")"
    )


def _parse_season(text: str) -> Season:
    for member in Season:
        if _option_name(member.name) == text.lower():
            return member
    raise argparse.ArgumentTypeError(
        f"invalid season '{text}' (choose from "
        + ", ".join(_option_name(m.name) for m in Season) + ")"
    )


def build_context(args: argparse.Namespace) -> SpaContext:
    """Reference inputs overridden by every option given on the command line."""
    ctx = reference_context()
    for name in INPUT_FIELDS:
        value = getattr(args, name, None)
        if value is not None:
            setattr(ctx, name, value)
    return ctx


def run_position(args: argparse.Namespace) -> str:
    """Calculate and render one position report; raises SpaInputError."""
    ctx = calculate_or_raise(build_context(args))
    report = JsonPositionReport() if args.json else TextPositionReport()
    return report.render(ctx)


def run_season(args: argparse.Namespace) -> str:
    if args.season is not None:
        events = [(args.season, season_instant(args.season, args.year))]
    else:
        events = all_seasons_utc(args.year)
    return TextSeasonReport().render_seasons(events)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heliora",
        description="Solar position (NREL SPA) and equinox/solstice estimation",
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest='command', required=True)

    position = sub.add_parser(
        'position', help="Solar zenith, azimuth, incidence and sunrise/sunset",
    )
    for name, help_text in _FIELD_HELP.items():
        position.add_argument(
            f"--{_option_name(name)}", dest=name, type=float, default=None,
            help=f"{help_text} (default: NREL reference value)",
        )
    position.add_argument(
        '--function', type=_parse_function, default=None,
        help="Outputs to compute: zenith-azimuth, zenith-azimuth-incidence, "
             "zenith-azimuth-sun or all (default: all)",
    )
    position.add_argument(
        '--json', action='store_true', default=False,
        help="Print a JSON document instead of the text report",
    )

    season = sub.add_parser('season', help="UTC instants of equinoxes and solstices")
    season.add_argument('--year', type=int, required=True, help="Year")
    season.add_argument(
        '--season', type=_parse_season, default=None,
        help="march-equinox, june-solstice, september-equinox or "
             "december-solstice (default: all four)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'position':
            print(run_position(args))
        else:
            print(run_season(args))
    except SpaInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
