# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle and day-fraction normalisation.

Each pipeline stage normalises its angles into a canonical range right
after computing them; downstream formulas rely on those ranges.
"""
import math


def limit_degrees(degrees: float) -> float:
    """Normalise an angle into [0, 360)."""
    degrees /= 360.0
    limited = 360.0 * (degrees - math.floor(degrees))
    return limited + 360.0 if limited < 0 else limited


def limit_degrees180pm(degrees: float) -> float:
    """Normalise an angle into [-180, 180]."""
    degrees /= 360.0
    limited = 360.0 * (degrees - math.floor(degrees))
    if limited < -180.0:
        limited += 360.0
    elif limited > 180.0:
        limited -= 360.0
    return limited


def limit_degrees180(degrees: float) -> float:
    """Normalise an angle into [0, 180)."""
    degrees /= 180.0
    limited = 180.0 * (degrees - math.floor(degrees))
    return limited + 180.0 if limited < 0 else limited


def limit_zero2one(value: float) -> float:
    """Keep only the fractional part, in [0, 1)."""
    limited = value - math.floor(value)
    return limited + 1.0 if limited < 0 else limited


def limit_minutes(minutes: float) -> float:
    """Wrap a time offset in minutes through ±1440 into roughly [-20, 20]."""
    limited = minutes
    if limited < -20.0:
        limited += 1440.0
    elif limited > 20.0:
        limited -= 1440.0
    return limited


def dayfrac_to_local_hr(dayfrac: float, timezone: float) -> float:
    """Convert a UT day fraction to a local fractional hour in [0, 24)."""
    return 24.0 * limit_zero2one(dayfrac + timezone / 24.0)


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    """Evaluate a*x³ + b*x² + c*x + d (Horner form)."""
    return ((a * x + b) * x + c) * x + d
