# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calendar ↔ Julian Day conversion.

Forward and inverse conversions use the standard algorithm (Meeus,
Astronomical Algorithms, Ch. 7) on the proleptic Julian calendar before
the Gregorian reform and the Gregorian calendar after it. The forward
conversion applies the Gregorian correction whenever the uncorrected
result exceeds JD 2299160.0; the inverse applies it for integer day
numbers from 2299161 onwards. The two are exact inverses on both sides
of the reform except for the afternoon of 1582-10-04 (Julian), which
the forward test already treats as Gregorian.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

J2000_JD: float = 2451545.0
"""Julian Day of J2000.0 (2000-01-01 12:00:00)."""

GREGORIAN_CUTOVER_JD: float = 2299160.0
"""Last Julian Day reckoned in the Julian calendar (1582-10-04/15 switch)."""

_DAYS_PER_JULIAN_CENTURY: float = 36525.0
_SECONDS_PER_DAY: float = 86400.0
_MICROSECONDS_PER_DAY: int = 86_400_000_000


@dataclass(frozen=True)
class CalendarInstant:
    """Calendar date and time of day recovered from a Julian Day.

    Years are astronomical (year 0 = 1 BC). Seconds keep their fraction.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """(year, month, day, hour, minute, whole seconds)."""
        return (self.year, self.month, self.day,
                self.hour, self.minute, int(self.second))

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime.

        Raises ValueError for years outside 1..9999, which datetime
        cannot represent.
        """
        whole = int(self.second)
        microsecond = int(round((self.second - whole) * 1_000_000.0))
        if microsecond >= 1_000_000:
            microsecond = 999_999
        return datetime(self.year, self.month, self.day, self.hour,
                        self.minute, whole, microsecond, tzinfo=timezone.utc)


def julian_day(
    year: float,
    month: float,
    day: float,
    hour: float,
    minute: float,
    second: float,
    delta_ut1: float,
    timezone: float,
) -> float:
    """Julian Day of a local calendar date and time.

    Args:
        year, month, day: Calendar date (month 1-12).
        hour, minute, second: Local time of day.
        delta_ut1: UT1-UTC in seconds, added to the clock time.
        timezone: Hours east of Greenwich; subtracted to reach UT.

    Returns:
        Julian Day (UT1).
    """
    day_decimal = day + (hour - timezone
                         + (minute + (second + delta_ut1) / 60.0) / 60.0) / 24.0

    if month < 3:
        month += 12
        year -= 1

    jd = (math.floor(365.25 * (year + 4716.0))
          + math.floor(30.6001 * (month + 1))
          + day_decimal - 1524.5)

    if jd > GREGORIAN_CUTOVER_JD:
        a = math.floor(year / 100)
        jd += 2 - a + math.floor(a / 4)

    return jd


def calendar_from_julian_day(jd: float) -> CalendarInstant:
    """Recover the calendar date and time of day from a Julian Day.

    Inverse of julian_day() with zero timezone and ΔUT1. The time of day
    is rounded to the microsecond; a rounding carry rolls into the next
    day so hour never reaches 24.
    """
    jd_plus = jd + 0.5
    z = math.floor(jd_plus)
    microseconds = int(round((jd_plus - z) * _MICROSECONDS_PER_DAY))
    if microseconds >= _MICROSECONDS_PER_DAY:
        z += 1
        microseconds -= _MICROSECONDS_PER_DAY

    if z < GREGORIAN_CUTOVER_JD + 1:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    hour, rest = divmod(microseconds, 3_600_000_000)
    minute, rest = divmod(rest, 60_000_000)
    second = rest / 1_000_000.0

    return CalendarInstant(
        year=int(year), month=int(month), day=int(day),
        hour=int(hour), minute=int(minute), second=second,
    )


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JD) / _DAYS_PER_JULIAN_CENTURY


def julian_ephemeris_day(jd: float, delta_t: float) -> float:
    """Julian Ephemeris Day: JD advanced by ΔT seconds."""
    return jd + delta_t / _SECONDS_PER_DAY


def julian_ephemeris_century(jde: float) -> float:
    return (jde - J2000_JD) / _DAYS_PER_JULIAN_CENTURY


def julian_ephemeris_millennium(jce: float) -> float:
    return jce / 10.0
