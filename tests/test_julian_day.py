# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for calendar ↔ Julian Day conversion (Meeus Ch. 7 anchors)."""
from datetime import datetime, timedelta, timezone

import pytest


# --------------------------------------------------------------------------- #
# Forward conversion
# --------------------------------------------------------------------------- #

class TestJulianDay:

    @pytest.mark.parametrize("date, expected", [
        ((2000, 1, 1, 12, 0, 0), 2451545.0),
        ((1957, 10, 4, 19, 26, 24), 2436116.31),
        ((1987, 6, 19, 12, 0, 0), 2446966.0),
        ((1988, 1, 27, 0, 0, 0), 2447187.5),
        ((333, 1, 27, 12, 0, 0), 1842713.0),
        ((-1000, 7, 12, 12, 0, 0), 1356001.0),
        ((1582, 10, 15, 0, 0, 0), 2299160.5),
        ((1582, 10, 4, 0, 0, 0), 2299159.5),
    ])
    def test_meeus_anchors(self, date, expected):
        """Meeus Ch. 7 dates on both sides of the Gregorian reform."""
        from heliora.domain.julian_day import julian_day
        assert julian_day(*date, 0.0, 0.0) == pytest.approx(expected, abs=1e-6)

    def test_nrel_reference_instant(self):
        """2003-10-17 12:30:30 at UTC-7 (NREL/TP-560-34302 Table A5.1)."""
        from heliora.domain.julian_day import julian_day
        jd = julian_day(2003, 10, 17, 12, 30, 30, 0.0, -7.0)
        assert jd == pytest.approx(2452930.312847, abs=1e-6)

    def test_timezone_shifts_to_ut(self):
        """Local 14:00 at UTC+2 is the same instant as 12:00 UTC."""
        from heliora.domain.julian_day import julian_day
        local = julian_day(2020, 3, 1, 14, 0, 0, 0.0, 2.0)
        utc = julian_day(2020, 3, 1, 12, 0, 0, 0.0, 0.0)
        assert local == pytest.approx(utc, abs=1e-9)

    def test_delta_ut1_adds_seconds(self):
        """ΔUT1 seconds are added to the clock time."""
        from heliora.domain.julian_day import julian_day
        base = julian_day(2020, 3, 1, 12, 0, 0, 0.0, 0.0)
        shifted = julian_day(2020, 3, 1, 12, 0, 0, 0.5, 0.0)
        assert (shifted - base) * 86400.0 == pytest.approx(0.5, abs=1e-4)


class TestTimeScales:

    def test_j2000_century_is_zero(self):
        """JC = 0 at J2000.0."""
        from heliora.domain.julian_day import J2000_JD, julian_century
        assert julian_century(J2000_JD) == 0.0

    def test_ephemeris_day_adds_delta_t(self):
        """JDE = JD + ΔT/86400."""
        from heliora.domain.julian_day import julian_ephemeris_day
        assert julian_ephemeris_day(2451545.0, 86400.0) == pytest.approx(2451546.0)

    def test_millennium_is_tenth_of_century(self):
        """JME = JCE / 10."""
        from heliora.domain.julian_day import julian_ephemeris_millennium
        assert julian_ephemeris_millennium(0.25) == pytest.approx(0.025)


# --------------------------------------------------------------------------- #
# Inverse conversion
# --------------------------------------------------------------------------- #

class TestCalendarFromJulianDay:

    def test_meeus_example_7c(self):
        """JD 2436116.31 → 1957 October 4.81."""
        from heliora.domain.julian_day import calendar_from_julian_day
        instant = calendar_from_julian_day(2436116.31)
        assert (instant.year, instant.month, instant.day) == (1957, 10, 4)
        hours = instant.hour + instant.minute / 60.0 + instant.second / 3600.0
        assert hours / 24.0 == pytest.approx(0.81, abs=1e-6)

    @pytest.mark.parametrize("jd, expected", [
        (1842713.0, (333, 1, 27, 12, 0, 0)),
        (1507900.5, (-584, 5, 29, 0, 0, 0)),
        (2299160.5, (1582, 10, 15, 0, 0, 0)),
        (2299159.5, (1582, 10, 4, 0, 0, 0)),
        (2451545.0, (2000, 1, 1, 12, 0, 0)),
    ])
    def test_anchor_dates(self, jd, expected):
        """Inverse conversion of known Julian Days, including negative years."""
        from heliora.domain.julian_day import calendar_from_julian_day
        assert calendar_from_julian_day(jd).as_tuple() == expected

    @pytest.mark.parametrize("date", [
        (2003, 10, 17, 19, 30, 30.25),
        (1582, 10, 4, 6, 0, 0.5),
        (1582, 10, 15, 0, 0, 0.5),
        (-1200, 2, 29, 6, 15, 7.125),
        (2999, 12, 31, 23, 59, 58.75),
    ])
    def test_round_trip_sub_second(self, date):
        """Calendar → JD → calendar keeps fractional seconds."""
        from heliora.domain.julian_day import calendar_from_julian_day, julian_day
        year, month, day, hour, minute, second = date
        instant = calendar_from_julian_day(
            julian_day(year, month, day, hour, minute, second, 0.0, 0.0))

        assert (instant.year, instant.month, instant.day) == (year, month, day)
        got = instant.hour * 3600 + instant.minute * 60 + instant.second
        want = hour * 3600 + minute * 60 + second
        assert got == pytest.approx(want, abs=1e-3)

    def test_midnight_starts_next_day(self):
        """JD x.5 is 00:00:00 of the following calendar day."""
        from heliora.domain.julian_day import calendar_from_julian_day
        assert calendar_from_julian_day(2451545.5).as_tuple() == (2000, 1, 2, 0, 0, 0)


class TestCalendarInstant:

    def test_frozen(self):
        """CalendarInstant is immutable."""
        from heliora.domain.julian_day import CalendarInstant
        instant = CalendarInstant(2000, 1, 1, 0, 0, 0.0)
        with pytest.raises(AttributeError):
            instant.year = 2001

    def test_as_tuple_truncates_seconds(self):
        """as_tuple() drops the fraction of a second."""
        from heliora.domain.julian_day import CalendarInstant
        assert CalendarInstant(2021, 6, 21, 3, 32, 59.9).as_tuple() == (2021, 6, 21, 3, 32, 59)

    def test_to_datetime_is_utc(self):
        """to_datetime() gives an aware UTC datetime with microseconds."""
        from heliora.domain.julian_day import CalendarInstant
        dt = CalendarInstant(2021, 6, 21, 3, 32, 7.5).to_datetime()
        assert dt == datetime(2021, 6, 21, 3, 32, 7, 500000, tzinfo=timezone.utc)

    def test_to_datetime_out_of_range(self):
        """Years datetime cannot hold raise ValueError."""
        from heliora.domain.julian_day import CalendarInstant
        with pytest.raises(ValueError):
            CalendarInstant(-500, 3, 20, 0, 0, 0.0).to_datetime()

    def test_round_trip_through_datetime(self):
        """datetime → JD → CalendarInstant → datetime is stable."""
        from heliora.domain.julian_day import calendar_from_julian_day, julian_day
        start = datetime(1999, 12, 31, 23, 59, 59, 250000, tzinfo=timezone.utc)
        jd = julian_day(start.year, start.month, start.day, start.hour, start.minute,
                        start.second + start.microsecond / 1e6, 0.0, 0.0)
        back = calendar_from_julian_day(jd).to_datetime()
        assert abs(back - start) < timedelta(milliseconds=1)
