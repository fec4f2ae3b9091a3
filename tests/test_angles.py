# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for angle and day-fraction normalisation helpers."""
import pytest


class TestLimitDegrees:

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0.0),
        (359.5, 359.5),
        (360.0, 0.0),
        (725.0, 5.0),
        (-10.0, 350.0),
        (-730.0, 350.0),
    ])
    def test_wraps_into_0_360(self, value, expected):
        """Any angle reduces into [0, 360)."""
        from heliora.domain.angles import limit_degrees
        assert limit_degrees(value) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("value, expected", [
        (190.0, -170.0),
        (-190.0, 170.0),
        (180.0, 180.0),
        (45.0, 45.0),
        (540.0, 180.0),
    ])
    def test_180pm(self, value, expected):
        """Any angle reduces into [-180, 180]."""
        from heliora.domain.angles import limit_degrees180pm
        assert limit_degrees180pm(value) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("value, expected", [
        (190.0, 10.0),
        (-10.0, 170.0),
        (90.0, 90.0),
    ])
    def test_0_180(self, value, expected):
        """Any angle reduces into [0, 180]."""
        from heliora.domain.angles import limit_degrees180
        assert limit_degrees180(value) == pytest.approx(expected, abs=1e-9)


class TestDayFractions:

    @pytest.mark.parametrize("value, expected", [
        (0.25, 0.25),
        (1.75, 0.75),
        (-0.25, 0.75),
        (3.0, 0.0),
    ])
    def test_zero2one(self, value, expected):
        """Values reduce to their fractional part in [0, 1)."""
        from heliora.domain.angles import limit_zero2one
        assert limit_zero2one(value) == pytest.approx(expected, abs=1e-12)

    def test_dayfrac_to_local_hr_applies_timezone(self):
        """Day fraction in UT → local hour via the timezone offset."""
        from heliora.domain.angles import dayfrac_to_local_hr
        # 18:00 UT is 11:00 at UTC-7
        assert dayfrac_to_local_hr(0.75, -7.0) == pytest.approx(11.0)

    def test_dayfrac_to_local_hr_wraps_past_midnight(self):
        """A local hour past 24 wraps into the next day."""
        from heliora.domain.angles import dayfrac_to_local_hr
        assert dayfrac_to_local_hr(0.95, 3.0) == pytest.approx(1.8)


class TestLimitMinutes:

    @pytest.mark.parametrize("value, expected", [
        (14.6, 14.6),
        (-1430.0, 10.0),
        (1425.0, -15.0),
        (20.0, 20.0),
    ])
    def test_wraps_through_a_day(self, value, expected):
        """Minute offsets wrap into ±20 minutes."""
        from heliora.domain.angles import limit_minutes
        assert limit_minutes(value) == pytest.approx(expected)


class TestPolynomial:

    def test_third_order(self):
        """Cubic evaluated in Horner form."""
        from heliora.domain.angles import third_order_polynomial
        # 2x³ - x² + 3x + 5 at x = 2
        assert third_order_polynomial(2.0, -1.0, 3.0, 5.0, 2.0) == pytest.approx(23.0)
