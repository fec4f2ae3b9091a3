# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the Earth heliocentric position (VSOP87 terms used by SPA)."""
import math

import numpy as np
import pytest


def _reference_jme():
    from heliora.domain.julian_day import (
        julian_day,
        julian_ephemeris_century,
        julian_ephemeris_day,
        julian_ephemeris_millennium,
    )
    jd = julian_day(2003, 10, 17, 12, 30, 30, 0.0, -7.0)
    return julian_ephemeris_millennium(
        julian_ephemeris_century(julian_ephemeris_day(jd, 67.0)))


# --------------------------------------------------------------------------- #
# Term tables
# --------------------------------------------------------------------------- #

class TestTermTables:

    @pytest.mark.parametrize("series, counts", [
        ("L", [64, 34, 20, 7, 3, 1]),
        ("B", [5, 2]),
        ("R", [40, 10, 6, 2, 1]),
    ])
    def test_group_sizes(self, series, counts):
        """Term counts per group match the VSOP87 tables used by SPA."""
        from heliora.domain.earth_position import _load_earth_terms
        groups = _load_earth_terms(series)
        assert [g.shape[0] for g in groups] == counts
        assert all(g.shape[1] == 3 for g in groups)

    def test_tables_are_read_only(self):
        """Cached tables cannot be modified by callers."""
        from heliora.domain.earth_position import _load_earth_terms
        groups = _load_earth_terms("L")
        with pytest.raises(ValueError):
            groups[0][0, 0] = 0.0

    def test_tables_are_cached(self):
        """Repeated loads return the same array objects."""
        from heliora.domain.earth_position import _load_earth_terms
        assert _load_earth_terms("R") is _load_earth_terms("R")

    def test_first_longitude_term(self):
        """L0 starts with A = 175347046, B = 0, C = 0."""
        from heliora.domain.earth_position import _load_earth_terms
        first = _load_earth_terms("L")[0][0]
        assert tuple(first) == (175347046.0, 0.0, 0.0)


# --------------------------------------------------------------------------- #
# Summation
# --------------------------------------------------------------------------- #

class TestSummation:

    def test_single_term(self):
        """A·cos(B + C·x) for one row."""
        from heliora.domain.earth_position import earth_periodic_term_summation
        terms = np.array([[2.0, 0.0, math.pi]])
        assert earth_periodic_term_summation(terms, 1.0) == pytest.approx(-2.0)

    def test_earth_values_polynomial(self):
        """Group sums combine as a polynomial in JME, scaled by 1e-8."""
        from heliora.domain.earth_position import earth_values
        # (1 + 2x + 3x²)·1e-8 at x = 2
        assert earth_values([1.0, 2.0, 3.0], 2.0) == pytest.approx(17.0e-8)


# --------------------------------------------------------------------------- #
# NREL reference values (NREL/TP-560-34302 Table A5.1)
# --------------------------------------------------------------------------- #

class TestHeliocentricPosition:

    def test_longitude(self):
        """Heliocentric longitude L for the NREL reference instant."""
        from heliora.domain.earth_position import earth_heliocentric_longitude
        assert earth_heliocentric_longitude(_reference_jme()) == pytest.approx(
            24.0182616917, abs=1e-6)

    def test_latitude(self):
        """Heliocentric latitude B for the NREL reference instant."""
        from heliora.domain.earth_position import earth_heliocentric_latitude
        assert earth_heliocentric_latitude(_reference_jme()) == pytest.approx(
            -0.0001011219, abs=1e-9)

    def test_radius_vector(self):
        """Earth radius vector R in AU for the NREL reference instant."""
        from heliora.domain.earth_position import earth_radius_vector
        assert earth_radius_vector(_reference_jme()) == pytest.approx(0.9965422974, abs=1e-8)

    def test_position_dataclass(self):
        """heliocentric_position bundles L, B and R."""
        from heliora.domain.earth_position import heliocentric_position
        pos = heliocentric_position(_reference_jme())
        assert 0.0 <= pos.longitude_deg < 360.0
        with pytest.raises(AttributeError):
            pos.radius_au = 1.0

    def test_radius_stays_near_one_au(self):
        """R stays within the perihelion/aphelion band over ±4000 years."""
        from heliora.domain.earth_position import earth_radius_vector
        for jme in np.linspace(-0.4, 0.4, 9):
            assert 0.98 < earth_radius_vector(float(jme)) < 1.02


class TestGeocentricConversion:

    def test_longitude_flips_by_180(self):
        """Geocentric longitude Θ = L + 180."""
        from heliora.domain.earth_position import geocentric_longitude
        assert geocentric_longitude(24.0182616917) == pytest.approx(204.0182616917)

    def test_longitude_wraps(self):
        """Θ stays in [0, 360)."""
        from heliora.domain.earth_position import geocentric_longitude
        assert geocentric_longitude(200.0) == pytest.approx(20.0)

    def test_latitude_negates(self):
        """Geocentric latitude β = -B."""
        from heliora.domain.earth_position import geocentric_latitude
        assert geocentric_latitude(-0.0001011219) == pytest.approx(0.0001011219)
