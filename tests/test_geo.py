"""Tests for distance and direction calculations."""

import pytest

from service_areas.geo import DIRECTIONS, direction, distance_km, round_half_up, rounded_distance_km

ADELAIDE = (-34.9285, 138.6007)
NORTH_ADELAIDE = (-34.9065, 138.5930)


class TestDistance:
    """Tests for haversine distance."""

    def test_same_point(self):
        """Distance from a point to itself is zero."""
        assert distance_km(ADELAIDE, ADELAIDE) == 0.0

    def test_symmetric(self):
        """Distance does not depend on argument order."""
        assert distance_km(ADELAIDE, NORTH_ADELAIDE) == pytest.approx(
            distance_km(NORTH_ADELAIDE, ADELAIDE), rel=1e-12
        )

    def test_adelaide_to_north_adelaide(self):
        """Adelaide CBD to North Adelaide is about 2.5 km."""
        assert 2.4 < distance_km(ADELAIDE, NORTH_ADELAIDE) < 2.7

    def test_one_degree_latitude(self):
        """One degree along a meridian is about 111.19 km with R = 6371 km."""
        assert distance_km((-35.0, 138.0), (-34.0, 138.0)) == pytest.approx(111.19, abs=0.01)

    def test_rounded_to_one_decimal(self):
        """Attached distances carry one decimal place."""
        d = rounded_distance_km(ADELAIDE, NORTH_ADELAIDE)
        assert d == round(d, 1)
        assert d == pytest.approx(distance_km(ADELAIDE, NORTH_ADELAIDE), abs=0.05)


class TestRoundHalfUp:
    """Tests for half-up rounding."""

    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_decimals(self):
        assert round_half_up(1.26, 1) == pytest.approx(1.3)
        assert round_half_up(1.24, 1) == pytest.approx(1.2)


class TestDirection:
    """Tests for 8-point direction labels."""

    @pytest.mark.parametrize(
        "target, expected",
        [
            ((-34.0, 138.0), "N"),
            ((-35.0, 139.0), "E"),
            ((-36.0, 138.0), "S"),
            ((-35.0, 137.0), "W"),
            ((-34.0, 139.0), "NE"),
            ((-36.0, 139.0), "SE"),
            ((-36.0, 137.0), "SW"),
            ((-34.0, 137.0), "NW"),
        ],
    )
    def test_compass_points(self, target, expected):
        """Unit degree offsets map to the expected labels."""
        assert direction((-35.0, 138.0), target) == expected

    def test_same_point_is_north(self):
        """Identical points have angle 0, which is N."""
        assert direction(ADELAIDE, ADELAIDE) == "N"

    def test_uses_raw_degree_deltas(self):
        """The angle comes from unscaled lat/lng deltas, not a true bearing."""
        # atan2(0.5, 1) = 26.6 deg -> NE; a cos(lat)-corrected bearing would give N
        assert direction((-35.0, 138.0), (-34.0, 138.5)) == "NE"

    def test_always_one_of_eight_labels(self):
        """Every direction is one of the fixed labels."""
        for dlat in (-1.0, -0.3, 0.0, 0.2, 1.0):
            for dlng in (-1.0, -0.1, 0.0, 0.7, 1.0):
                assert direction((0.0, 0.0), (dlat, dlng)) in DIRECTIONS
