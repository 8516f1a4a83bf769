"""
Tests for azimuth, local distance and segment projection.
"""

import math

import numpy as np
import pytest

from geoprim import (
    Coordinate,
    EARTH_RADIUS_M,
    NO_AZIMUTH,
    LinePosition,
    azimuth,
    azimuth_rad,
    azimuth_between,
    distance_to_meters,
    local_lonlat_distance,
    local_lonlat_distance_rad,
    project,
    project_rad,
    project_coordinate,
)
from geoprim.algorithm.line_projector import _sqrt_complement


def _great_circle_foot(lon, lat, lon1, lat1, lon2, lat2):
    """Closest point to (lon, lat) on the great circle through p1 and p2, by vector algebra."""
    def to_xyz(lo, la):
        lo, la = np.radians(lo), np.radians(la)
        return np.array([np.cos(la) * np.cos(lo), np.cos(la) * np.sin(lo), np.sin(la)])

    normal = np.cross(to_xyz(lon1, lat1), to_xyz(lon2, lat2))
    normal /= np.linalg.norm(normal)
    p = to_xyz(lon, lat)
    foot = p - np.dot(p, normal) * normal
    foot /= np.linalg.norm(foot)
    return np.degrees(np.arctan2(foot[1], foot[0])), np.degrees(np.arcsin(foot[2]))


class TestAzimuth:
    """Tests for the local azimuth decision table."""

    def test_identical_points(self):
        assert azimuth(0, 0, 0, 0) == NO_AZIMUTH
        assert azimuth(12.5, -3.0, 12.5, -3.0) == -1.0
        assert azimuth_rad(0.1, 0.2, 0.1, 0.2) == NO_AZIMUTH

    def test_due_east(self):
        assert azimuth(0, 0, 1, 0) == pytest.approx(90.0)

    def test_due_west(self):
        assert azimuth(0, 0, -1, 0) == pytest.approx(270.0)

    def test_due_north(self):
        assert azimuth(0, 0, 0, 1) == pytest.approx(0.0, abs=1e-12)

    def test_due_south(self):
        assert azimuth(0, 0, 0, -1) == pytest.approx(180.0)

    def test_quadrants(self):
        """Diagonals land in the expected quadrant near 45 degree multiples."""
        assert azimuth(0, 0, 1, 1) == pytest.approx(45.0, abs=0.01)
        assert azimuth(0, 0, 1, -1) == pytest.approx(135.0, abs=0.01)
        assert azimuth(0, 0, -1, -1) == pytest.approx(225.0, abs=0.01)
        assert azimuth(0, 0, -1, 1) == pytest.approx(315.0, abs=0.01)

    def test_longitude_scaled_by_mean_latitude(self):
        """At 60 degrees a unit of longitude is worth about half a unit of latitude."""
        result = azimuth_rad(0.0, math.radians(60), math.radians(1), math.radians(60.5))
        expected = math.atan(math.radians(1) * math.cos(math.radians(60.25)) / math.radians(0.5))
        assert result == pytest.approx(expected)

    def test_range(self):
        np.random.seed(42)
        for lon1, lat1, lon2, lat2 in np.random.uniform(-1, 1, (100, 4)):
            result = azimuth(lon1, lat1, lon2, lat2)
            assert 0.0 <= result < 360.0

    def test_coordinate_form(self):
        assert azimuth_between(Coordinate(0, 0), Coordinate(1, 0)) == pytest.approx(90.0)


class TestLocalDistance:
    """Tests for the equirectangular distance."""

    def test_zero(self):
        assert local_lonlat_distance(0, 0, 0, 0) == 0.0

    def test_one_degree_of_longitude_on_equator(self):
        expected = EARTH_RADIUS_M * math.cos(0) * math.radians(1)
        assert local_lonlat_distance(0, 0, 1, 0) == pytest.approx(expected, rel=1e-12)

    def test_one_degree_of_latitude(self):
        expected = EARTH_RADIUS_M * math.radians(1)
        assert local_lonlat_distance(10, 0, 10, 1) == pytest.approx(expected, rel=1e-12)

    def test_longitude_shrinks_with_latitude(self):
        expected = EARTH_RADIUS_M * math.radians(1) * math.cos(math.radians(60))
        assert local_lonlat_distance(0, 60, 1, 60) == pytest.approx(expected, rel=1e-9)

    def test_symmetric(self):
        assert local_lonlat_distance(1, 2, 3, 4) == pytest.approx(local_lonlat_distance(3, 4, 1, 2))

    def test_radians_and_meters(self):
        assert distance_to_meters(1.0) == EARTH_RADIUS_M
        assert local_lonlat_distance_rad(0.0, 0.0, 0.0, 0.5) == pytest.approx(0.5)

    def test_broadcasts_over_arrays(self):
        lons = np.array([0.0, 1.0, 2.0])
        result = local_lonlat_distance(0.0, 0.0, lons, 0.0)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, EARTH_RADIUS_M * np.radians(lons))

    def test_close_to_great_circle_over_short_span(self):
        """Within 0.01% of haversine for points a few km apart."""
        lon1, lat1, lon2, lat2 = map(math.radians, (2.35, 48.85, 2.40, 48.88))
        a = (math.sin((lat2 - lat1) / 2) ** 2
             + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2)
        haversine = 2 * EARTH_RADIUS_M * math.asin(math.sqrt(a))
        approx = local_lonlat_distance(2.35, 48.85, 2.40, 48.88)
        assert approx == pytest.approx(haversine, rel=1e-4)


class TestLineProjectorMeridian:
    """Tests for segments along a meridian."""

    def test_inside(self):
        result = project(0, 5, 0, 0, 0, 10)
        assert result.position is LinePosition.INSIDE
        assert result.lon == pytest.approx(0.0)
        assert result.lat == pytest.approx(5.0)

    def test_outside_end(self):
        result = project(0, 12, 0, 0, 0, 10)
        assert result.position is LinePosition.OUTSIDE_END
        assert (result.lon, result.lat) == pytest.approx((0.0, 10.0))

    def test_outside_start(self):
        result = project(0, -3, 0, 0, 0, 10)
        assert result.position is LinePosition.OUTSIDE_START
        assert (result.lon, result.lat) == pytest.approx((0.0, 0.0))

    def test_descending_segment(self):
        """With the start north of the end, the clamps swap sides."""
        result = project(0, 12, 0, 10, 0, 0)
        assert result.position is LinePosition.OUTSIDE_START
        assert result.lat == pytest.approx(10.0)

        result = project(0, -1, 0, 10, 0, 0)
        assert result.position is LinePosition.OUTSIDE_END
        assert result.lat == pytest.approx(0.0)

        result = project(0, 4, 0, 10, 0, 0)
        assert result.position is LinePosition.INSIDE
        assert result.lat == pytest.approx(4.0)

    def test_point_off_meridian(self):
        """The query longitude is ignored; the segment longitude is used."""
        result = project(3, 5, 7, 0, 7, 10)
        assert result.position is LinePosition.INSIDE
        assert (result.lon, result.lat) == pytest.approx((7.0, 5.0))

    def test_radians(self):
        result = project_rad(0.0, 0.05, 0.0, 0.0, 0.0, 0.1)
        assert result.position is LinePosition.INSIDE
        assert result.lat == pytest.approx(0.05)


class TestLineProjectorGeneral:
    """Tests for the spherical solution on non-meridian segments."""

    def test_inside_on_equator(self):
        result = project(5, 1, 0, 0, 10, 0)
        assert result.position is LinePosition.INSIDE
        assert result.lon == pytest.approx(5.0)
        assert result.lat == pytest.approx(0.0, abs=1e-5)

    def test_point_on_segment(self):
        result = project(4, 0, 0, 0, 10, 0)
        assert result.position is LinePosition.INSIDE
        assert result.lon == pytest.approx(4.0)
        assert result.lat == pytest.approx(0.0, abs=1e-5)

    def test_outside_start(self):
        result = project(-5, 1, 0, 0, 10, 0)
        assert result.position is LinePosition.OUTSIDE_START
        assert (result.lon, result.lat) == pytest.approx((0.0, 0.0))

    def test_outside_end(self):
        result = project(15, 1, 0, 0, 10, 0)
        assert result.position is LinePosition.OUTSIDE_END
        assert (result.lon, result.lat) == pytest.approx((10.0, 0.0))

    def test_coordinate_form(self):
        result = project_coordinate(Coordinate(5, 1), Coordinate(0, 0), Coordinate(10, 0))
        assert result.position is LinePosition.INSIDE
        assert result.to_coordinate().equals_2d(Coordinate(5, 0), tolerance=1e-5)

    def test_segment_off_equator(self):
        """A parallel-to-parallel segment bulges poleward along its great circle."""
        result = project(5, 11, 0, 10, 10, 10)
        lon_f, lat_f = _great_circle_foot(5, 11, 0, 10, 10, 10)
        assert result.position is LinePosition.INSIDE
        assert result.lon == pytest.approx(5.0)
        assert result.lat > 10.0
        assert (result.lon, result.lat) == pytest.approx((lon_f, lat_f), abs=1e-8)

    def test_inclined_segment(self):
        result = project(3, 4, 0, 0, 10, 8)
        lon_f, lat_f = _great_circle_foot(3, 4, 0, 0, 10, 8)
        assert result.position is LinePosition.INSIDE
        assert (result.lon, result.lat) == pytest.approx((lon_f, lat_f), abs=1e-8)

    def test_inclined_segment_reversed_latitudes(self):
        """With the start north of the end the foot moves north as well."""
        result = project(3, 4, 0, 8, 10, 0)
        lon_f, lat_f = _great_circle_foot(3, 4, 0, 8, 10, 0)
        assert result.position is LinePosition.INSIDE
        assert (result.lon, result.lat) == pytest.approx((lon_f, lat_f), abs=1e-8)
        assert result.lat > project(3, 4, 0, 0, 10, 8).lat

    def test_degenerate_input_does_not_raise(self):
        """Poles give ill-conditioned inputs but never an exception."""
        result = project(0, 90, 10, 0, 20, 0)
        assert isinstance(result.position, LinePosition)
        assert isinstance(result.lon, float)

    def test_nan_input_propagates(self):
        result = project(5, float("nan"), 0, 10, 10, 10)
        assert result.position is LinePosition.INSIDE
        assert math.isnan(result.lon)
        assert math.isnan(result.lat)

    def test_sqrt_complement_domain(self):
        """Out-of-domain sines clamp to 0; NaN stays NaN."""
        assert _sqrt_complement(np.float64(1.0 + 1e-15)) == 0.0
        assert _sqrt_complement(np.float64(0.6)) == pytest.approx(0.8)
        assert math.isnan(_sqrt_complement(np.float64("nan")))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
