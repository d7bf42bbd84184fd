"""Tests for GeoPoint value object."""

import math

import pytest

from issue_dispatch.domain.value_objects.geo_point import GeoPoint, distance_meters


def test_haversine_same_point(issue_point):
    """Distance from a point to itself should be 0."""
    assert issue_point.haversine_m(issue_point) == 0.0


def test_one_millidegree_of_latitude_is_about_111_m(issue_point):
    b = GeoPoint(latitude=23.2530, longitude=77.4960)
    assert distance_meters(issue_point, b) == pytest.approx(111.2, abs=0.5)


def test_bhopal_to_indore():
    """Bhopal to Indore is roughly 170-190 km in a straight line."""
    bhopal = GeoPoint(latitude=23.2599, longitude=77.4126)
    indore = GeoPoint(latitude=22.7196, longitude=75.8577)
    assert 165_000 < distance_meters(bhopal, indore) < 195_000


def test_distance_is_symmetric():
    a = GeoPoint(latitude=23.2520, longitude=77.4960)
    b = GeoPoint(latitude=23.2880, longitude=77.5100)
    assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


@pytest.mark.parametrize(
    "lat, lon",
    [
        (math.nan, 77.0),
        (23.0, math.inf),
        (None, 77.0),
        ("23.0", 77.0),
        (True, 77.0),
    ],
)
def test_invalid_coordinates(lat, lon):
    assert GeoPoint(latitude=lat, longitude=lon).is_valid() is False


def test_integer_coordinates_are_valid():
    assert GeoPoint(latitude=23, longitude=77).is_valid() is True


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=23.0, longitude=77.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0
