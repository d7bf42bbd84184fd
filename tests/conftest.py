"""Pytest configuration and shared fixtures."""

import pytest

from issue_dispatch.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def issue_point():
    """Reference issue location used across the dispatch scenarios."""
    return GeoPoint(latitude=23.2520, longitude=77.4960)
