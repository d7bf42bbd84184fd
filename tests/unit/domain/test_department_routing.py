"""Tests for DepartmentRoutingPolicy."""

import pytest

from issue_dispatch.domain.policies.department_routing import (
    CATEGORY_TO_DEPARTMENT,
    resolve_department,
)


@pytest.mark.parametrize(
    "category, department",
    [
        ("Pothole", "Roads"),
        ("Garbage", "Sanitation"),
        ("Streetlight", "Electrical"),
        ("Security", "Security"),
        ("Garbage Dump", "Sanitation"),
        ("Streetlight Outage", "Electrical"),
        ("Open Manhole", "Roads"),
    ],
)
def test_known_categories(category, department):
    assert resolve_department(category) == department


def test_unmapped_category_routes_to_general():
    assert resolve_department("Illegal Construction") == "General"


@pytest.mark.parametrize("category", [None, ""])
def test_missing_category_routes_to_general(category):
    assert resolve_department(category) == "General"


def test_lookup_is_case_sensitive():
    assert resolve_department("pothole") == "General"


def test_configured_fallback():
    assert resolve_department("Water Supply", fallback="Sanitation") == "Sanitation"
    assert resolve_department("Pothole", fallback="Sanitation") == "Roads"


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_TO_DEPARTMENT["Pothole"] = "General"
