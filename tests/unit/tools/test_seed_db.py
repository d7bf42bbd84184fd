"""Tests for demo data generation (no database needed)."""

import random

from issue_dispatch.domain.policies.department_routing import resolve_department
from issue_dispatch.domain.value_objects.enums import DutyStatus, IssueStatus
from issue_dispatch.tools.seed_db import AREA_ORIGIN, AREA_SPAN_DEG, build_demo_data


def test_counts():
    data = build_demo_data(random.Random(1), issue_count=7)
    assert len(data.issues) == 7
    assert len(data.citizens) == 5
    assert len(data.workers) == 6


def test_deterministic_for_seed():
    a = build_demo_data(random.Random(42))
    b = build_demo_data(random.Random(42))
    assert [i.id for i in a.issues] == [i.id for i in b.issues]
    assert [i.category for i in a.issues] == [i.category for i in b.issues]


def test_issues_are_pending_and_inside_demo_area():
    data = build_demo_data(random.Random(3))
    citizen_ids = {c.id for c in data.citizens}
    for issue in data.issues:
        assert issue.status == IssueStatus.PENDING
        assert issue.reporter_id in citizen_ids
        assert AREA_ORIGIN.latitude <= issue.location.latitude <= AREA_ORIGIN.latitude + AREA_SPAN_DEG
        assert AREA_ORIGIN.longitude <= issue.location.longitude <= AREA_ORIGIN.longitude + AREA_SPAN_DEG


def test_every_seeded_category_has_a_worker_department():
    data = build_demo_data(random.Random(5), issue_count=40)
    departments = {w.department for w in data.workers}
    assert all(w.duty_status == DutyStatus.ON_DUTY for w in data.workers)
    assert {resolve_department(i.category) for i in data.issues} <= departments
