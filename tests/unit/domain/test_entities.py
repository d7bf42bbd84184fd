"""Tests for domain entities."""

from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.entities.worker import Worker
from issue_dispatch.domain.value_objects.enums import DutyStatus, IssueStatus, PushProvider
from issue_dispatch.domain.value_objects.geo_point import GeoPoint
from issue_dispatch.domain.value_objects.push_token import PushToken


def test_new_issue_defaults_to_pending():
    issue = Issue(id="i-1", category="Pothole", location=GeoPoint(23.25, 77.49))
    assert issue.status == IssueStatus.PENDING
    assert issue.is_assigned() is False
    assert issue.has_valid_location() is True


def test_issue_without_location():
    issue = Issue(id="i-1", category="Pothole", location=None)
    assert issue.has_valid_location() is False


def test_issue_assigned_by_status_or_assignee():
    assert Issue(id="i-1", category="x", location=None, status=IssueStatus.ASSIGNED).is_assigned()
    assert Issue(id="i-1", category="x", location=None, assigned_to="w-1").is_assigned()


def test_reported_issue_is_not_assigned():
    issue = Issue(id="i-1", category="x", location=None, status=IssueStatus.REPORTED)
    assert issue.is_assigned() is False


def test_worker_busy_marker():
    worker = Worker(id="w-1", department="Roads", duty_status=DutyStatus.ON_DUTY)
    assert worker.is_busy() is False
    worker.current_assignment = "i-1"
    assert worker.is_busy() is True


def test_worker_on_duty():
    assert Worker(id="w", department="Roads", duty_status=DutyStatus.ON_DUTY).is_on_duty()
    assert not Worker(id="w", department="Roads", duty_status=DutyStatus.OFF_DUTY).is_on_duty()


def test_push_token_repr_hides_value():
    token = PushToken(provider=PushProvider.FCM, value="secret-device-token-abcd")
    assert "secret" not in repr(token)
    assert "abcd" in repr(token)
