"""Tests for the HTTP layer with the dispatch use case overridden by fakes."""

import pytest
from fastapi.testclient import TestClient

from issue_dispatch.application.use_cases.dispatch_issue import DispatchOutcome, DispatchResult
from issue_dispatch.application.use_cases.notify_assignment import (
    DeliveryStatus,
    NotificationReport,
    Recipient,
)
from issue_dispatch.domain.value_objects.enums import PushProvider
from issue_dispatch.infrastructure.api.dependencies import (
    build_notifiers,
    get_dispatch_issue_uc,
    get_issue_repo,
)
from issue_dispatch.adapters.notifications.logging_adapter import LoggingNotifier
from issue_dispatch.main import create_app


class RecordingDispatch:
    def __init__(self):
        self.issues = []

    async def execute(self, issue):
        self.issues.append(issue)
        return DispatchResult(
            issue_id=issue.id,
            outcome=DispatchOutcome.ASSIGNED,
            department="Roads",
            worker_id="w-1",
            distance_meters=50.0,
            notifications=[
                NotificationReport(Recipient.WORKER, "w-1", DeliveryStatus.SENT, PushProvider.FCM),
                NotificationReport(Recipient.CITIZEN, "c-1", DeliveryStatus.SKIPPED, detail="token absent"),
            ],
        )


class EmptyIssueRepo:
    async def get_by_id(self, issue_id):
        return None


@pytest.fixture
def dispatch():
    return RecordingDispatch()


@pytest.fixture
def client(dispatch):
    app = create_app()
    app.dependency_overrides[get_dispatch_issue_uc] = lambda: dispatch
    app.dependency_overrides[get_issue_repo] = lambda: EmptyIssueRepo()
    return TestClient(app)


def test_issue_created_event_dispatches_snapshot(client, dispatch):
    response = client.post(
        "/api/events/issue-created",
        json={
            "issue_id": "issue-1",
            "category": "Pothole",
            "location": {"latitude": 23.2520, "longitude": 77.4960},
            "reporter_id": "c-1",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["outcome"] == "assigned"
    assert body["worker_id"] == "w-1"
    assert body["notifications"][0] == {
        "recipient": "worker", "recipient_id": "w-1", "status": "sent",
        "provider": "fcm", "detail": None,
    }

    issue = dispatch.issues[0]
    assert issue.id == "issue-1"
    assert issue.location.latitude == 23.2520
    assert issue.reporter_id == "c-1"


def test_event_without_location_still_handled(client, dispatch):
    response = client.post("/api/events/issue-created", json={"issue_id": "issue-2", "category": "Garbage"})
    assert response.status_code == 200
    assert dispatch.issues[0].location is None


def test_event_with_partial_location(client, dispatch):
    client.post(
        "/api/events/issue-created",
        json={"issue_id": "issue-3", "location": {"latitude": 23.25}},
    )
    assert dispatch.issues[0].location is None
    assert dispatch.issues[0].category == ""


def test_event_requires_issue_id(client):
    response = client.post("/api/events/issue-created", json={"category": "Pothole"})
    assert response.status_code == 422


def test_redispatch_unknown_issue_404(client):
    response = client.post("/api/dispatch/missing")
    assert response.status_code == 404


def test_build_notifiers_dry_run():
    notifiers = build_notifiers(dry_run=True)
    assert set(notifiers) == set(PushProvider)
    assert all(isinstance(n, LoggingNotifier) for n in notifiers.values())


def test_build_notifiers_live():
    notifiers = build_notifiers(dry_run=False)
    assert {p: n.provider for p, n in notifiers.items()} == {p: p for p in PushProvider}
