"""Request / response schemas for the dispatch API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from issue_dispatch.application.use_cases.dispatch_issue import DispatchResult
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.value_objects.enums import IssueStatus
from issue_dispatch.domain.value_objects.geo_point import GeoPoint


class LocationIn(BaseModel):
    latitude: float | None = None
    longitude: float | None = None


class IssueCreatedEvent(BaseModel):
    """Snapshot of a newly created issue document."""

    issue_id: str = Field(min_length=1, max_length=64)
    category: str | None = None
    location: LocationIn | None = None
    reporter_id: str | None = None
    status: IssueStatus = IssueStatus.PENDING
    assigned_to: str | None = None
    created_at: datetime | None = None

    def to_domain(self) -> Issue:
        location = None
        if self.location and self.location.latitude is not None and self.location.longitude is not None:
            location = GeoPoint(latitude=self.location.latitude, longitude=self.location.longitude)
        return Issue(
            id=self.issue_id,
            category=self.category or "",
            location=location,
            reporter_id=self.reporter_id,
            status=self.status,
            assigned_to=self.assigned_to,
            created_at=self.created_at,
        )


def result_to_dict(r: DispatchResult) -> dict:
    return {
        "issue_id": r.issue_id,
        "outcome": r.outcome.value,
        "department": r.department,
        "worker_id": r.worker_id,
        "distance_meters": r.distance_meters,
        "conflicts": r.conflicts,
        "notifications": [
            {
                "recipient": n.recipient.value,
                "recipient_id": n.recipient_id,
                "status": n.status.value,
                "provider": n.provider.value if n.provider else None,
                "detail": n.detail,
            }
            for n in r.notifications
        ],
        "error": r.error,
    }
