"""Issue entity — a civic problem reported by a citizen."""

from dataclasses import dataclass
from datetime import datetime

from issue_dispatch.domain.value_objects.enums import IssueStatus
from issue_dispatch.domain.value_objects.geo_point import GeoPoint


@dataclass
class Issue:
    id: str
    category: str
    location: GeoPoint | None
    reporter_id: str | None = None
    status: IssueStatus = IssueStatus.PENDING
    assigned_to: str | None = None
    assigned_at: datetime | None = None
    created_at: datetime | None = None

    def has_valid_location(self) -> bool:
        return self.location is not None and self.location.is_valid()

    def is_assigned(self) -> bool:
        return self.status == IssueStatus.ASSIGNED or self.assigned_to is not None
