"""Worker entity — a field staff member who resolves issues."""

from dataclasses import dataclass
from datetime import datetime

from issue_dispatch.domain.value_objects.enums import DutyStatus
from issue_dispatch.domain.value_objects.geo_point import GeoPoint
from issue_dispatch.domain.value_objects.push_token import PushToken


@dataclass
class Worker:
    id: str
    department: str
    duty_status: DutyStatus
    live_location: GeoPoint | None = None
    current_assignment: str | None = None
    push_token: PushToken | None = None
    email: str | None = None
    updated_at: datetime | None = None

    def is_busy(self) -> bool:
        return self.current_assignment is not None

    def is_on_duty(self) -> bool:
        return self.duty_status == DutyStatus.ON_DUTY

    def has_valid_location(self) -> bool:
        return self.live_location is not None and self.live_location.is_valid()
