"""Port interface for the transactional worker claim."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum


class ClaimOutcome(str, Enum):
    CLAIMED = "claimed"
    WORKER_BUSY = "worker_busy"
    WORKER_NOT_FOUND = "worker_not_found"
    ISSUE_ALREADY_ASSIGNED = "issue_already_assigned"
    ISSUE_NOT_FOUND = "issue_not_found"


class AssignmentStore(ABC):
    @abstractmethod
    async def claim(self, issue_id: str, worker_id: str, at: datetime) -> ClaimOutcome:
        """Atomically bind *worker_id* to *issue_id*.

        Within a single transaction the implementation must re-read the issue
        and the worker, abort without writing if the issue is already assigned
        or the worker carries a busy marker, and otherwise write all of:

        - worker.current_assignment = issue_id
        - worker.duty_status = Assigned (and updated_at = at)
        - issue.assigned_to = worker_id
        - issue.status = Assigned (and assigned_at = at)

        together or not at all. Concurrent claims on the same rows must
        serialize so that only the first committer succeeds.
        """
        ...
