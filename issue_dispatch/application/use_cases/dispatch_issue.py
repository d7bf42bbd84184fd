"""DispatchIssueUseCase — issue-created handler: route → select → claim → notify."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from issue_dispatch.application.use_cases.assign_worker import AssignWorkerUseCase
from issue_dispatch.application.use_cases.notify_assignment import (
    NotificationReport,
    NotifyAssignmentUseCase,
)
from issue_dispatch.application.use_cases.select_candidates import SelectCandidatesUseCase
from issue_dispatch.domain.entities.issue import Issue

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    ASSIGNED = "assigned"
    INVALID_LOCATION = "invalid_location"
    ALREADY_ASSIGNED = "already_assigned"
    NO_CANDIDATES = "no_candidates"
    NONE_ASSIGNED = "none_assigned"
    ERROR = "error"


@dataclass
class DispatchResult:
    """Summary of one issue's dispatch."""

    issue_id: str
    outcome: DispatchOutcome
    department: str | None = None
    worker_id: str | None = None
    distance_meters: float | None = None
    conflicts: int = 0
    notifications: list[NotificationReport] = field(default_factory=list)
    error: str | None = None


class DispatchIssueUseCase:
    """Orchestrates automatic dispatch of a freshly created issue."""

    def __init__(
        self,
        select_candidates: SelectCandidatesUseCase,
        assign_worker: AssignWorkerUseCase,
        notify_assignment: NotifyAssignmentUseCase,
    ):
        self._select = select_candidates
        self._assign = assign_worker
        self._notify = notify_assignment

    async def execute(self, issue: Issue) -> DispatchResult:
        """Dispatch a single issue snapshot end-to-end.

        Pipeline:
        1. Validate the snapshot (location present, not assigned yet)
        2. Resolve department and rank on-duty candidates
        3. Transactionally claim the nearest claimable candidate
        4. Notify worker and reporter (best-effort, independent)

        Every terminal outcome is logged once; no exception escapes.
        """
        try:
            if not issue.has_valid_location():
                logger.warning("Issue %s: invalid or missing location, dropped", issue.id)
                return DispatchResult(issue_id=issue.id, outcome=DispatchOutcome.INVALID_LOCATION)

            department = self._select.department_for(issue)

            if issue.is_assigned():
                logger.info("Issue %s: already assigned to %s, nothing to do", issue.id, issue.assigned_to)
                return DispatchResult(
                    issue_id=issue.id,
                    outcome=DispatchOutcome.ALREADY_ASSIGNED,
                    department=department,
                    worker_id=issue.assigned_to,
                )

            candidates = await self._select.execute(issue)
            if not candidates:
                logger.info("Issue %s: no available workers in %s", issue.id, department)
                return DispatchResult(
                    issue_id=issue.id, outcome=DispatchOutcome.NO_CANDIDATES, department=department,
                )

            assignment = await self._assign.execute(issue, candidates)
            if not assignment.assigned:
                outcome = (
                    DispatchOutcome.ALREADY_ASSIGNED
                    if assignment.issue_already_assigned
                    else DispatchOutcome.NONE_ASSIGNED
                )
                return DispatchResult(
                    issue_id=issue.id,
                    outcome=outcome,
                    department=department,
                    conflicts=assignment.conflicts,
                )

            notifications = await self._notify.execute(issue, assignment.worker_id, department)

            return DispatchResult(
                issue_id=issue.id,
                outcome=DispatchOutcome.ASSIGNED,
                department=department,
                worker_id=assignment.worker_id,
                distance_meters=round(assignment.distance_meters, 1),
                conflicts=assignment.conflicts,
                notifications=notifications,
            )

        except Exception as e:
            logger.exception("Error dispatching issue %s", issue.id)
            return DispatchResult(issue_id=issue.id, outcome=DispatchOutcome.ERROR, error=str(e))
