"""AssignWorkerUseCase — claim the nearest free candidate for an issue."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from issue_dispatch.application.ports.assignment_store import AssignmentStore, ClaimOutcome
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.policies.candidate_ranking import Candidate

logger = logging.getLogger(__name__)


class AssignmentStatus(str, Enum):
    ASSIGNED = "assigned"
    NONE_ASSIGNED = "none_assigned"


@dataclass(frozen=True)
class AssignmentOutcome:
    """Terminal result of one assignment attempt over a candidate list."""

    status: AssignmentStatus
    worker_id: str | None = None
    distance_meters: float | None = None
    conflicts: int = 0  # candidates that could not be claimed
    issue_already_assigned: bool = False

    @property
    def assigned(self) -> bool:
        return self.status == AssignmentStatus.ASSIGNED


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssignWorkerUseCase:
    """Walk candidates nearest first and stop at the first successful claim.

    Every claim is one store transaction. A busy worker means another
    invocation won that worker: move on to the next candidate. An issue
    that turns out to be assigned already ends the walk immediately, which
    makes duplicate invocations for the same issue a no-op.
    """

    def __init__(self, store: AssignmentStore, clock: Callable[[], datetime] = _utcnow):
        self._store = store
        self._clock = clock

    async def execute(self, issue: Issue, candidates: list[Candidate]) -> AssignmentOutcome:
        conflicts = 0
        for candidate in candidates:
            outcome = await self._store.claim(issue.id, candidate.worker_id, self._clock())

            if outcome == ClaimOutcome.CLAIMED:
                logger.info(
                    "Issue %s → worker %s (%.0f m)",
                    issue.id, candidate.worker_id, candidate.distance_meters,
                )
                return AssignmentOutcome(
                    status=AssignmentStatus.ASSIGNED,
                    worker_id=candidate.worker_id,
                    distance_meters=candidate.distance_meters,
                    conflicts=conflicts,
                )

            if outcome in (ClaimOutcome.ISSUE_ALREADY_ASSIGNED, ClaimOutcome.ISSUE_NOT_FOUND):
                logger.info("Issue %s: claim aborted (%s)", issue.id, outcome.value)
                return AssignmentOutcome(
                    status=AssignmentStatus.NONE_ASSIGNED,
                    conflicts=conflicts,
                    issue_already_assigned=outcome == ClaimOutcome.ISSUE_ALREADY_ASSIGNED,
                )

            conflicts += 1
            logger.info(
                "Issue %s: worker %s not claimable (%s), trying next candidate",
                issue.id, candidate.worker_id, outcome.value,
            )

        logger.warning(
            "Issue %s: no worker assigned (%d candidates, %d conflicts)",
            issue.id, len(candidates), conflicts,
        )
        return AssignmentOutcome(status=AssignmentStatus.NONE_ASSIGNED, conflicts=conflicts)
