"""SelectCandidatesUseCase — on-duty workers of the issue's department, nearest first."""

from __future__ import annotations

import logging

from issue_dispatch.application.ports.worker_repo import WorkerRepository
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.policies.candidate_ranking import Candidate, rank_candidates
from issue_dispatch.domain.policies.department_routing import (
    FALLBACK_DEPARTMENT,
    resolve_department,
)

logger = logging.getLogger(__name__)


class SelectCandidatesUseCase:
    """Fetch and rank the workers who could take an issue."""

    def __init__(self, worker_repo: WorkerRepository, fallback_department: str = FALLBACK_DEPARTMENT):
        self._workers = worker_repo
        self._fallback = fallback_department

    def department_for(self, issue: Issue) -> str:
        return resolve_department(issue.category, self._fallback)

    async def execute(self, issue: Issue) -> list[Candidate]:
        """Return eligible candidates ordered by distance (ties by worker id).

        Steps:
        1. Reject issues without a valid location (empty result).
        2. Resolve department from category.
        3. Load on-duty workers of that department.
        4. Drop busy or unlocatable workers, rank the rest.
        """
        if not issue.has_valid_location():
            logger.warning("Issue %s: no valid location, not dispatchable", issue.id)
            return []

        department = self.department_for(issue)
        workers = await self._workers.get_on_duty_by_department(department)
        if not workers:
            logger.info("Issue %s: no on-duty workers in %s", issue.id, department)
            return []

        candidates = rank_candidates(issue.location, workers)
        if not candidates:
            logger.info(
                "Issue %s: %d on-duty workers in %s, none available",
                issue.id, len(workers), department,
            )
            return []

        logger.debug(
            "Issue %s: %d candidates in %s, nearest %s at %.0f m",
            issue.id, len(candidates), department,
            candidates[0].worker_id, candidates[0].distance_meters,
        )
        return candidates
