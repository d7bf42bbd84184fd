"""Dispatch endpoints — re-run dispatch for a stored issue."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from issue_dispatch.adapters.persistence.repositories import SqlIssueRepository
from issue_dispatch.application.use_cases.dispatch_issue import DispatchIssueUseCase
from issue_dispatch.infrastructure.api.dependencies import get_dispatch_issue_uc, get_issue_repo
from issue_dispatch.infrastructure.api.schemas import result_to_dict

router = APIRouter(prefix="/dispatch", tags=["dispatch"])


@router.post("/{issue_id}")
async def dispatch_single(
    issue_id: str,
    dispatch_uc: DispatchIssueUseCase = Depends(get_dispatch_issue_uc),
    issue_repo: SqlIssueRepository = Depends(get_issue_repo),
):
    """Dispatch a single stored issue by ID. No-op if already assigned."""
    issue = await issue_repo.get_by_id(issue_id)
    if not issue:
        raise HTTPException(status_code=404, detail="Issue not found")

    result = await dispatch_uc.execute(issue)
    return result_to_dict(result)
