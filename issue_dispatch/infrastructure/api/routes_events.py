"""Event endpoints — inbound issue-created trigger."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from issue_dispatch.application.use_cases.dispatch_issue import DispatchIssueUseCase
from issue_dispatch.infrastructure.api.dependencies import get_dispatch_issue_uc
from issue_dispatch.infrastructure.api.schemas import IssueCreatedEvent, result_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.post("/issue-created")
async def issue_created(
    event: IssueCreatedEvent,
    dispatch_uc: DispatchIssueUseCase = Depends(get_dispatch_issue_uc),
):
    """Dispatch a freshly created issue to the nearest available worker.

    Handled outcomes (including "nobody assigned") return 200; the event is
    never redelivered by this service.
    """
    logger.info("issue-created event for %s (category=%s)", event.issue_id, event.category)
    result = await dispatch_uc.execute(event.to_domain())
    return result_to_dict(result)
