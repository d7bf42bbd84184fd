"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from issue_dispatch.adapters.notifications.expo_adapter import ExpoNotifier
from issue_dispatch.adapters.notifications.fcm_adapter import FcmNotifier
from issue_dispatch.adapters.notifications.logging_adapter import LoggingNotifier
from issue_dispatch.adapters.persistence.database import async_session_factory, get_session
from issue_dispatch.adapters.persistence.repositories import (
    SqlAssignmentStore,
    SqlCitizenRepository,
    SqlIssueRepository,
    SqlWorkerRepository,
)
from issue_dispatch.application.ports.notifier_port import Notifier
from issue_dispatch.application.use_cases.assign_worker import AssignWorkerUseCase
from issue_dispatch.application.use_cases.dispatch_issue import DispatchIssueUseCase
from issue_dispatch.application.use_cases.notify_assignment import NotifyAssignmentUseCase
from issue_dispatch.application.use_cases.select_candidates import SelectCandidatesUseCase
from issue_dispatch.config import settings
from issue_dispatch.domain.value_objects.enums import PushProvider

logger = logging.getLogger(__name__)

def build_notifiers(dry_run: bool) -> dict[PushProvider, Notifier]:
    """One transport per token scheme; dry run logs instead of sending."""
    if dry_run:
        logger.info("Push dry run enabled: notifications will only be logged")
        return {provider: LoggingNotifier(provider) for provider in PushProvider}
    return {PushProvider.FCM: FcmNotifier(), PushProvider.EXPO: ExpoNotifier()}


# Singleton adapters (stateless)
_notifiers = build_notifiers(settings.push_dry_run)
_assignment_store = SqlAssignmentStore(async_session_factory)


def get_issue_repo(session: AsyncSession = Depends(get_session)) -> SqlIssueRepository:
    return SqlIssueRepository(session)


def get_dispatch_issue_uc(
    session: AsyncSession = Depends(get_session),
) -> DispatchIssueUseCase:
    workers = SqlWorkerRepository(session)
    return DispatchIssueUseCase(
        select_candidates=SelectCandidatesUseCase(workers, settings.fallback_department),
        assign_worker=AssignWorkerUseCase(_assignment_store),
        notify_assignment=NotifyAssignmentUseCase(
            worker_repo=workers,
            citizen_repo=SqlCitizenRepository(session),
            notifiers=_notifiers,
        ),
    )
