"""NotifyAssignmentUseCase — best-effort push to the worker and the reporter."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from issue_dispatch.application.ports.citizen_repo import CitizenRepository
from issue_dispatch.application.ports.notifier_port import Notifier, PushMessage
from issue_dispatch.application.ports.worker_repo import WorkerRepository
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.value_objects.enums import PushProvider
from issue_dispatch.domain.value_objects.push_token import PushToken

logger = logging.getLogger(__name__)


class Recipient(str, Enum):
    WORKER = "worker"
    CITIZEN = "citizen"


class DeliveryStatus(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class NotificationReport:
    recipient: Recipient
    recipient_id: str | None
    status: DeliveryStatus
    provider: PushProvider | None = None
    detail: str | None = None


def worker_message(issue_id: str, department: str) -> PushMessage:
    return PushMessage(
        title="New Task Assigned",
        body=f"You have been assigned to issue {issue_id}",
        data={"issueId": issue_id, "department": department},
    )


def citizen_message(issue_id: str, worker_id: str) -> PushMessage:
    return PushMessage(
        title="Issue Assigned",
        body=f"Your issue {issue_id} has been assigned to a worker.",
        data={"issueId": issue_id, "workerId": worker_id},
    )


class NotifyAssignmentUseCase:
    """Send the two "assigned" notifications independently of each other.

    Nothing here raises: a missing token, an unknown provider, or a
    transport failure on one path is logged and reported, and never affects
    the other path or the assignment that triggered it.
    """

    def __init__(
        self,
        worker_repo: WorkerRepository,
        citizen_repo: CitizenRepository,
        notifiers: Mapping[PushProvider, Notifier],
    ):
        self._workers = worker_repo
        self._citizens = citizen_repo
        self._notifiers = dict(notifiers)

    async def execute(self, issue: Issue, worker_id: str, department: str) -> list[NotificationReport]:
        reports = await asyncio.gather(
            self.notify_worker(worker_id, issue, department),
            self.notify_citizen(issue, worker_id),
        )
        return list(reports)

    async def notify_worker(self, worker_id: str, issue: Issue, department: str) -> NotificationReport:
        try:
            worker = await self._workers.get_by_id(worker_id)
        except Exception as e:
            logger.exception("Issue %s: could not load worker %s for notification", issue.id, worker_id)
            return NotificationReport(Recipient.WORKER, worker_id, DeliveryStatus.FAILED, detail=str(e))

        token = worker.push_token if worker else None
        return await self._deliver(
            Recipient.WORKER, worker_id, token, worker_message(issue.id, department), issue.id,
        )

    async def notify_citizen(self, issue: Issue, worker_id: str) -> NotificationReport:
        if not issue.reporter_id:
            logger.info("Issue %s: no reporter on record, citizen notification skipped", issue.id)
            return NotificationReport(
                Recipient.CITIZEN, None, DeliveryStatus.SKIPPED, detail="no reporter",
            )

        try:
            citizen = await self._citizens.get_by_id(issue.reporter_id)
        except Exception as e:
            logger.exception(
                "Issue %s: could not load citizen %s for notification", issue.id, issue.reporter_id,
            )
            return NotificationReport(
                Recipient.CITIZEN, issue.reporter_id, DeliveryStatus.FAILED, detail=str(e),
            )

        token = citizen.push_token if citizen else None
        return await self._deliver(
            Recipient.CITIZEN, issue.reporter_id, token, citizen_message(issue.id, worker_id), issue.id,
        )

    async def _deliver(
        self,
        recipient: Recipient,
        recipient_id: str,
        token: PushToken | None,
        message: PushMessage,
        issue_id: str,
    ) -> NotificationReport:
        if token is None or not token.value:
            logger.info(
                "Issue %s: %s %s has no push token, notification skipped",
                issue_id, recipient.value, recipient_id,
            )
            return NotificationReport(recipient, recipient_id, DeliveryStatus.SKIPPED, detail="token absent")

        notifier = self._notifiers.get(token.provider)
        if notifier is None:
            logger.warning(
                "Issue %s: no %s transport configured, %s %s not notified",
                issue_id, token.provider.value, recipient.value, recipient_id,
            )
            return NotificationReport(
                recipient, recipient_id, DeliveryStatus.SKIPPED, token.provider, "provider not configured",
            )

        try:
            result = await notifier.send(token.value, message)
        except Exception as e:
            logger.exception(
                "Issue %s: %s transport raised for %s %s",
                issue_id, token.provider.value, recipient.value, recipient_id,
            )
            return NotificationReport(recipient, recipient_id, DeliveryStatus.FAILED, token.provider, str(e))

        if not result.delivered:
            logger.warning(
                "Issue %s: %s notification to %s %s failed: %s",
                issue_id, token.provider.value, recipient.value, recipient_id, result.error,
            )
            return NotificationReport(recipient, recipient_id, DeliveryStatus.FAILED, token.provider, result.error)

        logger.info(
            "Issue %s: %s notification sent to %s %s",
            issue_id, token.provider.value, recipient.value, recipient_id,
        )
        return NotificationReport(recipient, recipient_id, DeliveryStatus.SENT, token.provider)
