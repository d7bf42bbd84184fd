"""In-memory fakes for the application ports."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime

from issue_dispatch.application.ports.assignment_store import AssignmentStore, ClaimOutcome
from issue_dispatch.application.ports.citizen_repo import CitizenRepository
from issue_dispatch.application.ports.issue_repo import IssueRepository
from issue_dispatch.application.ports.notifier_port import DeliveryResult, Notifier, PushMessage
from issue_dispatch.application.ports.worker_repo import WorkerRepository
from issue_dispatch.domain.entities.citizen import Citizen
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.entities.worker import Worker
from issue_dispatch.domain.value_objects.enums import DutyStatus, IssueStatus, PushProvider


class InMemoryDocuments:
    """Shared document state; reads hand out copies like a real store."""

    def __init__(self, issues=(), workers=(), citizens=()):
        self.issues: dict[str, Issue] = {i.id: i for i in issues}
        self.workers: dict[str, Worker] = {w.id: w for w in workers}
        self.citizens: dict[str, Citizen] = {c.id: c for c in citizens}
        self.lock = asyncio.Lock()
        self.claims: list[tuple[str, str]] = []


class FakeIssueRepo(IssueRepository):
    def __init__(self, docs: InMemoryDocuments):
        self._docs = docs

    async def save(self, issue):
        self._docs.issues[issue.id] = replace(issue)
        return issue

    async def get_by_id(self, issue_id):
        issue = self._docs.issues.get(issue_id)
        return replace(issue) if issue else None


class FakeWorkerRepo(WorkerRepository):
    def __init__(self, docs: InMemoryDocuments):
        self._docs = docs
        self.queries: list[str] = []

    async def save(self, worker):
        self._docs.workers[worker.id] = replace(worker)
        return worker

    async def get_by_id(self, worker_id):
        worker = self._docs.workers.get(worker_id)
        return replace(worker) if worker else None

    async def get_on_duty_by_department(self, department):
        self.queries.append(department)
        # yield so concurrent dispatches interleave their reads
        await asyncio.sleep(0)
        return [
            replace(w) for w in self._docs.workers.values()
            if w.department == department and w.duty_status == DutyStatus.ON_DUTY
        ]


class FakeCitizenRepo(CitizenRepository):
    def __init__(self, docs: InMemoryDocuments, fail: bool = False):
        self._docs = docs
        self._fail = fail

    async def save(self, citizen):
        self._docs.citizens[citizen.id] = replace(citizen)
        return citizen

    async def get_by_id(self, citizen_id):
        if self._fail:
            raise ConnectionError("citizen store unreachable")
        citizen = self._docs.citizens.get(citizen_id)
        return replace(citizen) if citizen else None


class FakeAssignmentStore(AssignmentStore):
    """First committer wins: claims serialize on a single lock."""

    def __init__(self, docs: InMemoryDocuments):
        self._docs = docs
        self.attempts: list[tuple[str, str]] = []

    async def claim(self, issue_id, worker_id, at: datetime):
        self.attempts.append((issue_id, worker_id))
        async with self._docs.lock:
            issue = self._docs.issues.get(issue_id)
            if issue is None:
                return ClaimOutcome.ISSUE_NOT_FOUND
            if issue.is_assigned():
                return ClaimOutcome.ISSUE_ALREADY_ASSIGNED
            worker = self._docs.workers.get(worker_id)
            if worker is None:
                return ClaimOutcome.WORKER_NOT_FOUND
            if worker.is_busy() or not worker.is_on_duty():
                return ClaimOutcome.WORKER_BUSY

            await asyncio.sleep(0)
            worker.current_assignment = issue_id
            worker.duty_status = DutyStatus.ASSIGNED
            worker.updated_at = at
            issue.assigned_to = worker_id
            issue.status = IssueStatus.ASSIGNED
            issue.assigned_at = at
            self._docs.claims.append((issue_id, worker_id))
            return ClaimOutcome.CLAIMED


class BrokenAssignmentStore(AssignmentStore):
    async def claim(self, issue_id, worker_id, at):
        raise ConnectionError("store unreachable")


class FakeNotifier(Notifier):
    def __init__(self, provider: PushProvider = PushProvider.FCM, fail: bool = False, explode: bool = False):
        self._provider = provider
        self._fail = fail
        self._explode = explode
        self.sent: list[tuple[str, PushMessage]] = []

    @property
    def provider(self):
        return self._provider

    async def send(self, token, message):
        if self._explode:
            raise RuntimeError("transport crashed")
        self.sent.append((token, message))
        if self._fail:
            return DeliveryResult(self._provider, delivered=False, error="UNAVAILABLE")
        return DeliveryResult(self._provider, delivered=True)
