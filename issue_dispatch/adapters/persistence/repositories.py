"""SQLAlchemy repository implementations."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from issue_dispatch.adapters.persistence.models import CitizenModel, IssueModel, WorkerModel
from issue_dispatch.application.ports.assignment_store import AssignmentStore, ClaimOutcome
from issue_dispatch.application.ports.citizen_repo import CitizenRepository
from issue_dispatch.application.ports.issue_repo import IssueRepository
from issue_dispatch.application.ports.worker_repo import WorkerRepository
from issue_dispatch.domain.entities.citizen import Citizen
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.entities.worker import Worker
from issue_dispatch.domain.value_objects.enums import (
    DutyStatus,
    IssueStatus,
    PushProvider,
)
from issue_dispatch.domain.value_objects.geo_point import GeoPoint
from issue_dispatch.domain.value_objects.push_token import PushToken

# ─── Mappers ─────────────────────────────────────────────────────────


def _push_token(fcm_token: str | None, expo_push_token: str | None) -> PushToken | None:
    """Pick the populated token field; FCM wins when both are set."""
    if fcm_token:
        return PushToken(provider=PushProvider.FCM, value=fcm_token)
    if expo_push_token:
        return PushToken(provider=PushProvider.EXPO, value=expo_push_token)
    return None


def _token_columns(token: PushToken | None) -> dict[str, str | None]:
    return {
        "fcm_token": token.value if token and token.provider == PushProvider.FCM else None,
        "expo_push_token": token.value if token and token.provider == PushProvider.EXPO else None,
    }


def _point(lat: float | None, lng: float | None) -> GeoPoint | None:
    if lat is None or lng is None:
        return None
    return GeoPoint(latitude=lat, longitude=lng)


def _issue_to_domain(m: IssueModel) -> Issue:
    return Issue(
        id=m.id,
        category=m.category,
        location=_point(m.latitude, m.longitude),
        reporter_id=m.reporter_id,
        status=IssueStatus(m.status),
        assigned_to=m.assigned_to,
        assigned_at=m.assigned_at,
        created_at=m.created_at,
    )


def _worker_to_domain(m: WorkerModel) -> Worker:
    return Worker(
        id=m.id,
        department=m.department,
        duty_status=DutyStatus(m.duty_status),
        live_location=_point(m.live_lat, m.live_lng),
        current_assignment=m.current_assignment,
        push_token=_push_token(m.fcm_token, m.expo_push_token),
        email=m.email,
        updated_at=m.updated_at,
    )


def _citizen_to_domain(m: CitizenModel) -> Citizen:
    return Citizen(
        id=m.id,
        name=m.name,
        email=m.email,
        push_token=_push_token(m.fcm_token, m.expo_push_token),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlIssueRepository(IssueRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, issue: Issue) -> Issue:
        m = IssueModel(
            id=issue.id,
            category=issue.category,
            latitude=issue.location.latitude if issue.location else None,
            longitude=issue.location.longitude if issue.location else None,
            reporter_id=issue.reporter_id,
            status=issue.status.value,
            assigned_to=issue.assigned_to,
            assigned_at=issue.assigned_at,
        )
        if issue.created_at is not None:
            m.created_at = issue.created_at
        await self._s.merge(m)
        await self._s.flush()
        return issue

    async def get_by_id(self, issue_id: str) -> Issue | None:
        m = await self._s.get(IssueModel, issue_id)
        return _issue_to_domain(m) if m else None


class SqlWorkerRepository(WorkerRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, worker: Worker) -> Worker:
        m = WorkerModel(
            id=worker.id,
            email=worker.email,
            department=worker.department,
            duty_status=worker.duty_status.value,
            live_lat=worker.live_location.latitude if worker.live_location else None,
            live_lng=worker.live_location.longitude if worker.live_location else None,
            current_assignment=worker.current_assignment,
            **_token_columns(worker.push_token),
        )
        await self._s.merge(m)
        await self._s.flush()
        return worker

    async def get_by_id(self, worker_id: str) -> Worker | None:
        m = await self._s.get(WorkerModel, worker_id)
        return _worker_to_domain(m) if m else None

    async def get_on_duty_by_department(self, department: str) -> list[Worker]:
        result = await self._s.execute(
            select(WorkerModel)
            .where(
                WorkerModel.department == department,
                WorkerModel.duty_status == DutyStatus.ON_DUTY.value,
            )
            .order_by(WorkerModel.id)
        )
        return [_worker_to_domain(m) for m in result.scalars()]


class SqlCitizenRepository(CitizenRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, citizen: Citizen) -> Citizen:
        m = CitizenModel(
            id=citizen.id,
            name=citizen.name,
            email=citizen.email,
            **_token_columns(citizen.push_token),
        )
        await self._s.merge(m)
        await self._s.flush()
        return citizen

    async def get_by_id(self, citizen_id: str) -> Citizen | None:
        m = await self._s.get(CitizenModel, citizen_id)
        return _citizen_to_domain(m) if m else None


class SqlAssignmentStore(AssignmentStore):
    """Claims run in their own short transaction, one per attempt.

    Both rows are locked with SELECT ... FOR UPDATE (issue first, then
    worker, so concurrent claims acquire locks in the same order). A waiting
    transaction re-reads the committed row once the lock is released and
    sees the winner's busy marker.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def claim(self, issue_id: str, worker_id: str, at: datetime) -> ClaimOutcome:
        async with self._session_factory() as session, session.begin():
            issue = (
                await session.execute(
                    select(IssueModel).where(IssueModel.id == issue_id).with_for_update()
                )
            ).scalar_one_or_none()
            if issue is None:
                return ClaimOutcome.ISSUE_NOT_FOUND
            if issue.assigned_to is not None or issue.status == IssueStatus.ASSIGNED.value:
                return ClaimOutcome.ISSUE_ALREADY_ASSIGNED

            worker = (
                await session.execute(
                    select(WorkerModel).where(WorkerModel.id == worker_id).with_for_update()
                )
            ).scalar_one_or_none()
            if worker is None:
                return ClaimOutcome.WORKER_NOT_FOUND
            if worker.current_assignment is not None or worker.duty_status != DutyStatus.ON_DUTY.value:
                return ClaimOutcome.WORKER_BUSY

            worker.current_assignment = issue_id
            worker.duty_status = DutyStatus.ASSIGNED.value
            worker.updated_at = at
            issue.assigned_to = worker_id
            issue.status = IssueStatus.ASSIGNED.value
            issue.assigned_at = at
            # session.begin() commits all four writes on exit
        return ClaimOutcome.CLAIMED
