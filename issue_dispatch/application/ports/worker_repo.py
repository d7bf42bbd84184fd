"""Port interface for field worker persistence."""

from abc import ABC, abstractmethod

from issue_dispatch.domain.entities.worker import Worker


class WorkerRepository(ABC):
    @abstractmethod
    async def save(self, worker: Worker) -> Worker:
        ...

    @abstractmethod
    async def get_by_id(self, worker_id: str) -> Worker | None:
        ...

    @abstractmethod
    async def get_on_duty_by_department(self, department: str) -> list[Worker]:
        """Return workers of *department* whose duty status is On Duty."""
        ...
