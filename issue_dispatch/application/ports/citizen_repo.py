"""Port interface for citizen persistence."""

from abc import ABC, abstractmethod

from issue_dispatch.domain.entities.citizen import Citizen


class CitizenRepository(ABC):
    @abstractmethod
    async def save(self, citizen: Citizen) -> Citizen:
        ...

    @abstractmethod
    async def get_by_id(self, citizen_id: str) -> Citizen | None:
        ...
