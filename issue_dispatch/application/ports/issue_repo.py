"""Port interface for issue persistence."""

from abc import ABC, abstractmethod

from issue_dispatch.domain.entities.issue import Issue


class IssueRepository(ABC):
    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        ...

    @abstractmethod
    async def get_by_id(self, issue_id: str) -> Issue | None:
        ...
