"""Port interface for issue persistence."""

from abc import ABC, abstractmethod

from support_desk.domain.entities.issue import Issue


class IssueRepository(ABC):
    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """Insert or overwrite by id. Allocates the next sequential id when issue.id is None."""
        ...

    @abstractmethod
    async def get_by_id(self, issue_id: int) -> Issue | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Issue]:
        ...
