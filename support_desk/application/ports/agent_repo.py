"""Port interface for agent persistence."""

from abc import ABC, abstractmethod

from support_desk.domain.entities.agent import Agent


class AgentRepository(ABC):
    @abstractmethod
    async def save(self, agent: Agent) -> Agent:
        """Insert or overwrite by id. Allocates the next sequential id when agent.id is None."""
        ...

    @abstractmethod
    async def get_by_id(self, agent_id: int) -> Agent | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Agent | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Agent]:
        """All agents in a stable enumeration order (used for round-robin)."""
        ...
