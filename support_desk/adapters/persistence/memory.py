"""In-memory repository implementations.

State lives for the lifetime of the process only. Dicts preserve insertion
order, which gives ``get_all`` the stable enumeration order round-robin needs.
"""

from __future__ import annotations

from itertools import count

from support_desk.application.ports.agent_repo import AgentRepository
from support_desk.application.ports.issue_repo import IssueRepository
from support_desk.domain.entities.agent import Agent
from support_desk.domain.entities.issue import Issue


class InMemoryAgentRepository(AgentRepository):
    def __init__(self):
        self._by_id: dict[int, Agent] = {}
        self._by_email: dict[str, Agent] = {}
        self._ids = count(1)

    async def save(self, agent: Agent) -> Agent:
        if agent.id is None:
            agent.id = next(self._ids)
        self._by_id[agent.id] = agent
        self._by_email[agent.email] = agent
        return agent

    async def get_by_id(self, agent_id: int) -> Agent | None:
        return self._by_id.get(agent_id)

    async def get_by_email(self, email: str) -> Agent | None:
        return self._by_email.get(email)

    async def get_all(self) -> list[Agent]:
        return list(self._by_id.values())


class InMemoryIssueRepository(IssueRepository):
    def __init__(self):
        self._by_id: dict[int, Issue] = {}
        self._ids = count(1)

    async def save(self, issue: Issue) -> Issue:
        if issue.id is None:
            issue.id = next(self._ids)
        self._by_id[issue.id] = issue
        return issue

    async def get_by_id(self, issue_id: int) -> Issue | None:
        return self._by_id.get(issue_id)

    async def get_all(self) -> list[Issue]:
        return list(self._by_id.values())
