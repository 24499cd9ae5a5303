"""AgentRegistry — onboard and look up support agents."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from support_desk.application.ports.agent_repo import AgentRepository
from support_desk.domain.entities.agent import Agent
from support_desk.domain.errors import AgentNotFoundError, ValidationError
from support_desk.domain.value_objects.enums import IssueType, parse_issue_type

logger = logging.getLogger(__name__)


def _parse_expertise(expertise: Iterable[IssueType | str] | None) -> tuple[IssueType, ...]:
    """Normalize expertise to an ordered tuple without duplicates."""
    parsed: list[IssueType] = []
    for item in expertise or ():
        if isinstance(item, IssueType):
            issue_type = item
        else:
            try:
                issue_type = parse_issue_type(item)
            except ValueError as e:
                raise ValidationError(str(e)) from None
        if issue_type not in parsed:
            parsed.append(issue_type)
    return tuple(parsed)


class AgentRegistry:
    """Creates agents and resolves them by id or email."""

    def __init__(self, agent_repo: AgentRepository):
        self._agents = agent_repo

    async def add_agent(
        self, email: str, name: str, expertise: Iterable[IssueType | str]
    ) -> Agent:
        """Register an agent, or return the existing one for a known email.

        Raises:
            ValidationError: on blank email/name, empty or unknown expertise.
        """
        if not email or not email.strip() or not name or not name.strip():
            raise ValidationError("Agent email and name cannot be empty.")

        types = _parse_expertise(expertise)
        if not types:
            raise ValidationError("Agent expertise cannot be empty.")

        email = email.strip()
        existing = await self._agents.get_by_email(email)
        if existing is not None:
            logger.info("Agent with email %s already exists, returning agent %s", email, existing.id)
            return existing

        agent = await self._agents.save(
            Agent(id=None, email=email, name=name.strip(), expertise=types)
        )
        logger.info(
            "Agent %s created: %s, expertise=%s",
            agent.id, agent.display_name, [t.value for t in types],
        )
        return agent

    async def get_by_email(self, email: str) -> Agent:
        agent = await self._agents.get_by_email(email)
        if agent is None:
            raise AgentNotFoundError(f"Agent with email '{email}' not found.")
        return agent

    async def get_by_id(self, agent_id: int) -> Agent:
        agent = await self._agents.get_by_id(agent_id)
        if agent is None:
            raise AgentNotFoundError(f"Agent with ID '{agent_id}' not found.")
        return agent

    async def list_agents(self) -> list[Agent]:
        return await self._agents.get_all()
