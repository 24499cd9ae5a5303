"""Tests for AgentRegistry."""

import pytest

from support_desk.adapters.persistence.memory import InMemoryAgentRepository
from support_desk.application.use_cases.agent_registry import AgentRegistry
from support_desk.domain.errors import AgentNotFoundError, ValidationError
from support_desk.domain.value_objects.enums import IssueType


@pytest.mark.asyncio
async def test_add_agent_parses_expertise_in_order():
    registry = AgentRegistry(InMemoryAgentRepository())
    agent = await registry.add_agent(
        "agent1@test.com", "Agent 1", ["gold related", IssueType.PAYMENT_RELATED, "GOLD_RELATED"],
    )
    assert agent.id == 1
    assert agent.expertise == (IssueType.GOLD_RELATED, IssueType.PAYMENT_RELATED)


@pytest.mark.asyncio
async def test_add_agent_existing_email_returns_existing():
    registry = AgentRegistry(InMemoryAgentRepository())
    first = await registry.add_agent("agent1@test.com", "Agent 1", [IssueType.PAYMENT_RELATED])
    again = await registry.add_agent("agent1@test.com", "Someone Else", [IssueType.OTHER])
    assert again is first
    assert len(await registry.list_agents()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, name, expertise",
    [
        ("", "Agent", [IssueType.OTHER]),
        ("a@test.com", "  ", [IssueType.OTHER]),
        ("a@test.com", "Agent", []),
        ("a@test.com", "Agent", ["crypto"]),
    ],
)
async def test_add_agent_rejects_bad_input(email, name, expertise):
    registry = AgentRegistry(InMemoryAgentRepository())
    with pytest.raises(ValidationError):
        await registry.add_agent(email, name, expertise)
    assert await registry.list_agents() == []


@pytest.mark.asyncio
async def test_lookup_missing_agent_raises():
    registry = AgentRegistry(InMemoryAgentRepository())
    with pytest.raises(AgentNotFoundError):
        await registry.get_by_id(1)
    with pytest.raises(AgentNotFoundError):
        await registry.get_by_email("nobody@test.com")
