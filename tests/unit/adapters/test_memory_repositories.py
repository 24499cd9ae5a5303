"""Tests for the in-memory repositories."""

import pytest

from support_desk.adapters.persistence.memory import (
    InMemoryAgentRepository,
    InMemoryIssueRepository,
)
from support_desk.domain.entities.agent import Agent
from support_desk.domain.entities.issue import Issue
from support_desk.domain.value_objects.enums import IssueType


def _agent(email: str) -> Agent:
    return Agent(id=None, email=email, name=email.split("@")[0], expertise=(IssueType.OTHER,))


def _issue(txn: str) -> Issue:
    return Issue(
        id=None, transaction_id=txn, issue_type=IssueType.OTHER,
        subject="s", description="d", customer_email="u@test.com",
    )


@pytest.mark.asyncio
async def test_agent_save_allocates_sequential_ids():
    repo = InMemoryAgentRepository()
    a1 = await repo.save(_agent("a1@test.com"))
    a2 = await repo.save(_agent("a2@test.com"))
    assert (a1.id, a2.id) == (1, 2)


@pytest.mark.asyncio
async def test_agent_lookup_by_id_and_email():
    repo = InMemoryAgentRepository()
    a = await repo.save(_agent("a1@test.com"))
    assert await repo.get_by_id(a.id) is a
    assert await repo.get_by_email("a1@test.com") is a
    assert await repo.get_by_id(42) is None
    assert await repo.get_by_email("nobody@test.com") is None


@pytest.mark.asyncio
async def test_agent_save_overwrites_by_id_and_keeps_order():
    repo = InMemoryAgentRepository()
    a1 = await repo.save(_agent("a1@test.com"))
    a2 = await repo.save(_agent("a2@test.com"))
    await repo.save(a1)
    assert [a.id for a in await repo.get_all()] == [a1.id, a2.id]


@pytest.mark.asyncio
async def test_issue_ids_strictly_increasing():
    repo = InMemoryIssueRepository()
    ids = [(await repo.save(_issue(f"T{n}"))).id for n in range(5)]
    assert ids == sorted(set(ids))
    assert ids == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_issue_get_all_and_missing():
    repo = InMemoryIssueRepository()
    i = await repo.save(_issue("T1"))
    assert await repo.get_all() == [i]
    assert await repo.get_by_id(99) is None
