"""Tests for domain entities."""

import pytest

from support_desk.domain.entities.agent import Agent
from support_desk.domain.entities.issue import Issue
from support_desk.domain.errors import AgentBusyError
from support_desk.domain.value_objects.enums import AgentStatus, IssueStatus, IssueType


def _agent() -> Agent:
    return Agent(
        id=1, email="agent1@test.com", name="Agent 1",
        expertise=(IssueType.PAYMENT_RELATED, IssueType.GOLD_RELATED),
    )


def _issue() -> Issue:
    return Issue(
        id=1, transaction_id="T1", issue_type=IssueType.PAYMENT_RELATED,
        subject="Payment Failed", description="Money debited",
        customer_email="user@test.com",
    )


def test_agent_starts_free():
    a = _agent()
    assert a.status == AgentStatus.FREE
    assert a.current_issue_id is None
    assert a.work_history == []


def test_agent_can_handle():
    a = _agent()
    assert a.can_handle(IssueType.PAYMENT_RELATED) is True
    assert a.can_handle(IssueType.GOLD_RELATED) is True
    assert a.can_handle(IssueType.MUTUAL_FUND_RELATED) is False


def test_agent_assign_and_free_keep_invariant():
    a = _agent()
    a.assign(7)
    assert a.status == AgentStatus.BUSY
    assert a.current_issue_id == 7

    a.mark_free()
    assert a.status == AgentStatus.FREE
    assert a.current_issue_id is None


def test_agent_assign_when_busy_raises():
    a = _agent()
    a.assign(1)
    with pytest.raises(AgentBusyError):
        a.assign(2)
    assert a.current_issue_id == 1


def test_agent_display_name():
    assert _agent().display_name == "Agent 1 (agent1@test.com)"


def test_issue_defaults():
    i = _issue()
    assert i.status == IssueStatus.OPEN
    assert i.resolution is None
    assert i.assigned_agent_id is None
    assert i.created_at.tzinfo is not None


def test_issue_assign_agent_sets_in_progress():
    i = _issue()
    before = i.updated_at
    i.assign_agent(3)
    assert i.assigned_agent_id == 3
    assert i.status == IssueStatus.IN_PROGRESS
    assert i.updated_at >= before


def test_issue_mutations_refresh_updated_at():
    i = _issue()
    first = i.updated_at
    i.set_status(IssueStatus.WAITING)
    second = i.updated_at
    i.set_resolution("done")
    assert first <= second <= i.updated_at


def test_issue_is_assignable():
    i = _issue()
    assert i.is_assignable() is True
    i.set_status(IssueStatus.WAITING)
    assert i.is_assignable() is True
    i.assign_agent(1)
    assert i.is_assignable() is False
