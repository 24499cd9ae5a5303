"""Pytest configuration and shared fixtures."""

import pytest

from support_desk.adapters.persistence.memory import (
    InMemoryAgentRepository,
    InMemoryIssueRepository,
)
from support_desk.application.use_cases.dispatch_issue import IssueDispatchService


@pytest.fixture
def agent_repo():
    return InMemoryAgentRepository()


@pytest.fixture
def issue_repo():
    return InMemoryIssueRepository()


@pytest.fixture
def dispatcher(agent_repo, issue_repo):
    return IssueDispatchService(agent_repo=agent_repo, issue_repo=issue_repo)
