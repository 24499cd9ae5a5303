"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from support_desk.adapters.persistence.memory import (
    InMemoryAgentRepository,
    InMemoryIssueRepository,
)
from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.infrastructure.api.dependencies import get_dispatcher
from support_desk.main import create_app


@pytest.fixture
def client():
    app = create_app()
    fresh = IssueDispatchService(
        agent_repo=InMemoryAgentRepository(),
        issue_repo=InMemoryIssueRepository(),
    )
    app.dependency_overrides[get_dispatcher] = lambda: fresh
    with TestClient(app) as c:
        yield c


def _create_issue(client, issue_type="PAYMENT_RELATED", email="testUser1@test.com"):
    resp = client.post("/api/issues", json={
        "transaction_id": "T1",
        "issue_type": issue_type,
        "subject": "Payment Failed",
        "description": "My payment failed but money is debited",
        "email": email,
    })
    assert resp.status_code == 201
    return resp.json()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["waiting_issues"] == 0


def test_add_and_get_agent(client):
    resp = client.post("/api/agents", json={
        "email": "agent1@test.com", "name": "Agent 1", "expertise": ["payment related"],
    })
    assert resp.status_code == 201
    agent = resp.json()
    assert agent["expertise"] == ["PAYMENT_RELATED"]
    assert agent["status"] == "FREE"

    assert client.get(f"/api/agents/{agent['id']}").json()["email"] == "agent1@test.com"
    assert client.get("/api/agents").json()["total"] == 1


def test_add_agent_validation_error(client):
    resp = client.post("/api/agents", json={"email": "a@test.com", "name": "A", "expertise": []})
    assert resp.status_code == 422


def test_unknown_agent_404(client):
    assert client.get("/api/agents/99").status_code == 404


def test_issue_lifecycle(client):
    client.post("/api/agents", json={
        "email": "agent1@test.com", "name": "Agent 1", "expertise": ["PAYMENT_RELATED"],
    })
    first = _create_issue(client)
    second = _create_issue(client)
    assert first["status"] == "OPEN"

    assigned = client.post(f"/api/issues/{first['id']}/assign").json()
    assert assigned["agent"]["name"] == "Agent 1"
    assert assigned["issue"]["status"] == "IN_PROGRESS"

    waiting = client.post(f"/api/issues/{second['id']}/assign").json()
    assert waiting["agent"] is None
    assert client.get("/api/issues/waiting").json() == {"PAYMENT_RELATED": [second["id"]]}

    resolved = client.post(
        f"/api/issues/{first['id']}/resolve", json={"resolution": "Payment reversed."},
    ).json()
    assert resolved["issue"]["status"] == "RESOLVED"
    assert resolved["picked_up"]["id"] == second["id"]

    closed = client.post(f"/api/issues/{first['id']}/close")
    assert closed.status_code == 200
    assert closed.json()["status"] == "CLOSED"

    history = client.get("/api/agents/history").json()
    assert history == {"Agent 1 (agent1@test.com)": [first["id"]]}


def test_resolve_open_issue_conflict(client):
    issue = _create_issue(client)
    resp = client.post(f"/api/issues/{issue['id']}/resolve", json={"resolution": "done"})
    assert resp.status_code == 409


def test_update_issue(client):
    issue = _create_issue(client)
    resp = client.patch(f"/api/issues/{issue['id']}", json={"resolution": "Called the bank"})
    assert resp.status_code == 200
    assert resp.json()["resolution"] == "Called the bank"

    resp = client.patch(f"/api/issues/{issue['id']}", json={"status": "RESOLVED"})
    assert resp.status_code == 409

    resp = client.patch(f"/api/issues/{issue['id']}", json={"status": "bogus"})
    assert resp.status_code == 422


def test_list_issues_with_filters(client):
    _create_issue(client, "PAYMENT_RELATED", "testUser1@test.com")
    _create_issue(client, "MUTUAL_FUND_RELATED", "testUser2@test.com")

    body = client.get("/api/issues", params={"type": "MUTUAL_FUND_RELATED"}).json()
    assert body["total"] == 1
    assert body["issues"][0]["email"] == "testUser2@test.com"

    assert client.get("/api/issues", params={"status": "pending"}).status_code == 400


def test_unknown_issue_404(client):
    assert client.get("/api/issues/42").status_code == 404
    assert client.post("/api/issues/42/assign").status_code == 404
