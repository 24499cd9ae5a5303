"""Agent endpoints — onboarding, lookup, work history."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.domain.entities.agent import Agent
from support_desk.domain.errors import SupportDeskError
from support_desk.infrastructure.api.dependencies import get_dispatcher, http_error

router = APIRouter(prefix="/agents", tags=["agents"])


class AgentCreate(BaseModel):
    email: str
    name: str
    expertise: list[str] = Field(default_factory=list)


@router.post("", status_code=201)
async def add_agent(
    req: AgentCreate,
    dispatcher: IssueDispatchService = Depends(get_dispatcher),
):
    try:
        agent = await dispatcher.add_agent(req.email, req.name, req.expertise)
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_agent(agent)


@router.get("")
async def list_agents(dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    agents = await dispatcher.list_agents()
    return {"total": len(agents), "agents": [serialize_agent(a) for a in agents]}


@router.get("/history")
async def work_history(dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    """Resolved issue ids per agent."""
    return await dispatcher.view_agents_work_history()


@router.get("/{agent_id}")
async def get_agent(agent_id: int, dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    try:
        agent = await dispatcher.get_agent(agent_id)
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_agent(agent)


def serialize_agent(a: Agent) -> dict:
    return {
        "id": a.id,
        "email": a.email,
        "name": a.name,
        "expertise": [t.value for t in a.expertise],
        "status": a.status.value,
        "current_issue_id": a.current_issue_id,
        "work_history": list(a.work_history),
    }
