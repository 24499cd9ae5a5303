"""Issue endpoints — intake, assignment, lifecycle, listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.domain.entities.issue import Issue
from support_desk.domain.errors import SupportDeskError
from support_desk.domain.value_objects.enums import parse_issue_status
from support_desk.infrastructure.api.dependencies import get_dispatcher, http_error
from support_desk.infrastructure.api.routes_agents import serialize_agent

router = APIRouter(prefix="/issues", tags=["issues"])


# ── Request schemas ─────────────────────────────────────────────────

class IssueCreate(BaseModel):
    transaction_id: str
    issue_type: str
    subject: str
    description: str
    email: str


class IssueResolve(BaseModel):
    resolution: str


class IssueUpdate(BaseModel):
    status: str | None = None
    resolution: str | None = None


# ── Routes ──────────────────────────────────────────────────────────

@router.post("", status_code=201)
async def create_issue(
    req: IssueCreate,
    dispatcher: IssueDispatchService = Depends(get_dispatcher),
):
    try:
        issue = await dispatcher.create_issue(
            req.transaction_id, req.issue_type, req.subject, req.description, req.email,
        )
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_issue(issue)


@router.get("")
async def list_issues(
    email: str | None = None,
    type: str | None = None,
    issue_id: str | None = None,
    status: str | None = None,
    dispatcher: IssueDispatchService = Depends(get_dispatcher),
):
    """List issues, optionally filtered. Unknown type/status values are rejected."""
    filters = {"email": email, "type": type, "issue_id": issue_id, "status": status}
    try:
        issues = await dispatcher.get_issues({k: v for k, v in filters.items() if v is not None})
    except SupportDeskError as e:
        raise http_error(e) from e
    return {"total": len(issues), "issues": [serialize_issue(i) for i in issues]}


@router.get("/waiting")
async def waiting_queues(dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    """Waiting issue ids per category, oldest first."""
    return await dispatcher.waiting_snapshot()


@router.get("/{issue_id}")
async def get_issue(issue_id: int, dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    try:
        issue = await dispatcher.get_issue(issue_id)
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_issue(issue)


@router.post("/{issue_id}/assign")
async def assign_issue(issue_id: int, dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    try:
        agent = await dispatcher.assign_issue(issue_id)
        issue = await dispatcher.get_issue(issue_id)
    except SupportDeskError as e:
        raise http_error(e) from e
    return {
        "issue": serialize_issue(issue),
        "agent": serialize_agent(agent) if agent else None,
    }


@router.post("/{issue_id}/resolve")
async def resolve_issue(
    issue_id: int,
    req: IssueResolve,
    dispatcher: IssueDispatchService = Depends(get_dispatcher),
):
    try:
        picked_up = await dispatcher.resolve_issue(issue_id, req.resolution)
        issue = await dispatcher.get_issue(issue_id)
    except SupportDeskError as e:
        raise http_error(e) from e
    return {
        "issue": serialize_issue(issue),
        "picked_up": serialize_issue(picked_up) if picked_up else None,
    }


@router.patch("/{issue_id}")
async def update_issue(
    issue_id: int,
    req: IssueUpdate,
    dispatcher: IssueDispatchService = Depends(get_dispatcher),
):
    status = None
    if req.status:
        try:
            status = parse_issue_status(req.status)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
    try:
        issue = await dispatcher.update_issue(issue_id, status=status, resolution=req.resolution)
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_issue(issue)


@router.post("/{issue_id}/close")
async def close_issue(issue_id: int, dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    try:
        issue = await dispatcher.close_issue(issue_id)
    except SupportDeskError as e:
        raise http_error(e) from e
    return serialize_issue(issue)


def serialize_issue(i: Issue) -> dict:
    return {
        "id": i.id,
        "transaction_id": i.transaction_id,
        "issue_type": i.issue_type.value,
        "subject": i.subject,
        "description": i.description,
        "email": i.customer_email,
        "status": i.status.value,
        "resolution": i.resolution,
        "assigned_agent_id": i.assigned_agent_id,
        "created_at": i.created_at.isoformat(),
        "updated_at": i.updated_at.isoformat(),
    }
