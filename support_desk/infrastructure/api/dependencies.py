"""FastAPI dependency injection — wires adapters into the dispatcher."""

from __future__ import annotations

from fastapi import HTTPException

from support_desk.adapters.persistence.memory import (
    InMemoryAgentRepository,
    InMemoryIssueRepository,
)
from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.domain.errors import (
    InvalidFilterError,
    InvalidTransitionError,
    NotFoundError,
    SupportDeskError,
    ValidationError,
)

# Singleton: the in-memory store and waiting queues live for the process lifetime
_dispatcher = IssueDispatchService(
    agent_repo=InMemoryAgentRepository(),
    issue_repo=InMemoryIssueRepository(),
)


def get_dispatcher() -> IssueDispatchService:
    return _dispatcher


def http_error(exc: SupportDeskError) -> HTTPException:
    """Map a domain error to the matching HTTP status."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidTransitionError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, InvalidFilterError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))
