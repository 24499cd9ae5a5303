"""Health check endpoint."""

from fastapi import APIRouter, Depends

from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.config import settings
from support_desk.infrastructure.api.dependencies import get_dispatcher

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(dispatcher: IssueDispatchService = Depends(get_dispatcher)):
    """Report liveness plus queue depth."""
    waiting = await dispatcher.waiting_snapshot()
    return {
        "status": "ok",
        "waiting_issues": sum(len(ids) for ids in waiting.values()),
        "service": settings.app_title,
    }
