"""Issue lifecycle rules.

    OPEN ──┐
           ├── assignment ──► IN_PROGRESS ── resolve ──► RESOLVED ── close ──► CLOSED
    WAITING┘

RESOLVED and CLOSED are terminal for every operation except close. All checks
here are pure: they raise before the caller mutates anything.
"""

from __future__ import annotations

from support_desk.domain.entities.issue import Issue
from support_desk.domain.errors import InvalidTransitionError, ValidationError
from support_desk.domain.value_objects.enums import IssueStatus


def check_resolvable(issue: Issue, resolution: str | None) -> bool:
    """Decide whether *issue* may be resolved now.

    Returns:
        True if the resolution should be applied, False if the issue is
        already RESOLVED/CLOSED (idempotent no-op).

    Raises:
        InvalidTransitionError: if the issue is not IN_PROGRESS.
        ValidationError: if *resolution* is blank.
    """
    if issue.status.is_terminal:
        return False

    if issue.status != IssueStatus.IN_PROGRESS:
        raise InvalidTransitionError(
            f"Issue {issue.id} must be IN_PROGRESS to be RESOLVED. "
            f"Current status: {issue.status.value}"
        )

    if resolution is None or not resolution.strip():
        raise ValidationError("Resolution details must be provided to resolve an issue.")

    return True


def check_update(issue: Issue, status: IssueStatus | None) -> None:
    """Validate a generic status edit.

    Raises:
        InvalidTransitionError: when targeting RESOLVED/CLOSED, when the issue
            is already terminal, or when forcing IN_PROGRESS without an agent.
    """
    if status is not None and status.is_terminal:
        raise InvalidTransitionError(
            "Use resolve_issue() for final resolution. "
            "Cannot directly update to RESOLVED/CLOSED."
        )

    if issue.status.is_terminal:
        raise InvalidTransitionError(
            f"Cannot update issue {issue.id}: it is already {issue.status.value}."
        )

    if (
        status == IssueStatus.IN_PROGRESS
        and issue.status != IssueStatus.IN_PROGRESS
        and issue.assigned_agent_id is None
    ):
        raise InvalidTransitionError(
            f"Issue {issue.id} cannot be IN_PROGRESS without being assigned to an agent."
        )


def check_closable(issue: Issue) -> bool:
    """Decide whether *issue* may be closed now.

    Returns:
        True if the issue should move RESOLVED -> CLOSED, False if it is
        already CLOSED (no-op).

    Raises:
        InvalidTransitionError: if the issue has not been resolved yet.
    """
    if issue.status == IssueStatus.CLOSED:
        return False
    if issue.status != IssueStatus.RESOLVED:
        raise InvalidTransitionError(
            f"Issue {issue.id} must be RESOLVED to be CLOSED. "
            f"Current status: {issue.status.value}"
        )
    return True
