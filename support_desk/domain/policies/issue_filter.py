"""IssueFilter — key/value predicates over issues for listing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from support_desk.domain.entities.issue import Issue
from support_desk.domain.errors import InvalidFilterError
from support_desk.domain.value_objects.enums import (
    IssueStatus,
    IssueType,
    parse_issue_status,
    parse_issue_type,
)

FILTER_KEYS = frozenset({"email", "type", "issue_id", "status"})


@dataclass(frozen=True)
class IssueFilter:
    """Parsed filter. None means 'do not filter on this field'."""

    email: str | None = None
    issue_type: IssueType | None = None
    issue_id: int | None = None
    status: IssueStatus | None = None

    def matches(self, issue: Issue) -> bool:
        if self.email is not None and issue.customer_email.lower() != self.email.lower():
            return False
        if self.issue_type is not None and issue.issue_type != self.issue_type:
            return False
        if self.issue_id is not None and issue.id != self.issue_id:
            return False
        if self.status is not None and issue.status != self.status:
            return False
        return True


def build_filter(raw: Mapping[str, str | None] | None) -> IssueFilter:
    """Parse raw query values into an IssueFilter.

    Blank values are ignored. Unlike intake, an unknown type here is an error:
    silently matching nothing would hide typos from the caller.

    Raises:
        InvalidFilterError: on unknown keys or unparseable values.
    """
    if not raw:
        return IssueFilter()

    unknown = set(raw) - FILTER_KEYS
    if unknown:
        raise InvalidFilterError(f"Unknown filter key(s): {', '.join(sorted(unknown))}")

    values = {k: v.strip() for k, v in raw.items() if v is not None and v.strip()}

    issue_type = None
    if "type" in values:
        try:
            issue_type = parse_issue_type(values["type"])
        except ValueError:
            raise InvalidFilterError(
                f"Invalid issue type provided in filter: {values['type']}"
            ) from None

    status = None
    if "status" in values:
        try:
            status = parse_issue_status(values["status"])
        except ValueError:
            raise InvalidFilterError(
                f"Invalid issue status provided in filter: {values['status']}"
            ) from None

    issue_id = None
    if "issue_id" in values:
        try:
            issue_id = int(values["issue_id"])
        except ValueError:
            raise InvalidFilterError(
                f"Invalid issue id provided in filter: {values['issue_id']}"
            ) from None

    return IssueFilter(
        email=values.get("email"),
        issue_type=issue_type,
        issue_id=issue_id,
        status=status,
    )


def apply_filter(issues: Iterable[Issue], issue_filter: IssueFilter) -> list[Issue]:
    return [i for i in issues if issue_filter.matches(i)]
