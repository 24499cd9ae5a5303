"""Issue entity — a customer complaint against a transaction."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from support_desk.domain.value_objects.enums import IssueStatus, IssueType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Issue:
    id: int | None
    transaction_id: str
    issue_type: IssueType
    subject: str
    description: str
    customer_email: str
    status: IssueStatus = IssueStatus.OPEN
    resolution: str | None = None
    assigned_agent_id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def set_status(self, status: IssueStatus) -> None:
        self.status = status
        self.touch()

    def set_resolution(self, resolution: str) -> None:
        self.resolution = resolution
        self.touch()

    def assign_agent(self, agent_id: int) -> None:
        """Attach an agent and move to IN_PROGRESS in one step."""
        self.assigned_agent_id = agent_id
        self.status = IssueStatus.IN_PROGRESS
        self.touch()

    def is_assignable(self) -> bool:
        return self.status in (IssueStatus.OPEN, IssueStatus.WAITING)
