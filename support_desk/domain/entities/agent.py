"""Agent entity — a support employee who works one issue at a time."""

from dataclasses import dataclass, field

from support_desk.domain.errors import AgentBusyError
from support_desk.domain.value_objects.enums import AgentStatus, IssueType


@dataclass
class Agent:
    id: int | None
    email: str
    name: str
    expertise: tuple[IssueType, ...]
    status: AgentStatus = AgentStatus.FREE
    current_issue_id: int | None = None
    work_history: list[int] = field(default_factory=list)

    def can_handle(self, issue_type: IssueType) -> bool:
        return issue_type in self.expertise

    def is_free(self) -> bool:
        return self.status == AgentStatus.FREE

    def assign(self, issue_id: int) -> None:
        if not self.is_free():
            raise AgentBusyError(
                f"Agent {self.id} is already working on issue {self.current_issue_id}"
            )
        self.current_issue_id = issue_id
        self.status = AgentStatus.BUSY

    def mark_free(self) -> None:
        self.current_issue_id = None
        self.status = AgentStatus.FREE

    def record_resolved(self, issue_id: int) -> None:
        self.work_history.append(issue_id)

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.email})"
