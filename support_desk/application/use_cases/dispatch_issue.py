"""IssueDispatchService — the single entry point for issue lifecycle changes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from support_desk.application.ports.agent_repo import AgentRepository
from support_desk.application.ports.issue_repo import IssueRepository
from support_desk.application.use_cases.agent_registry import AgentRegistry
from support_desk.domain.entities.agent import Agent
from support_desk.domain.entities.issue import Issue
from support_desk.domain.errors import (
    AgentNotFoundError,
    IssueNotFoundError,
    ValidationError,
)
from support_desk.domain.policies.issue_filter import apply_filter, build_filter
from support_desk.domain.policies.status_transitions import (
    check_closable,
    check_resolvable,
    check_update,
)
from support_desk.domain.services.assignment_engine import AssignmentEngine
from support_desk.domain.value_objects.enums import IssueStatus, IssueType, resolve_issue_type

logger = logging.getLogger(__name__)


class IssueDispatchService:
    """Serializes every state change across agents, issues and waiting queues.

    One asyncio.Lock guards all public methods. Nothing inside the critical
    section waits on external I/O, so calls run one at a time in arrival
    order and always run to completion once started.
    """

    def __init__(
        self,
        agent_repo: AgentRepository,
        issue_repo: IssueRepository,
        engine: AssignmentEngine | None = None,
    ):
        self._agents = agent_repo
        self._issues = issue_repo
        self._registry = AgentRegistry(agent_repo)
        self._engine = engine if engine is not None else AssignmentEngine()
        self._lock = asyncio.Lock()

    # ─── Agents ──────────────────────────────────────────────────────

    async def add_agent(
        self, email: str, name: str, expertise: Iterable[IssueType | str]
    ) -> Agent:
        async with self._lock:
            return await self._registry.add_agent(email, name, expertise)

    async def get_agent(self, agent_id: int) -> Agent:
        async with self._lock:
            return await self._registry.get_by_id(agent_id)

    async def list_agents(self) -> list[Agent]:
        async with self._lock:
            return await self._registry.list_agents()

    async def view_agents_work_history(self) -> dict[str, list[int]]:
        """Resolved issue ids per agent, keyed by "name (email)"."""
        async with self._lock:
            agents = await self._agents.get_all()
            return {a.display_name: list(a.work_history) for a in agents}

    # ─── Issues ──────────────────────────────────────────────────────

    async def create_issue(
        self,
        transaction_id: str,
        issue_type: str,
        subject: str,
        description: str,
        customer_email: str,
    ) -> Issue:
        """Record a new OPEN issue. Does not assign it.

        Raises:
            ValidationError: if any field is blank.
        """
        fields = (transaction_id, issue_type, subject, description, customer_email)
        if any(not isinstance(f, str) or not f.strip() for f in fields):
            raise ValidationError("All issue fields must be non-empty.")

        async with self._lock:
            issue = await self._issues.save(
                Issue(
                    id=None,
                    transaction_id=transaction_id.strip(),
                    issue_type=resolve_issue_type(issue_type),
                    subject=subject.strip(),
                    description=description.strip(),
                    customer_email=customer_email.strip(),
                )
            )
            logger.info(
                "Issue %s created against transaction %r (%s)",
                issue.id, issue.transaction_id, issue.issue_type.value,
            )
            return issue

    async def get_issue(self, issue_id: int) -> Issue:
        async with self._lock:
            return await self._require_issue(issue_id)

    async def get_issues(self, filters: Mapping[str, str | None] | None = None) -> list[Issue]:
        """List issues matching every given filter.

        Raises:
            InvalidFilterError: on unknown keys or enumerated values.
        """
        issue_filter = build_filter(filters)
        async with self._lock:
            return apply_filter(await self._issues.get_all(), issue_filter)

    async def assign_issue(self, issue_id: int) -> Agent | None:
        """Assign an OPEN/WAITING issue, or park it in its waiting queue.

        Issues past that point are left alone and their current agent (if
        any) is returned.

        Raises:
            IssueNotFoundError: if the issue does not exist.
        """
        async with self._lock:
            issue = await self._require_issue(issue_id)

            if not issue.is_assignable():
                logger.info("Issue %s is already %s, not re-assigning", issue_id, issue.status.value)
                if issue.assigned_agent_id is None:
                    return None
                return await self._agents.get_by_id(issue.assigned_agent_id)

            agent = self._engine.find_and_assign(issue, await self._agents.get_all())
            await self._issues.save(issue)
            if agent is not None:
                await self._agents.save(agent)
            return agent

    async def resolve_issue(self, issue_id: int, resolution: str) -> Issue | None:
        """Resolve an IN_PROGRESS issue and let its agent pick up waiting work.

        Returns:
            The waiting issue the freed agent picked up, or None.

        Raises:
            IssueNotFoundError: if the issue does not exist.
            InvalidTransitionError: if the issue is not IN_PROGRESS.
            ValidationError: if the resolution is blank.
        """
        async with self._lock:
            issue = await self._require_issue(issue_id)

            if not check_resolvable(issue, resolution):
                logger.info("Issue %s is already %s", issue_id, issue.status.value)
                return None

            agent = None
            if issue.assigned_agent_id is not None:
                agent = await self._require_agent(issue.assigned_agent_id)

            issue.set_status(IssueStatus.RESOLVED)
            issue.set_resolution(resolution.strip())
            await self._issues.save(issue)
            logger.info("Issue %s marked RESOLVED", issue_id)

            if agent is None:
                logger.info("Issue %s was resolved without an assigned agent", issue_id)
                return None

            agent.record_resolved(issue.id)
            agent.mark_free()
            await self._agents.save(agent)
            return await self._drain(agent)

    async def update_issue(
        self,
        issue_id: int,
        status: IssueStatus | None = None,
        resolution: str | None = None,
    ) -> Issue:
        """Edit a non-terminal issue's status and/or resolution notes.

        Moving an issue off IN_PROGRESS releases its agent (without a history
        entry) and drains waiting work for that agent. Moving onto or off
        WAITING keeps the waiting queues in step; an issue re-queued this way
        joins its queue before the released agent drains, so that agent may
        take it straight back if it is the oldest work they can handle.

        Raises:
            IssueNotFoundError: if the issue does not exist.
            InvalidTransitionError: see status_transitions.check_update.
        """
        async with self._lock:
            issue = await self._require_issue(issue_id)
            check_update(issue, status)

            released = None
            if status is not None and status != issue.status:
                if issue.status == IssueStatus.IN_PROGRESS and issue.assigned_agent_id is not None:
                    released = await self._require_agent(issue.assigned_agent_id)

                if issue.status == IssueStatus.WAITING:
                    self._engine.queues.remove(issue.id)
                if released is not None:
                    issue.assigned_agent_id = None
                issue.set_status(status)

            if resolution is not None and resolution.strip():
                issue.set_resolution(resolution.strip())

            await self._issues.save(issue)
            logger.info("Issue %s updated: status=%s", issue_id, issue.status.value)

            if status == IssueStatus.WAITING and issue.id not in self._engine.queues:
                self._engine.queues.enqueue(issue.issue_type, issue.id)

            if released is not None:
                released.mark_free()
                await self._agents.save(released)
                logger.info("Agent %s released from issue %s", released.id, issue_id)
                await self._drain(released)

            return issue

    async def close_issue(self, issue_id: int) -> Issue:
        """Move a RESOLVED issue to CLOSED. Closing a CLOSED issue is a no-op.

        Raises:
            IssueNotFoundError: if the issue does not exist.
            InvalidTransitionError: if the issue is not RESOLVED yet.
        """
        async with self._lock:
            issue = await self._require_issue(issue_id)
            if not check_closable(issue):
                logger.info("Issue %s is already CLOSED", issue_id)
                return issue
            issue.set_status(IssueStatus.CLOSED)
            await self._issues.save(issue)
            logger.info("Issue %s marked CLOSED", issue_id)
            return issue

    async def waiting_snapshot(self) -> dict[str, list[int]]:
        """Waiting issue ids per category, head of queue first."""
        async with self._lock:
            return {cat.value: ids for cat, ids in self._engine.queues.snapshot().items()}

    # ─── Internals (caller holds the lock) ───────────────────────────

    async def _require_issue(self, issue_id: int) -> Issue:
        issue = await self._issues.get_by_id(issue_id)
        if issue is None:
            raise IssueNotFoundError(f"Issue with ID '{issue_id}' not found.")
        return issue

    async def _require_agent(self, agent_id: int) -> Agent:
        agent = await self._agents.get_by_id(agent_id)
        if agent is None:
            raise AgentNotFoundError(f"Agent with ID '{agent_id}' not found.")
        return agent

    async def _drain(self, agent: Agent) -> Issue | None:
        issues = {i.id: i for i in await self._issues.get_all()}
        picked = self._engine.drain_waiting_for(agent, issues)
        if picked is not None:
            await self._issues.save(picked)
            await self._agents.save(agent)
        return picked
