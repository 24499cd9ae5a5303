"""AssignmentEngine — round-robin assignment and waiting-queue draining."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from support_desk.domain.entities.agent import Agent
from support_desk.domain.entities.issue import Issue
from support_desk.domain.policies.round_robin import pick_next
from support_desk.domain.policies.waiting_queues import WaitingQueueSet
from support_desk.domain.value_objects.enums import IssueStatus, IssueType

logger = logging.getLogger(__name__)


class AssignmentEngine:
    """Decides which agent gets an issue, or parks the issue in a queue.

    Owns the per-category rotation index and the waiting queues. The two are
    always mutated together, so the engine must be driven from a single
    critical section (see IssueDispatchService).
    """

    def __init__(self, queues: WaitingQueueSet | None = None):
        self.queues = queues if queues is not None else WaitingQueueSet()
        self._last_index: dict[IssueType, int] = {}

    def last_index(self, category: IssueType) -> int:
        return self._last_index.get(category, -1)

    def find_and_assign(self, issue: Issue, agents: Iterable[Agent]) -> Agent | None:
        """Assign *issue* to the next free eligible agent, or enqueue it.

        Args:
            issue: an OPEN or WAITING issue.
            agents: every agent, in the store's enumeration order.

        Returns:
            The assigned agent, or None if the issue went to the waiting queue.
        """
        eligible = [a for a in agents if a.is_free() and a.can_handle(issue.issue_type)]

        if not eligible:
            # A WAITING issue retried by hand keeps its place in line
            if issue.id not in self.queues:
                self.queues.enqueue(issue.issue_type, issue.id)
            if issue.status != IssueStatus.WAITING:
                issue.set_status(IssueStatus.WAITING)
            logger.info(
                "No free agent for %s, issue %s is on the waitlist (depth=%d)",
                issue.issue_type.value, issue.id, self.queues.depth(issue.issue_type),
            )
            return None

        if issue.status == IssueStatus.WAITING:
            self.queues.remove(issue.id)

        agent, index = pick_next(eligible, self.last_index(issue.issue_type))
        self._last_index[issue.issue_type] = index

        agent.assign(issue.id)
        issue.assign_agent(agent.id)
        logger.info(
            "Issue %s → Agent %s (%s, rr index %d of %d)",
            issue.id, agent.id, issue.issue_type.value, index, len(eligible),
        )
        return agent

    def drain_waiting_for(self, agent: Agent, issues: Mapping[int, Issue]) -> Issue | None:
        """Hand the oldest eligible waiting issue to a just-freed agent.

        Categories are scanned in the agent's declared expertise order. Queue
        heads whose issue vanished or is no longer WAITING are dropped.
        """
        for category in agent.expertise:
            issue_id = self.queues.pop(category)
            if issue_id is None:
                continue

            issue = issues.get(issue_id)
            if issue is None or issue.status != IssueStatus.WAITING:
                logger.warning(
                    "Dropping stale waiting entry %s from %s queue", issue_id, category.value,
                )
                continue

            agent.assign(issue.id)
            issue.assign_agent(agent.id)
            logger.info("Agent %s picked up waiting issue %s", agent.id, issue.id)
            return issue

        logger.info("No suitable waiting issues for agent %s", agent.id)
        return None
